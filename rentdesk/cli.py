import click
from flask import current_app
from flask.cli import AppGroup, with_appcontext

from .errors import ApiError
from .extensions import db
from .services.auth import AuthService
from .services.lifecycle import LeaseLifecycle

leases_cli = AppGroup("leases", help="Lease maintenance commands.")


@leases_cli.command("sweep")
def sweep_command():
    """Expire every active lease whose end date has passed."""
    try:
        count = LeaseLifecycle(db.session).sweep_expired_leases()
    except ApiError as e:
        raise click.ClickException(e.message)
    click.echo(f"Expired {count} lease(s).")


@click.command("seed-admin")
@click.option("--phone", default=None, help="Defaults to SU_PHONE.")
@click.option("--password", default=None, help="Defaults to SU_PASSWORD.")
@click.option("--name", default="Administrator", show_default=True)
@with_appcontext
def seed_admin_command(phone, password, name):
    """Create or reset the admin account."""
    phone = phone or current_app.config.get("SU_PHONE")
    password = password or current_app.config.get("SU_PASSWORD")
    try:
        user, created = AuthService(db.session).seed_admin(phone, password, name=name)
    except ApiError as e:
        raise click.ClickException(e.message)
    click.echo(f"{'Created' if created else 'Updated'} admin {user.phone} (id={user.id}).")


def register_cli(app):
    app.cli.add_command(leases_cli)
    app.cli.add_command(seed_admin_command)
