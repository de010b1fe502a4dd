# rentdesk/routes/leases.py
from flask import Blueprint, jsonify, request
from flask_jwt_extended import current_user, jwt_required

from ..errors import ValidationError
from ..extensions import db
from ..services.leases import LeaseService
from ..services.lifecycle import DEFAULT_EXPIRING_DAYS
from ..utils import iso, money
from . import page

bp = Blueprint("leases", __name__)


def _int_arg(name, default=None):
    raw = request.args.get(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")


@bp.get("/leases")
@jwt_required()
def list_leases():
    return page(*LeaseService(db.session).list(current_user.id, request.args)), 200


@bp.post("/leases")
@jwt_required()
def create_lease():
    lease = LeaseService(db.session).create(current_user.id, request.get_json(silent=True))
    return jsonify(lease.serialize()), 201


@bp.get("/leases/expired/check")
@jwt_required()
def check_expired_leases():
    """Run the expiration sweep now and list the caller's expired leases"""
    updated_count, expired = LeaseService(db.session).check_expired(current_user.id)
    return jsonify(
        updated_count=updated_count,
        expired_leases=[lease.serialize() for lease in expired],
    ), 200


@bp.get("/leases/expiring-soon")
@jwt_required()
def expiring_soon():
    days = _int_arg("days", DEFAULT_EXPIRING_DAYS)
    leases = LeaseService(db.session).expiring_soon(current_user.id, days)
    return jsonify(days=days, total=len(leases), items=[lease.serialize() for lease in leases]), 200


@bp.get("/leases/monthly-revenue")
@jwt_required()
def monthly_revenue():
    summary = LeaseService(db.session).monthly_revenue(
        current_user.id, year=_int_arg("year"), month=_int_arg("month")
    )
    return jsonify(
        year=summary["year"],
        month=summary["month"],
        total_revenue=money(summary["total_revenue"]),
        active_lease_count=summary["active_lease_count"],
        breakdown=[
            {
                "lease_id": row["lease_id"],
                "property_name": row["property_name"],
                "tenant_name": row["tenant_name"],
                "monthly_rent": money(row["monthly_rent"]),
                "start_date": iso(row["start_date"]),
                "end_date": iso(row["end_date"]),
            }
            for row in summary["breakdown"]
        ],
    ), 200


@bp.get("/leases/<int:lease_id>")
@jwt_required()
def get_lease(lease_id):
    return jsonify(LeaseService(db.session).get(current_user.id, lease_id).serialize()), 200


@bp.route("/leases/<int:lease_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_lease(lease_id):
    lease = LeaseService(db.session).update(current_user.id, lease_id, request.get_json(silent=True))
    return jsonify(lease.serialize()), 200


@bp.delete("/leases/<int:lease_id>")
@jwt_required()
def delete_lease(lease_id):
    LeaseService(db.session).delete(current_user.id, lease_id)
    return jsonify({"ok": True}), 200
