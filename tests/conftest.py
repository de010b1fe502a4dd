"""
Pytest configuration and fixtures for the RentDesk API tests.
"""
from datetime import date
from decimal import Decimal

import pytest
from flask_jwt_extended import create_access_token

from config import TestingConfig
from rentdesk import create_app
from rentdesk.extensions import db
from rentdesk.models import Lease, Property, Tenant, User
from rentdesk.models.user import ROLE_ADMIN, ROLE_OWNER


@pytest.fixture
def app():
    """App on an in-memory database, with an app context pushed for the whole test."""
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    return db.session


def _make_user(name, phone, role=ROLE_OWNER, password="secret123"):
    user = User(name=name, phone=phone, role=role)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


def _headers(user):
    token = create_access_token(identity=str(user.id), additional_claims={"role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def owner(app):
    return _make_user("Alice Owner", "+250788000001")


@pytest.fixture
def other_owner(app):
    return _make_user("Bob Owner", "+250788000002")


@pytest.fixture
def admin(app):
    return _make_user("Admin", "+250788000009", role=ROLE_ADMIN)


@pytest.fixture
def auth_headers(owner):
    return _headers(owner)


@pytest.fixture
def other_headers(other_owner):
    return _headers(other_owner)


@pytest.fixture
def admin_headers(admin):
    return _headers(admin)


@pytest.fixture
def make_property(app):
    def factory(owner, **kwargs):
        kwargs.setdefault("name", "Kigali Heights A1")
        kwargs.setdefault("address", "KG 7 Ave")
        kwargs.setdefault("property_type", "apartment")
        kwargs.setdefault("monthly_rent", Decimal("500.00"))
        prop = Property(owner_id=owner.id, **kwargs)
        db.session.add(prop)
        db.session.commit()
        return prop
    return factory


@pytest.fixture
def make_tenant(app):
    def factory(prop, **kwargs):
        kwargs.setdefault("name", "Jean Tenant")
        kwargs.setdefault("phone", "+250788111111")
        tenant = Tenant(property_id=prop.id, **kwargs)
        db.session.add(tenant)
        db.session.commit()
        return tenant
    return factory


@pytest.fixture
def make_lease(app):
    def factory(prop, tenant, **kwargs):
        kwargs.setdefault("start_date", date(2024, 1, 1))
        kwargs.setdefault("end_date", date(2024, 12, 31))
        kwargs.setdefault("monthly_rent", Decimal("500.00"))
        kwargs.setdefault("status", "active")
        lease = Lease(property_id=prop.id, tenant_id=tenant.id, **kwargs)
        db.session.add(lease)
        db.session.commit()
        return lease
    return factory
