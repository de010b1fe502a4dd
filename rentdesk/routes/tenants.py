from flask import Blueprint, jsonify, request
from flask_jwt_extended import current_user, jwt_required

from ..extensions import db
from ..services.tenants import TenantService
from . import page

bp = Blueprint("tenants", __name__)


@bp.get("/tenants")
@jwt_required()
def list_tenants():
    return page(*TenantService(db.session).list(current_user.id, request.args)), 200


@bp.post("/tenants")
@jwt_required()
def create_tenant():
    """Assign a new tenant to an available property"""
    tenant = TenantService(db.session).create(current_user.id, request.get_json(silent=True))
    return jsonify(tenant.serialize()), 201


@bp.get("/tenants/<int:tenant_id>")
@jwt_required()
def get_tenant(tenant_id):
    return jsonify(TenantService(db.session).get(current_user.id, tenant_id).serialize()), 200


@bp.route("/tenants/<int:tenant_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_tenant(tenant_id):
    tenant = TenantService(db.session).update(current_user.id, tenant_id, request.get_json(silent=True))
    return jsonify(tenant.serialize()), 200


@bp.delete("/tenants/<int:tenant_id>")
@jwt_required()
def delete_tenant(tenant_id):
    TenantService(db.session).delete(current_user.id, tenant_id)
    return jsonify({"ok": True}), 200
