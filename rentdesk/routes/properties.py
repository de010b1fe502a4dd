from flask import Blueprint, jsonify, request
from flask_jwt_extended import current_user, jwt_required

from ..extensions import db
from ..services.properties import PropertyService
from . import page

bp = Blueprint("properties", __name__)


def _service():
    return PropertyService(db.session)


@bp.get("/properties")
@jwt_required()
def list_properties():
    """List the caller's properties with optional search and filters"""
    return page(*_service().list(current_user.id, request.args)), 200


@bp.post("/properties")
@jwt_required()
def create_property():
    prop = _service().create(current_user.id, request.get_json(silent=True))
    return jsonify(prop.serialize()), 201


@bp.get("/properties/available")
@jwt_required()
def available_properties():
    """Active properties with no active lease"""
    items = _service().available_properties(current_user.id)
    return jsonify(total=len(items), items=[p.serialize() for p in items]), 200


@bp.get("/properties/<int:property_id>")
@jwt_required()
def get_property(property_id):
    return jsonify(_service().get(current_user.id, property_id).serialize()), 200


@bp.route("/properties/<int:property_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_property(property_id):
    prop = _service().update(current_user.id, property_id, request.get_json(silent=True))
    return jsonify(prop.serialize()), 200


@bp.delete("/properties/<int:property_id>")
@jwt_required()
def delete_property(property_id):
    _service().delete(current_user.id, property_id)
    return jsonify({"ok": True}), 200


@bp.get("/properties/<int:property_id>/availability")
@jwt_required()
def property_availability(property_id):
    return jsonify(_service().check_availability(current_user.id, property_id)), 200
