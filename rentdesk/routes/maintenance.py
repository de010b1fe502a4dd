from flask import Blueprint, jsonify, request
from flask_jwt_extended import current_user, jwt_required

from ..extensions import db
from ..services.maintenance import MaintenanceService
from . import page

bp = Blueprint("maintenance", __name__)


@bp.get("/maintenance")
@jwt_required()
def list_requests():
    return page(*MaintenanceService(db.session).list(current_user.id, request.args)), 200


@bp.post("/maintenance")
@jwt_required()
def create_request():
    record = MaintenanceService(db.session).create(current_user.id, request.get_json(silent=True))
    return jsonify(record.serialize()), 201


@bp.get("/maintenance/<int:request_id>")
@jwt_required()
def get_request(request_id):
    return jsonify(MaintenanceService(db.session).get(current_user.id, request_id).serialize()), 200


@bp.route("/maintenance/<int:request_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_request(request_id):
    record = MaintenanceService(db.session).update(current_user.id, request_id, request.get_json(silent=True))
    return jsonify(record.serialize()), 200


@bp.delete("/maintenance/<int:request_id>")
@jwt_required()
def delete_request(request_id):
    MaintenanceService(db.session).delete(current_user.id, request_id)
    return jsonify({"ok": True}), 200
