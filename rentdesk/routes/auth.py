# rentdesk/routes/auth.py
from flask import Blueprint, jsonify, request
from flask_jwt_extended import create_access_token, current_user, jwt_required

from ..extensions import db
from ..models.user import ROLE_ADMIN
from ..security import role_required
from ..services.auth import AuthService

bp = Blueprint("auth", __name__)


@bp.post("/auth/login")
def login():
    user = AuthService(db.session).login(request.get_json(silent=True))
    token = create_access_token(identity=str(user.id), additional_claims={"role": user.role})
    return jsonify(user=user.serialize(), token=token), 200


@bp.get("/auth/profile")
@jwt_required()
def profile():
    return jsonify(AuthService(db.session).profile(current_user.id).serialize()), 200


@bp.post("/auth/register")
@role_required(ROLE_ADMIN)
def register():
    user = AuthService(db.session).register_owner(request.get_json(silent=True))
    return jsonify(user.serialize()), 201
