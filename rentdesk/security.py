# rentdesk/security.py
from functools import wraps

from flask import jsonify
from flask_jwt_extended import get_jwt, verify_jwt_in_request

from .errors import Forbidden
from .extensions import db
from .models import User


def role_required(*allowed):
    """Usage: @role_required("admin")"""
    def deco(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            if get_jwt().get("role") not in allowed:
                raise Forbidden()
            return fn(*args, **kwargs)
        return wrapper
    return deco


def init_jwt(jwt):
    """Wire user loading and error responses into the JWTManager.

    A missing token is 401; a token that is present but invalid or expired
    is 403.
    """

    @jwt.user_lookup_loader
    def _load_user(_jwt_header, jwt_data):
        try:
            return db.session.get(User, int(jwt_data["sub"]))
        except (TypeError, ValueError):
            return None

    @jwt.user_lookup_error_loader
    def _user_missing(_jwt_header, _jwt_data):
        return jsonify(error="unauthorized", message="Invalid token"), 401

    @jwt.unauthorized_loader
    def _missing_token(reason):
        return jsonify(error="unauthorized", message="Access token required"), 401

    @jwt.invalid_token_loader
    def _invalid_token(reason):
        return jsonify(error="forbidden", message="Invalid or expired token"), 403

    @jwt.expired_token_loader
    def _expired_token(_jwt_header, _jwt_data):
        return jsonify(error="forbidden", message="Invalid or expired token"), 403
