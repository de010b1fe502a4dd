from datetime import datetime

from flask import Blueprint, jsonify

bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    return jsonify(
        success=True,
        message="RentDesk API is running",
        timestamp=datetime.utcnow().isoformat() + "Z",
    ), 200
