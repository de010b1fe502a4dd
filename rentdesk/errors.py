# rentdesk/errors.py
import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map onto a JSON error response."""

    status_code = 500
    error = "server_error"
    message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {"error": self.error, "message": self.message}


class ValidationError(ApiError):
    status_code = 400
    error = "validation_error"
    message = "Invalid request data"


class Unauthorized(ApiError):
    status_code = 401
    error = "unauthorized"
    message = "Authentication required"


class Forbidden(ApiError):
    status_code = 403
    error = "forbidden"
    message = "Insufficient permissions"


class NotFound(ApiError):
    status_code = 404
    error = "not_found"
    message = "Not found"


class LeaseConflict(ApiError):
    status_code = 409
    error = "lease_conflict"
    message = "Property already has an active lease"


class PropertyOccupied(LeaseConflict):
    error = "property_occupied"
    message = "Property is already rented"


class DuplicateRecord(ApiError):
    status_code = 409
    error = "duplicate"
    message = "Record already exists"


class StoreFailure(ApiError):
    """A read or write against the database failed."""

    status_code = 500
    error = "store_failure"
    message = "Internal server error"


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def api_error(e):
        if e.status_code >= 500:
            logger.error("%s: %s", type(e).__name__, e, exc_info=e.__cause__ or e)
            return jsonify(error=e.error, message=ApiError.message), e.status_code
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def http_error(e):
        code = (e.name or "error").lower().replace(" ", "_")
        return jsonify(error=code, message=e.description), e.code

    @app.errorhandler(Exception)
    def server_error(e):
        logger.exception("Unhandled exception: %s", e)
        return jsonify(error="server_error", message="Internal server error"), 500
