"""
Error taxonomy shared by services and controllers.

Services raise these; the handlers registered on the app turn them into the
standard ``{"error": {"code", "message"}}`` body.
"""

import logging

from werkzeug.exceptions import HTTPException

from fittrack.extensions import db
from fittrack.utils.http import error

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: str = None, **extra):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.extra = extra


class UnauthorizedError(ApiError):
    status = 401
    code = "UNAUTHORIZED"


class NotFoundError(ApiError):
    status = 404
    code = "NOT_FOUND"


class ValidationError(ApiError):
    status = 400
    code = "VALIDATION_ERROR"


class ConflictError(ApiError):
    status = 409
    code = "DUPLICATE_ENTRY"


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(exc: ApiError):
        db.session.rollback()
        return error(exc.code, exc.message, exc.status, **exc.extra)

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        return error(exc.name.upper().replace(" ", "_"), exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        db.session.rollback()
        logger.exception("Unhandled error")
        return error("INTERNAL_ERROR", "Something went wrong", 500)
