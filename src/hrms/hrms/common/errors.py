from __future__ import annotations

from flask import Flask, render_template, request
from mysql.connector import errors as mysql_errors
from werkzeug.exceptions import HTTPException, NotFound

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .log import get_logger
from .web import fail

logger = get_logger(__name__)

_STATUS = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
)


def status_for(exc: DomainError) -> int:
    for cls, status in _STATUS:
        if isinstance(exc, cls):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return fail(str(e), status_for(e))

    @app.errorhandler(mysql_errors.IntegrityError)
    def handle_integrity_error(e: mysql_errors.IntegrityError):
        logger.warning("integrity error", extra={"path": request.path, "error_message": e.msg})
        return fail(f"Conflicts with existing data: {e.msg}", 409)

    @app.errorhandler(mysql_errors.Error)
    def handle_database_error(e: mysql_errors.Error):
        logger.error("database error", extra={"path": request.path, "error_message": str(e)})
        return fail(f"Database error: {e.msg or e}", 500)

    @app.errorhandler(NotFound)
    def handle_not_found(e: NotFound):
        return render_template("404.html"), 404

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return fail(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unhandled exception", extra={"path": request.path, "method": request.method})
        message = str(e) if app.config.get("DEBUG") else "Internal server error"
        return fail(message, 500)
