from __future__ import annotations

from flask import Flask
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    ImportFileError,
    NotFoundError,
    ValidationError,
)
from .http import fail

_STATUS = (
    (AuthenticationError, 401, "UNAUTHENTICATED"),
    (AuthorizationError, 403, "FORBIDDEN"),
    (NotFoundError, 404, "NOT_FOUND"),
    (ConflictError, 409, "CONFLICT"),
    (ValidationError, 422, "VALIDATION_ERROR"),
    (ImportFileError, 500, "IMPORT_FILE_ERROR"),
)


def status_for(e: DomainError) -> tuple[int, str]:
    for cls, status, code in _STATUS:
        if isinstance(e, cls):
            return status, code
    return 400, "DOMAIN_ERROR"


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        status, code = status_for(e)
        if status >= 500:
            app.logger.error("request failed: %s", e)
        return fail(str(e) or code, status=status, code=code)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _500(e: Exception):
        app.logger.exception(e)
        return fail("Internal server error", status=500)
