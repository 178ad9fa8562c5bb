from __future__ import annotations

from flask import Flask
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    OutOfWindowError,
    StoreFailure,
    ValidationError,
)
from .http import fail


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return fail(str(e), status=400, code="VALIDATION_ERROR")

    @app.errorhandler(AuthenticationError)
    def _authentication(e: AuthenticationError):
        return fail(str(e), status=401, code="AUTHENTICATION_FAILED")

    @app.errorhandler(ForbiddenError)
    def _forbidden(e: ForbiddenError):
        return fail(str(e), status=403, code="FORBIDDEN")

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return fail(str(e), status=404, code="NOT_FOUND")

    @app.errorhandler(OutOfWindowError)
    def _out_of_window(e: OutOfWindowError):
        detail = {
            "date": e.work_date.isoformat(),
            "earliest": e.earliest.isoformat(),
            "latest": e.latest.isoformat(),
            "deadline": e.deadline.isoformat() if e.deadline else None,
        }
        return fail(str(e), status=422, code="OUT_OF_WINDOW", detail=detail)

    @app.errorhandler(StoreFailure)
    def _store_failure(e: StoreFailure):
        app.logger.warning("store failure: %s", e.__cause__ or e)
        return fail(str(e), status=503, code="STORE_FAILURE", detail={"retryable": e.retryable})

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        app.logger.exception(e)
        return fail("Internal server error", status=500)
