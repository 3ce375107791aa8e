# backend/greenxp/errors.py
"""
Error taxonomy for the mission ledger.

Every failure is answered with a single JSON body ``{"error": <message>}``
and the status code carried by the exception class.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class LedgerError(Exception):
    """Base class for errors reported to the API caller."""
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(LedgerError):
    """Missing or invalid request field."""
    status_code = 400


class AuthError(LedgerError):
    """Missing admin credential."""
    status_code = 401


class Forbidden(AuthError):
    """Caller is known but lacks the admin role."""
    status_code = 403


class NotFoundError(LedgerError):
    status_code = 404


class ConflictError(LedgerError):
    status_code = 409


class DataAccessError(LedgerError):
    """Storage failure; the driver's message is echoed to the caller."""
    status_code = 500


def error_response(err: LedgerError) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content={"error": err.message})


def _describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for e in exc.errors():
        loc = ".".join(str(p) for p in e.get("loc", ())[1:])
        parts.append(f"{loc}: {e.get('msg')}" if loc else str(e.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(LedgerError)
    async def _ledger_error(request: Request, exc: LedgerError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return error_response(exc)

    @app.exception_handler(SQLAlchemyError)
    async def _storage_error(request: Request, exc: SQLAlchemyError):
        logger.error("%s %s storage error", request.method, request.url.path, exc_info=exc)
        # the driver message without SQLAlchemy's statement dump
        orig = getattr(exc, "orig", None)
        return error_response(DataAccessError(str(orig if orig is not None else exc)))

    @app.exception_handler(RequestValidationError)
    async def _request_invalid(request: Request, exc: RequestValidationError):
        return error_response(ValidationError(_describe_validation(exc)))

    # anything else (driver bind errors, bugs) still answers in the same JSON shape
    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception):
        logger.error("%s %s unhandled error", request.method, request.url.path, exc_info=exc)
        return error_response(DataAccessError(str(exc) or exc.__class__.__name__))
