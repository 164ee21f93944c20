"""
Typed request failures and the handlers that render them.

Each error class carries a ``kind`` tag and the HTTP status it maps to, so
CRUD code raises what went wrong and the app decides nothing per route. Every
failure is rendered as ``{"error": "<message>"}``.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    kind = "error"
    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(ApiError):
    """A read-by-id found nothing."""
    kind = "not_found"
    status_code = 404


class RecordNotFoundError(ApiError):
    """The target of an update or delete does not exist."""
    kind = "record_not_found"
    status_code = 400


class ConstraintViolationError(ApiError):
    """Unique, foreign key or not-null constraint rejected the write."""
    kind = "constraint_violation"
    status_code = 400


class ValidationFailedError(ApiError):
    kind = "validation"
    status_code = 400


class PersistenceError(ApiError):
    kind = "persistence"
    status_code = 400


def error_body(message: str) -> dict:
    return {"error": message}


def format_validation_errors(errors) -> str:
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query")]
        msg = err.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        logger.warning("%s %s failed (%s): %s", request.method, request.url.path, exc.kind, exc.message)
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        failure = ValidationFailedError(format_validation_errors(exc.errors()))
        return await api_error_handler(request, failure)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )
