"""Exception handlers that give every error the same JSON envelope."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.logging import get_logger
from .body import MALFORMED_BODY_MESSAGE

logger = get_logger("errors")

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_body(status_code: int, message: str) -> dict:
    """401 keeps the old flat shape, everything else nests under ``message``."""
    if status_code == status.HTTP_401_UNAUTHORIZED:
        return {"error": message}
    return {"error": {"message": message}}


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    if error.get("type") == "json_invalid":
        return MALFORMED_BODY_MESSAGE
    # integer parts are list indexes or byte offsets, not field names
    loc = [
        str(part)
        for part in error.get("loc", ())
        if part not in ("body", "path", "query") and not isinstance(part, int)
    ]
    if loc:
        return f"Invalid '{'.'.join(loc)}': {error['msg']}"
    return error["msg"]


def register_exception_handlers(app: FastAPI) -> None:
    """Map exceptions to status codes and error bodies."""

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.info(f"Request validation failed on {request.url.path}: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(status.HTTP_400_BAD_REQUEST, message),
        )

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        # details stay in the log, never in the response
        logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(f"Unexpected error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE),
        )
