"""Global exception handlers.

Every failure is rendered as ``{"success": false, "message": ...}``:
    - FitPulseError -> its own status code
    - RequestValidationError -> 400 naming the first offending field
    - HTTPException (unknown route, wrong method) -> its status code
    - anything else -> 500; the exception text is only exposed in development
"""

from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.exceptions import FitPulseError
from utils.helpers import format_response
from utils.logger import setup_logger

logger = setup_logger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in _LOCATION_PREFIXES)
    message = first.get("msg", "Invalid value").removeprefix("Value error, ")
    return f"{field}: {message}" if field else message


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(FitPulseError)
    async def fitpulse_error_handler(request: Request, exc: FitPulseError):
        if exc.status_code >= 500:
            logger.error(f"{exc!r} on {request.method} {request.url.path}")
        else:
            logger.info(f"{exc.status_code} on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = describe_validation_error(exc)
        logger.info(f"Validation error on {request.url.path}: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=format_response(message=message, success=False),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=format_response(message=str(exc.detail), success=False),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        content: Dict[str, Any] = format_response(message="Internal Server Error", success=False)
        if request.app.state.settings.is_development:
            content["error"] = str(exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)
