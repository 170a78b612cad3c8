"""
Error types and the exception handlers that render every failure in the
uniform response envelope: {"success": false, "message": ...}.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from bookmyblock.core.logging import get_logger

logger = get_logger(__name__)


class UpstreamServiceError(Exception):
    """A peer service answered with an error or could not be reached."""


class PinningError(Exception):
    """The pinning gateway rejected or failed an upload or fetch."""


def _envelope(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, **extra},
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    response = _envelope(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    logger.info("request_validation_failed", errors=errors)
    summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        f"Validation failed: {summary}" if summary else "Validation failed",
        errors=errors,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", error=str(exc))
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
