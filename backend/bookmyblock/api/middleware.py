"""
Request middleware for logging, timing, and request ID tracking.
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
import structlog

from bookmyblock.core.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
DASHBOARD_HEADER = "X-Dashboard"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Binds request id, method, path and (when sent) dashboard into the
    structlog context, logs one line per request and echoes the id back.

    An incoming X-Request-ID is kept, and the catalogue forwards it on its
    calls to the owner endpoints, so one user request can be followed
    across both sides in the logs.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        context = {"request_id": request_id, "method": request.method, "path": request.url.path}
        if request.headers.get(DASHBOARD_HEADER):
            context["dashboard"] = request.headers[DASHBOARD_HEADER]

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(**context)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error("request_failed", error=str(e), duration_ms=_elapsed_ms(started))
            raise

        duration_ms = _elapsed_ms(started)
        log = logger.warning if response.status_code >= 500 else logger.info
        log("request_completed", status_code=response.status_code, duration_ms=duration_ms)

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Response-Time"] = f"{duration_ms}ms"
        return response
