"""
FastAPI middleware for observability.

CorrelationMiddleware assigns every request an X-Correlation-ID (reusing the
caller's when present). RequestLoggingMiddleware logs one line per request
with status and latency; health probes are logged at DEBUG only.

Dependencies: fastapi, starlette, portfolio_assistant.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from portfolio_assistant.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
QUIET_PATH_PREFIXES = ("/api/health",)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and latency for each request."""

    async def dispatch(self, request: Request, call_next):
        """
        For event streams the latency covers time to first byte; the body is
        still being produced when call_next returns.
        """
        started = time.perf_counter()
        method = request.method
        path = request.url.path
        level = logging.DEBUG if path.startswith(QUIET_PATH_PREFIXES) else logging.INFO

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - unhandled {type(e).__name__}",
                extra={
                    "method": method,
                    "path": path,
                    "process_time_ms": _elapsed_ms(started),
                    "error_type": type(e).__name__,
                },
            )
            raise

        streaming = response.headers.get("content-type", "").startswith("text/event-stream")
        logger.log(
            level,
            f"{method} {path} - {response.status_code}"
            + (" (stream opened)" if streaming else ""),
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "process_time_ms": _elapsed_ms(started),
                "client_host": request.client.host if request.client else None,
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Binds a correlation ID to the request context and echoes it back."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
