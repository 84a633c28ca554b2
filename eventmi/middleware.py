"""Application middleware."""
import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    # Paths not worth a log line
    QUIET_PREFIXES = ("/static/", "/favicon.ico")

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        path = request.url.path
        if not path.startswith(self.QUIET_PREFIXES):
            logger.info(
                "%s %s -> %s (%.1f ms)",
                request.method, path, response.status_code, elapsed_ms
            )
        return response
