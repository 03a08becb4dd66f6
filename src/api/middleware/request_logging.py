import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("src.api.request")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request"""

    async def dispatch(self, request: Request, call_next):
        method = request.method
        path = request.url.path

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = round((time.perf_counter() - started) * 1000, 2)
            logger.error(f"{method} {path} -> 500 ({duration_ms}ms)", exc_info=True)
            raise

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(f"{method} {path} -> {response.status_code} ({duration_ms}ms)")
        return response
