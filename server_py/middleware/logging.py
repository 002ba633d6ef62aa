"""Logging middleware for HTTP requests."""
import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from core.logging import log_request, log_error


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log API requests with their status and duration."""

    def __init__(self, app, path_prefix: str = "/api"):
        super().__init__(app)
        self.path_prefix = path_prefix

    async def dispatch(self, request: Request, call_next):
        """Log request and response."""
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            log_error(f"Unhandled error on {request.method} {request.url.path}", "http", e)
            raise

        duration_ms = (time.perf_counter() - start) * 1000

        if request.url.path.startswith(self.path_prefix):
            log_request(
                request.method,
                request.url.path,
                response.status_code,
                duration_ms
            )

        return response
