"""
Correlation ID tracking for request tracing.

Every request carries a correlation ID (taken from the caller's headers or
generated), which is echoed in the response headers and in error bodies.
"""

import uuid
from contextvars import ContextVar
from datetime import datetime
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.utils.logger import logger


correlation_id_context: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


class CorrelationTracker:
    """Creates, reads and propagates correlation IDs."""

    DEFAULT_HEADER_NAME = "X-Correlation-ID"
    FALLBACK_HEADERS = ("X-Trace-ID", "X-Request-ID")

    def __init__(self, header_name: str = DEFAULT_HEADER_NAME):
        self.header_name = header_name

    @classmethod
    def generate_correlation_id(cls) -> str:
        return str(uuid.uuid4())

    @classmethod
    def get_current_correlation_id(cls) -> Optional[str]:
        return correlation_id_context.get()

    @classmethod
    def set_correlation_id(cls, correlation_id: Optional[str]) -> None:
        correlation_id_context.set(correlation_id)

    def extract_correlation_id(self, request: Request) -> str:
        """Correlation ID from the request headers, or a new one."""
        correlation_id = request.headers.get(self.header_name)
        for header in self.FALLBACK_HEADERS:
            if correlation_id:
                break
            correlation_id = request.headers.get(header)

        return correlation_id or self.generate_correlation_id()


class CorrelationMiddleware(BaseHTTPMiddleware):
    """
    FastAPI middleware for automatic correlation ID tracking.
    """

    def __init__(self, app, tracker: Optional[CorrelationTracker] = None):
        super().__init__(app)
        self.tracker = tracker or CorrelationTracker()

    async def dispatch(self, request: Request, call_next):
        correlation_id = self.tracker.extract_correlation_id(request)
        self.tracker.set_correlation_id(correlation_id)
        # Read by the 500 handler, which runs after the context variable is reset
        request.state.correlation_id = correlation_id
        start_time = datetime.utcnow()

        try:
            response = await call_next(request)
        except Exception as e:
            duration = (datetime.utcnow() - start_time).total_seconds() * 1000
            logger.error(
                "Request failed",
                correlation_id=correlation_id,
                method=request.method,
                path=request.url.path,
                error=str(e),
                duration_ms=round(duration, 2),
            )
            raise
        finally:
            self.tracker.set_correlation_id(None)

        response.headers[self.tracker.header_name] = correlation_id

        duration = (datetime.utcnow() - start_time).total_seconds() * 1000
        logger.info(
            "Request completed",
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration, 2),
        )
        return response


_global_tracker = CorrelationTracker()


def get_correlation_tracker() -> CorrelationTracker:
    """Get the global correlation tracker instance."""
    return _global_tracker


def get_current_correlation_id() -> Optional[str]:
    """Get the current correlation ID (convenience function)."""
    return CorrelationTracker.get_current_correlation_id()
