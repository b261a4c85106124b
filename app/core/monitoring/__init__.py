"""
Request tracing for the job board service.
"""

from .correlation_tracker import (
    CorrelationMiddleware,
    CorrelationTracker,
    get_correlation_tracker,
    get_current_correlation_id,
)

__all__ = [
    "CorrelationMiddleware",
    "CorrelationTracker",
    "get_correlation_tracker",
    "get_current_correlation_id",
]
