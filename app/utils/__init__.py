"""
Shared utilities for the job board service.

This package provides the structured logger and the application error
hierarchy used across the domain and API layers.
"""

from .logger import logger

from .error_handling import (
    BaseApplicationError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ResourceNotFoundError,
    BusinessRuleError,
    ErrorHandler,
)

__all__ = [
    "logger",
    "BaseApplicationError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ResourceNotFoundError",
    "BusinessRuleError",
    "ErrorHandler",
]
