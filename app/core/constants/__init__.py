"""
Centralized constants module for the job board service.

This module provides centralized access to business rules, notification
types and error codes.
"""

from .business_constants import BusinessRules, NotificationTypes
from .error_constants import ErrorCodes, ErrorMessages

__all__ = [
    "BusinessRules",
    "NotificationTypes",
    "ErrorCodes",
    "ErrorMessages",
]
