"""
Unified error handling utilities for the job board service.

Domain services raise the application errors defined here; the FastAPI
exception handlers registered in `app.main` turn them into JSON responses
with the status code chosen by `ErrorHandler`.
"""

from datetime import datetime
from typing import Any, Dict, Optional
import logging

from app.core.constants import ErrorCodes, ErrorMessages

logger = logging.getLogger(__name__)


class BaseApplicationError(Exception):
    """
    Base exception class for all application-specific errors.

    Provides structured error information with error codes, correlation IDs,
    and additional context for debugging and user feedback.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: str = ErrorCodes.SYSTEM_INTERNAL_ERROR,
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
        user_message: Optional[str] = None,
    ):
        self.message = message or ErrorMessages.get_message(error_code)
        self.error_code = error_code
        self.correlation_id = correlation_id
        self.details = details or {}
        self.original_error = original_error
        self.user_message = user_message or self.message
        self.timestamp = datetime.utcnow()

        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return ErrorHandler.get_status_code_for_error_code(self.error_code)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary format for API responses."""
        error_dict = {
            "success": False,
            "error_code": self.error_code,
            "message": self.user_message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }

        if self.correlation_id:
            error_dict["correlation_id"] = self.correlation_id

        return error_dict

    def log_error(self, logger_instance: Optional[logging.Logger] = None):
        """Log error with appropriate level and context."""
        log = logger_instance or logger

        error_context = {
            "error_code": self.error_code,
            "correlation_id": self.correlation_id,
            "details": self.details,
        }

        if self.status_code >= 500:
            log.error(
                f"Application error: {self.message}",
                extra=error_context,
                exc_info=self.original_error,
            )
        else:
            log.warning(f"Application error: {self.message}", extra=error_context)


class ValidationError(BaseApplicationError):
    """Exception for validation-related errors."""

    def __init__(
        self,
        message: Optional[str] = None,
        field_name: Optional[str] = None,
        field_value: Any = None,
        error_code: str = ErrorCodes.VALIDATION_INVALID_FORMAT,
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = dict(details or {})
        if field_name:
            details["field_name"] = field_name
        if field_value is not None:
            details["field_value"] = str(field_value)

        super().__init__(
            message=message,
            error_code=error_code,
            correlation_id=correlation_id,
            details=details,
        )
        self.field_name = field_name
        self.field_value = field_value


class AuthenticationError(BaseApplicationError):
    """Exception for authentication-related errors."""

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: str = ErrorCodes.AUTH_TOKEN_INVALID,
        correlation_id: Optional[str] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            correlation_id=correlation_id,
        )


class AuthorizationError(BaseApplicationError):
    """Exception for role or ownership violations."""

    def __init__(
        self,
        message: Optional[str] = None,
        required_role: Optional[str] = None,
        correlation_id: Optional[str] = None,
    ):
        details = {}
        if required_role:
            details["required_role"] = required_role
            message = message or ErrorMessages.get_message(
                ErrorCodes.AUTH_INSUFFICIENT_PERMISSIONS,
                role=required_role.capitalize(),
            )

        super().__init__(
            message=message or "Access denied",
            error_code=ErrorCodes.AUTH_INSUFFICIENT_PERMISSIONS,
            correlation_id=correlation_id,
            details=details,
        )


class ResourceNotFoundError(BaseApplicationError):
    """Exception for resource not found errors."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Optional[Any] = None,
        error_code: str = ErrorCodes.RESOURCE_JOB_NOT_FOUND,
        message: Optional[str] = None,
        correlation_id: Optional[str] = None,
    ):
        super().__init__(
            message=message or ErrorMessages.get_message(error_code),
            error_code=error_code,
            correlation_id=correlation_id,
            details={
                "resource_type": resource_type,
                "resource_id": str(resource_id) if resource_id is not None else None,
            },
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class BusinessRuleError(BaseApplicationError):
    """Exception for requests that are well-formed but violate a domain rule."""

    def __init__(
        self,
        error_code: str,
        message: Optional[str] = None,
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            correlation_id=correlation_id,
            details=details,
        )


class ErrorHandler:
    """
    Centralized error handling utility class.

    Provides methods for error classification and status code mapping.
    """

    _STATUS_BY_CODE = {
        # Authentication errors (401)
        ErrorCodes.AUTH_TOKEN_INVALID: 401,
        ErrorCodes.AUTH_TOKEN_EXPIRED: 401,
        ErrorCodes.AUTH_TOKEN_MISSING: 401,
        # Authorization errors (403)
        ErrorCodes.AUTH_INSUFFICIENT_PERMISSIONS: 403,
        # Validation errors (400)
        ErrorCodes.VALIDATION_REQUIRED_FIELD_MISSING: 400,
        ErrorCodes.VALIDATION_INVALID_FORMAT: 400,
        ErrorCodes.VALIDATION_VALUE_OUT_OF_RANGE: 400,
        ErrorCodes.VALIDATION_RESUME_REQUIRED: 400,
        # Not found errors (404)
        ErrorCodes.RESOURCE_JOB_NOT_FOUND: 404,
        ErrorCodes.RESOURCE_APPLICATION_NOT_FOUND: 404,
        ErrorCodes.RESOURCE_PROFILE_NOT_FOUND: 404,
        ErrorCodes.RESOURCE_COMPANY_NOT_FOUND: 404,
        ErrorCodes.RESOURCE_NOTIFICATION_NOT_FOUND: 404,
        # Service errors (503)
        ErrorCodes.SERVICE_DATABASE_UNAVAILABLE: 503,
        # Business logic errors
        ErrorCodes.BUSINESS_JOB_NOT_OPEN: 404,
        ErrorCodes.BUSINESS_ALREADY_APPLIED: 400,
        ErrorCodes.BUSINESS_ALREADY_SAVED: 400,
        ErrorCodes.BUSINESS_ALREADY_REPORTED: 400,
    }

    @staticmethod
    def get_status_code_for_error_code(error_code: str) -> int:
        """Map error codes to HTTP status codes."""
        return ErrorHandler._STATUS_BY_CODE.get(error_code, 500)

    @staticmethod
    def classify_error(error: Exception) -> Dict[str, Any]:
        """
        Classify error and determine appropriate response information.

        Args:
            error: Exception to classify

        Returns:
            Dictionary with error classification information
        """
        if isinstance(error, BaseApplicationError):
            return {
                "type": "application_error",
                "error_code": error.error_code,
                "message": error.message,
                "user_message": error.user_message,
                "status_code": error.status_code,
                "details": error.details,
                "log_level": "error" if error.status_code >= 500 else "warning",
            }

        if isinstance(error, PermissionError):
            return {
                "type": "permission_error",
                "error_code": ErrorCodes.AUTH_INSUFFICIENT_PERMISSIONS,
                "message": str(error),
                "user_message": "Permission denied for this operation.",
                "status_code": 403,
                "details": {},
                "log_level": "warning",
            }

        if isinstance(error, (ConnectionError, TimeoutError)):
            return {
                "type": "connection_error",
                "error_code": ErrorCodes.SERVICE_DATABASE_UNAVAILABLE,
                "message": str(error),
                "user_message": "Service temporarily unavailable. Please try again later.",
                "status_code": 503,
                "details": {},
                "log_level": "error",
            }

        return {
            "type": "unknown_error",
            "error_code": ErrorCodes.SYSTEM_INTERNAL_ERROR,
            "message": str(error),
            "user_message": ErrorMessages.get_message(ErrorCodes.SYSTEM_INTERNAL_ERROR),
            "status_code": 500,
            "details": {"error_type": type(error).__name__},
            "log_level": "error",
        }

    @staticmethod
    def log_error(
        error: Exception,
        correlation_id: Optional[str] = None,
        additional_context: Optional[Dict[str, Any]] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Log error with appropriate level and context."""
        log = logger_instance or logger

        error_info = ErrorHandler.classify_error(error)

        log_context = {
            "error_type": error_info["type"],
            "error_code": error_info["error_code"],
            "correlation_id": correlation_id,
        }
        if additional_context:
            log_context.update(additional_context)

        log_message = f"Error occurred: {error_info['message']}"
        if error_info["log_level"] == "error":
            log.error(log_message, extra=log_context, exc_info=error)
        else:
            log.warning(log_message, extra=log_context)

