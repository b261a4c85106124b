"""
Error codes and standardized error messages for the job board service.
"""


class ErrorCodes:
    """Standardized error codes following conventional patterns."""

    # Authentication and Authorization (1000-1099)
    AUTH_TOKEN_INVALID = "AUTH_1001"
    AUTH_TOKEN_EXPIRED = "AUTH_1002"
    AUTH_TOKEN_MISSING = "AUTH_1003"
    AUTH_INSUFFICIENT_PERMISSIONS = "AUTH_1004"

    # Input Validation (1100-1199)
    VALIDATION_REQUIRED_FIELD_MISSING = "VAL_1101"
    VALIDATION_INVALID_FORMAT = "VAL_1102"
    VALIDATION_VALUE_OUT_OF_RANGE = "VAL_1103"
    VALIDATION_RESUME_REQUIRED = "VAL_1105"

    # Resource Not Found (1200-1299)
    RESOURCE_JOB_NOT_FOUND = "RES_1202"
    RESOURCE_APPLICATION_NOT_FOUND = "RES_1203"
    RESOURCE_PROFILE_NOT_FOUND = "RES_1204"
    RESOURCE_COMPANY_NOT_FOUND = "RES_1205"
    RESOURCE_NOTIFICATION_NOT_FOUND = "RES_1206"

    # Service Errors (1400-1499)
    SERVICE_DATABASE_UNAVAILABLE = "SVC_1401"

    # System Errors (1500-1599)
    SYSTEM_INTERNAL_ERROR = "SYS_1501"

    # Business Logic Errors (1600-1699)
    BUSINESS_JOB_NOT_OPEN = "BIZ_1601"
    BUSINESS_ALREADY_APPLIED = "BIZ_1602"
    BUSINESS_ALREADY_SAVED = "BIZ_1603"
    BUSINESS_ALREADY_REPORTED = "BIZ_1604"


class ErrorMessages:
    """Standardized error messages corresponding to error codes."""

    AUTH_MESSAGES = {
        ErrorCodes.AUTH_TOKEN_INVALID: "Token is invalid or expired",
        ErrorCodes.AUTH_TOKEN_EXPIRED: "Authentication token has expired",
        ErrorCodes.AUTH_TOKEN_MISSING: "No authentication token, access denied",
        ErrorCodes.AUTH_INSUFFICIENT_PERMISSIONS: "Access denied. {role} only.",
    }

    VALIDATION_MESSAGES = {
        ErrorCodes.VALIDATION_REQUIRED_FIELD_MISSING: "Required field '{field}' is missing",
        ErrorCodes.VALIDATION_INVALID_FORMAT: "Field '{field}' has invalid format: {details}",
        ErrorCodes.VALIDATION_VALUE_OUT_OF_RANGE: "Value for '{field}' is out of acceptable range",
        ErrorCodes.VALIDATION_RESUME_REQUIRED: "Please upload a resume to apply",
    }

    RESOURCE_MESSAGES = {
        ErrorCodes.RESOURCE_JOB_NOT_FOUND: "Job not found",
        ErrorCodes.RESOURCE_APPLICATION_NOT_FOUND: "Application not found or unauthorized",
        ErrorCodes.RESOURCE_PROFILE_NOT_FOUND: "Profile not found",
        ErrorCodes.RESOURCE_COMPANY_NOT_FOUND: "Company not found",
        ErrorCodes.RESOURCE_NOTIFICATION_NOT_FOUND: "Notification not found",
    }

    SERVICE_MESSAGES = {
        ErrorCodes.SERVICE_DATABASE_UNAVAILABLE: "Database service is unavailable",
    }

    SYSTEM_MESSAGES = {
        ErrorCodes.SYSTEM_INTERNAL_ERROR: "Server error",
    }

    BUSINESS_MESSAGES = {
        ErrorCodes.BUSINESS_JOB_NOT_OPEN: "Job not found or no longer accepting applications",
        ErrorCodes.BUSINESS_ALREADY_APPLIED: "You have already applied to this job",
        ErrorCodes.BUSINESS_ALREADY_SAVED: "Job already saved",
        ErrorCodes.BUSINESS_ALREADY_REPORTED: "You have already reported this job",
    }

    DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"

    @classmethod
    def get_message(cls, error_code: str, **kwargs) -> str:
        """Get formatted error message for given error code."""
        all_messages = {
            **cls.AUTH_MESSAGES,
            **cls.VALIDATION_MESSAGES,
            **cls.RESOURCE_MESSAGES,
            **cls.SERVICE_MESSAGES,
            **cls.SYSTEM_MESSAGES,
            **cls.BUSINESS_MESSAGES,
        }

        message_template = all_messages.get(error_code, cls.DEFAULT_ERROR_MESSAGE)

        try:
            return message_template.format(**kwargs)
        except KeyError:
            return message_template
