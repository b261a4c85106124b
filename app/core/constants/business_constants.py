"""
Business rules for the job board service.

Values that operators may want to tune live in the configuration
(`RECOMMENDATION_LIMIT`, `JOB_REPORT_THRESHOLD`, ...); the constants here
are the defaults and the fixed vocabularies of the domain.
"""

from typing import Dict


class BusinessRules:
    """Core business logic constants and rules."""

    # Recommendation
    DEFAULT_RECOMMENDATION_LIMIT = 10
    DEFAULT_RECOMMENDATION_WORKING_SET = 100

    # Moderation
    DEFAULT_REPORT_THRESHOLD = 5

    # Listings
    RECENT_JOBS_LIMIT = 6
    SIMILAR_JOBS_LIMIT = 4
    COMPANY_JOBS_LIMIT = 4
    TRENDING_CATEGORIES_LIMIT = 8
    DASHBOARD_RECENT_APPLICATIONS = 5

    # Public analytics
    TOP_CATEGORIES_LIMIT = 6
    TOP_LOCATIONS_LIMIT = 6


class NotificationTypes:
    """Notification type identifiers shown to the frontend."""

    NEW_APPLICATION = "new_application"
    APPLICATION_STATUS = "application_status"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    HIRED = "hired"
    JOB_HIDDEN = "job_hidden"

    # Application status -> notification type
    BY_APPLICATION_STATUS: Dict[str, str] = {
        "pending": APPLICATION_STATUS,
        "reviewed": APPLICATION_STATUS,
        "shortlisted": SHORTLISTED,
        "rejected": REJECTED,
        "hired": HIRED,
    }
