"""
Application dependencies providing dependency injection for domain services and infrastructure.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.config_validator import get_config
from app.db.session import get_db

from app.domain.analytics.services import AnalyticsDomainService
from app.domain.applications.repositories import SQLAlchemyApplicationRepository
from app.domain.applications.services import ApplicationDomainService
from app.domain.jobs.repositories import (
    SQLAlchemyJobReportRepository,
    SQLAlchemyJobRepository,
    SQLAlchemySavedJobRepository,
)
from app.domain.jobs.services import JobDomainService
from app.domain.matching.services import MatchingDomainService
from app.domain.notifications.repositories import SQLAlchemyNotificationRepository
from app.domain.notifications.services import NotificationService
from app.domain.users.repositories import SQLAlchemyProfileRepository, SQLAlchemyUserRepository
from app.domain.users.services import UserDomainService


# --- REPOSITORY DEPENDENCIES ---
# FastAPI caches dependencies per request, so every repository below shares
# the request's session.


async def get_job_repository(
    db: AsyncSession = Depends(get_db),
) -> SQLAlchemyJobRepository:
    """Get job repository (async)."""
    return SQLAlchemyJobRepository(db)


async def get_saved_job_repository(
    db: AsyncSession = Depends(get_db),
) -> SQLAlchemySavedJobRepository:
    """Get saved job repository (async)."""
    return SQLAlchemySavedJobRepository(db)


async def get_job_report_repository(
    db: AsyncSession = Depends(get_db),
) -> SQLAlchemyJobReportRepository:
    """Get job report repository (async)."""
    return SQLAlchemyJobReportRepository(db)


async def get_application_repository(
    db: AsyncSession = Depends(get_db),
) -> SQLAlchemyApplicationRepository:
    """Get application repository (async)."""
    return SQLAlchemyApplicationRepository(db)


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> SQLAlchemyUserRepository:
    """Get user repository (async)."""
    return SQLAlchemyUserRepository(db)


async def get_profile_repository(
    db: AsyncSession = Depends(get_db),
) -> SQLAlchemyProfileRepository:
    """Get profile repository (async)."""
    return SQLAlchemyProfileRepository(db)


async def get_notification_repository(
    db: AsyncSession = Depends(get_db),
) -> SQLAlchemyNotificationRepository:
    """Get notification repository (async)."""
    return SQLAlchemyNotificationRepository(db)


# --- DOMAIN SERVICE DEPENDENCIES ---


async def get_notification_service(
    repository: SQLAlchemyNotificationRepository = Depends(get_notification_repository),
) -> NotificationService:
    """Get notification service with repository dependency."""
    return NotificationService(repository, list_limit=get_config().DEFAULT_LIST_LIMIT)


async def get_job_service(
    repository: SQLAlchemyJobRepository = Depends(get_job_repository),
    saved_job_repository: SQLAlchemySavedJobRepository = Depends(get_saved_job_repository),
    report_repository: SQLAlchemyJobReportRepository = Depends(get_job_report_repository),
    notification_service: NotificationService = Depends(get_notification_service),
) -> JobDomainService:
    """Get job domain service with repository dependencies."""
    config = get_config()
    return JobDomainService(
        repository,
        saved_job_repository,
        report_repository,
        notification_service,
        report_threshold=config.JOB_REPORT_THRESHOLD,
        default_list_limit=config.DEFAULT_LIST_LIMIT,
    )


async def get_user_service(
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    profile_repository: SQLAlchemyProfileRepository = Depends(get_profile_repository),
    job_repository: SQLAlchemyJobRepository = Depends(get_job_repository),
) -> UserDomainService:
    """Get user domain service with repository dependencies."""
    return UserDomainService(user_repository, profile_repository, job_repository)


async def get_application_service(
    repository: SQLAlchemyApplicationRepository = Depends(get_application_repository),
    job_repository: SQLAlchemyJobRepository = Depends(get_job_repository),
    profile_repository: SQLAlchemyProfileRepository = Depends(get_profile_repository),
    saved_job_repository: SQLAlchemySavedJobRepository = Depends(get_saved_job_repository),
    notification_service: NotificationService = Depends(get_notification_service),
) -> ApplicationDomainService:
    """Get application domain service with repository dependencies."""
    return ApplicationDomainService(
        repository,
        job_repository,
        profile_repository,
        saved_job_repository,
        notification_service,
    )


async def get_matching_service(
    job_repository: SQLAlchemyJobRepository = Depends(get_job_repository),
    application_repository: SQLAlchemyApplicationRepository = Depends(get_application_repository),
    profile_repository: SQLAlchemyProfileRepository = Depends(get_profile_repository),
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository),
) -> MatchingDomainService:
    """Get matching domain service with repository dependencies."""
    config = get_config()
    return MatchingDomainService(
        job_repository,
        application_repository,
        profile_repository,
        user_repository,
        working_set_limit=config.RECOMMENDATION_WORKING_SET_LIMIT,
        recommendation_limit=config.RECOMMENDATION_LIMIT,
    )


async def get_analytics_service(
    job_repository: SQLAlchemyJobRepository = Depends(get_job_repository),
    application_repository: SQLAlchemyApplicationRepository = Depends(get_application_repository),
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository),
) -> AnalyticsDomainService:
    """Get analytics domain service with repository dependencies."""
    return AnalyticsDomainService(job_repository, application_repository, user_repository)
