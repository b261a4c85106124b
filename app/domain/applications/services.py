"""
Applications domain service: applying to jobs, the status lifecycle and
the per-role dashboards built from application data.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID
import logging

from app.core.constants import BusinessRules, ErrorCodes, NotificationTypes
from app.utils.error_handling import BusinessRuleError, ResourceNotFoundError, ValidationError

from ..jobs.entities import Job, JobStatus
from ..jobs.repositories import JobRepository, SavedJobRepository
from ..notifications.services import NotificationService
from ..users.entities import CandidateProfile, EmployerProfile
from ..users.repositories import ProfileRepository
from .entities import Application, ApplicationStatus, StatusCounts
from .repositories import ApplicationRepository

logger = logging.getLogger(__name__)


@dataclass
class ApplicationView:
    """An application together with the records shown next to it"""

    application: Application
    job: Optional[Job] = None
    company: Optional[EmployerProfile] = None
    candidate: Optional[CandidateProfile] = None


@dataclass
class CandidateDashboard:
    status_counts: StatusCounts
    saved_jobs: int = 0
    unread_notifications: int = 0
    recent_applications: List[ApplicationView] = field(default_factory=list)


@dataclass
class EmployerDashboard:
    total_jobs: int
    active_jobs: int
    closed_jobs: int
    total_applications: int
    status_counts: StatusCounts
    applications_this_month: int = 0
    recent_applications: List[ApplicationView] = field(default_factory=list)


def start_of_month(now: Optional[datetime] = None) -> datetime:
    """Midnight on the first day of the current UTC month."""
    now = now or datetime.utcnow()
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def status_notification(
    status: ApplicationStatus, job_title: str, company_name: Optional[str]
) -> Dict[str, str]:
    """Type, title and message of the notification sent when an application changes status."""
    company = company_name or "the company"

    if status == ApplicationStatus.REVIEWED:
        title = "Application Status Updated"
        message = f'Your application for "{job_title}" at {company} has been reviewed.'
    elif status == ApplicationStatus.SHORTLISTED:
        title = "Congratulations! You've Been Shortlisted"
        message = (
            f'Great news! You have been shortlisted for "{job_title}" at {company}. '
            "The employer is interested in your profile!"
        )
    elif status == ApplicationStatus.REJECTED:
        title = "Application Update"
        message = (
            f'Thank you for your interest in "{job_title}" at {company}. Unfortunately, '
            "the employer has decided to move forward with other candidates. Keep applying!"
        )
    elif status == ApplicationStatus.HIRED:
        title = "Congratulations! You've Been Hired!"
        message = (
            f'Amazing news! You have been selected for "{job_title}" at {company}. '
            "The employer will contact you soon with next steps."
        )
    else:
        title = "Application Status Updated"
        message = f'Your application status for "{job_title}" has been updated to {status.value}.'

    return {
        "type": NotificationTypes.BY_APPLICATION_STATUS[status.value],
        "title": title,
        "message": message,
    }


class ApplicationDomainService:
    """
    Core domain service for job applications.

    Owns the rules for who may apply, how an employer moves an application
    through its lifecycle and who gets notified along the way.
    """

    def __init__(
        self,
        repository: ApplicationRepository,
        job_repository: JobRepository,
        profile_repository: ProfileRepository,
        saved_job_repository: SavedJobRepository,
        notification_service: NotificationService,
    ):
        """Initialize with repository dependencies."""
        self.repository = repository
        self.job_repository = job_repository
        self.profile_repository = profile_repository
        self.saved_job_repository = saved_job_repository
        self.notification_service = notification_service

    async def apply(
        self,
        candidate_id: UUID,
        job_id: UUID,
        cover_letter: str = "",
        resume_path: Optional[str] = None,
    ) -> Application:
        """
        Submit an application to an open job.

        The resume comes from the request, falling back to the one on the
        candidate's profile.

        Raises:
            BusinessRuleError: If the job is not open or the candidate already applied
            ValidationError: If no resume is available
        """
        job = await self.job_repository.get_job_by_id(job_id)
        if not job or not job.is_open:
            raise BusinessRuleError(ErrorCodes.BUSINESS_JOB_NOT_OPEN, details={"job_id": str(job_id)})

        if await self.repository.find_for_candidate_and_job(candidate_id, job_id):
            raise BusinessRuleError(ErrorCodes.BUSINESS_ALREADY_APPLIED)

        profile = await self.profile_repository.get_candidate_profile(candidate_id)
        resume = resume_path or (profile.resume_path if profile else None)
        if not resume:
            raise ValidationError(
                field_name="resume",
                error_code=ErrorCodes.VALIDATION_RESUME_REQUIRED,
            )

        application = Application(
            job_id=job_id,
            candidate_id=candidate_id,
            employer_id=job.employer_id,
            resume_path=resume,
            cover_letter=cover_letter or "",
        )
        saved = await self.repository.add(application)
        if saved is None:
            raise BusinessRuleError(ErrorCodes.BUSINESS_ALREADY_APPLIED)

        await self.job_repository.increment_application_count(job_id)

        candidate_name = profile.display_name() if profile else "A candidate"
        await self.notification_service.notify(
            job.employer_id,
            NotificationTypes.NEW_APPLICATION,
            "New Application Received",
            f"{candidate_name} applied for {job.title}",
            related_id=job_id,
        )

        logger.info(f"Candidate {candidate_id} applied to job {job_id}")
        return saved

    async def get_employer_application(self, application_id: UUID, employer_id: UUID) -> Application:
        application = await self.repository.get_by_id(application_id)
        if not application or not application.belongs_to_employer(employer_id):
            raise ResourceNotFoundError(
                "application", application_id, ErrorCodes.RESOURCE_APPLICATION_NOT_FOUND
            )
        return application

    async def update_status(
        self, application_id: UUID, employer_id: UUID, status: ApplicationStatus
    ) -> Application:
        """Change an application's status and tell the candidate about it."""
        application = await self.get_employer_application(application_id, employer_id)

        application.change_status(status)
        await self.repository.update_status(application_id, status)

        job = await self.job_repository.get_job_by_id(application.job_id)
        company = await self.profile_repository.get_employer_profile(employer_id)
        notification = status_notification(
            status,
            job.title if job else "",
            company.company_name if company else None,
        )
        await self.notification_service.notify(
            application.candidate_id,
            notification["type"],
            notification["title"],
            notification["message"],
            related_id=application.job_id,
        )

        logger.info(f"Application {application_id} moved to {status.value}")
        return application

    async def check_applied(self, candidate_id: UUID, job_id: UUID) -> Optional[Application]:
        return await self.repository.find_for_candidate_and_job(candidate_id, job_id)

    async def candidate_applications(
        self,
        candidate_id: UUID,
        status: Optional[ApplicationStatus] = None,
        limit: Optional[int] = None,
    ) -> List[ApplicationView]:
        """The candidate's applications with job and company details, newest first."""
        applications = await self.repository.list_for_candidate(candidate_id, status=status, limit=limit)
        jobs = await self.job_repository.get_jobs_by_ids([a.job_id for a in applications])
        companies = await self.profile_repository.get_employer_profiles(
            list({a.employer_id for a in applications})
        )
        return [
            ApplicationView(
                application=a,
                job=jobs.get(a.job_id),
                company=companies.get(a.employer_id),
            )
            for a in applications
        ]

    async def job_applications(
        self, job: Job, status: Optional[ApplicationStatus] = None
    ) -> List[ApplicationView]:
        """Applications to an employer's job with the candidates' profiles merged in."""
        applications = await self.repository.list_for_job(job.id, status=status)
        profiles = await self.profile_repository.get_candidate_profiles(
            [a.candidate_id for a in applications]
        )
        return [
            ApplicationView(application=a, job=job, candidate=profiles.get(a.candidate_id))
            for a in applications
        ]

    async def candidate_dashboard(self, candidate_id: UUID) -> CandidateDashboard:
        counts = await self.repository.count_by_status_for_candidate(candidate_id)
        saved = await self.saved_job_repository.count_for_candidate(candidate_id)
        unread = await self.notification_service.unread_count(candidate_id)
        recent = await self.candidate_applications(
            candidate_id, limit=BusinessRules.DASHBOARD_RECENT_APPLICATIONS
        )
        return CandidateDashboard(
            status_counts=counts,
            saved_jobs=saved,
            unread_notifications=unread,
            recent_applications=recent,
        )

    async def employer_dashboard(self, employer_id: UUID) -> EmployerDashboard:
        jobs = await self.job_repository.get_jobs_by_employer(employer_id)
        counts = await self.repository.count_by_status_for_employer(employer_id)
        this_month = await self.repository.count_for_employer_since(employer_id, start_of_month())

        recent = await self.repository.list_for_employer(
            employer_id, limit=BusinessRules.DASHBOARD_RECENT_APPLICATIONS
        )
        jobs_by_id = {job.id: job for job in jobs}
        profiles = await self.profile_repository.get_candidate_profiles(
            [a.candidate_id for a in recent]
        )

        return EmployerDashboard(
            total_jobs=len(jobs),
            active_jobs=sum(1 for job in jobs if job.status == JobStatus.OPEN),
            closed_jobs=sum(1 for job in jobs if job.status == JobStatus.CLOSED),
            total_applications=sum(job.application_count for job in jobs),
            status_counts=counts,
            applications_this_month=this_month,
            recent_applications=[
                ApplicationView(
                    application=a,
                    job=jobs_by_id.get(a.job_id),
                    candidate=profiles.get(a.candidate_id),
                )
                for a in recent
            ],
        )
