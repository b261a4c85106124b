"""
Jobs domain service containing core business logic for job management.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from uuid import UUID
import logging

from app.core.constants import BusinessRules, ErrorCodes, NotificationTypes
from app.utils.error_handling import BusinessRuleError, ResourceNotFoundError, ValidationError

from ..matching.value_objects import SkillSet
from ..notifications.services import NotificationService
from .entities import CategorySummary, Job, JobFilters, JobReport, JobStatus, JobType, SavedJob
from .repositories import JobReportRepository, JobRepository, SavedJobRepository

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = (
    "title",
    "description",
    "location",
    "salary_min",
    "salary_max",
    "job_type",
    "category",
    "required_skills",
    "experience_level",
    "status",
)


def _require_fields(**fields: Optional[str]) -> None:
    for field_name, value in fields.items():
        if not value or not value.strip():
            raise ValidationError(
                message=f"{field_name.capitalize()} is required",
                field_name=field_name,
                error_code=ErrorCodes.VALIDATION_REQUIRED_FIELD_MISSING,
            )


@dataclass
class JobDetail:
    """A job with the related listings shown on its detail page"""

    job: Job
    similar_jobs: List[Job] = field(default_factory=list)
    company_jobs: List[Job] = field(default_factory=list)


class JobDomainService:
    """
    Core domain service for job-related business logic.

    This service encapsulates the business rules for posting, listing,
    bookmarking and moderating jobs on the board.
    """

    def __init__(
        self,
        repository: JobRepository,
        saved_job_repository: SavedJobRepository,
        report_repository: JobReportRepository,
        notification_service: NotificationService,
        report_threshold: int = BusinessRules.DEFAULT_REPORT_THRESHOLD,
        default_list_limit: int = 50,
    ):
        """Initialize with repository dependencies."""
        self.repository = repository
        self.saved_job_repository = saved_job_repository
        self.report_repository = report_repository
        self.notification_service = notification_service
        self._report_threshold = report_threshold
        self._default_list_limit = default_list_limit

    async def create_job(
        self,
        employer_id: UUID,
        title: str,
        description: str,
        location: str,
        job_type: JobType = JobType.FULL_TIME,
        salary_min: Optional[int] = None,
        salary_max: Optional[int] = None,
        category: str = "",
        required_skills: Optional[List[str]] = None,
        experience_level: str = "",
    ) -> Job:
        """
        Post a new open job for an employer.

        Raises:
            ValidationError: If the job violates a field rule
        """
        _require_fields(title=title, description=description, location=location)

        try:
            job = Job(
                employer_id=employer_id,
                title=title.strip(),
                description=description,
                location=location.strip(),
                job_type=job_type,
                salary_min=salary_min,
                salary_max=salary_max,
                category=category or "",
                required_skills=SkillSet.of(required_skills),
                experience_level=experience_level or "",
            )
        except ValueError as e:
            raise ValidationError(message=str(e), error_code=ErrorCodes.VALIDATION_VALUE_OUT_OF_RANGE) from e

        saved = await self.repository.save_job(job)
        logger.info(f"Employer {employer_id} posted job {saved.id}")
        return saved

    async def get_job(self, job_id: UUID) -> Job:
        job = await self.repository.get_job_by_id(job_id)
        if not job:
            raise ResourceNotFoundError("job", job_id)
        return job

    async def get_owned_job(self, job_id: UUID, employer_id: UUID) -> Job:
        """
        Fetch a job on behalf of its employer.

        A job owned by someone else is reported exactly like a missing one.
        """
        job = await self.repository.get_job_by_id(job_id)
        if not job or not job.is_owned_by(employer_id):
            raise ResourceNotFoundError(
                "job",
                job_id,
                message="Job not found or unauthorized",
            )
        return job

    async def get_job_detail(self, job_id: UUID) -> JobDetail:
        job = await self.get_job(job_id)
        similar = await self.repository.get_similar_open_jobs(job, BusinessRules.SIMILAR_JOBS_LIMIT)
        company = await self.repository.get_other_open_jobs_by_employer(
            job, BusinessRules.COMPANY_JOBS_LIMIT
        )
        return JobDetail(job=job, similar_jobs=similar, company_jobs=company)

    async def list_jobs(self, filters: JobFilters, limit: Optional[int] = None) -> List[Job]:
        """Public listing: open jobs only, newest first."""
        return await self.repository.search_open_jobs(filters, limit or self._default_list_limit)

    async def recent_jobs(self, limit: int = BusinessRules.RECENT_JOBS_LIMIT) -> List[Job]:
        return await self.repository.get_open_jobs(limit=limit)

    async def categories(self) -> List[CategorySummary]:
        """Open-job counts per category, alphabetical."""
        return await self.repository.get_category_summaries()

    async def trending_categories(
        self, limit: int = BusinessRules.TRENDING_CATEGORIES_LIMIT
    ) -> List[CategorySummary]:
        """Categories ordered by total applications, then by job count."""
        summaries = await self.repository.get_category_summaries()
        summaries.sort(key=lambda c: (c.total_applications, c.job_count), reverse=True)
        return summaries[:limit]

    async def employer_jobs(self, employer_id: UUID, status: Optional[JobStatus] = None) -> List[Job]:
        return await self.repository.get_jobs_by_employer(employer_id, status=status)

    async def update_job(self, job_id: UUID, employer_id: UUID, changes: Dict[str, Any]) -> Job:
        """Apply the given fields to a job owned by `employer_id`."""
        job = await self.get_owned_job(job_id, employer_id)

        for key, value in changes.items():
            if key not in _UPDATABLE_FIELDS:
                continue
            if key == "required_skills":
                value = SkillSet.of(value)
            setattr(job, key, value)

        _require_fields(title=job.title, description=job.description, location=job.location)
        if job.salary_min is not None and job.salary_max is not None and job.salary_max < job.salary_min:
            raise ValidationError(
                message="Maximum salary cannot be less than minimum salary",
                field_name="salaryMax",
                error_code=ErrorCodes.VALIDATION_VALUE_OUT_OF_RANGE,
            )

        saved = await self.repository.save_job(job)
        logger.info(f"Job {job_id} updated by employer {employer_id}")
        return saved

    async def delete_job(self, job_id: UUID, employer_id: UUID) -> None:
        await self.get_owned_job(job_id, employer_id)
        await self.repository.delete_job(job_id)
        logger.info(f"Job {job_id} deleted by employer {employer_id}")

    async def report_job(
        self, job_id: UUID, candidate_id: UUID, reason: str, description: str = ""
    ) -> Job:
        """
        Record a candidate's report against a job.

        When the report count reaches the threshold the job is hidden from
        the board and its employer is notified.
        """
        if not reason or not reason.strip():
            raise ValidationError(
                message="Report reason is required",
                field_name="reason",
                error_code=ErrorCodes.VALIDATION_REQUIRED_FIELD_MISSING,
            )

        job = await self.get_job(job_id)

        if await self.report_repository.exists(job_id, candidate_id):
            raise BusinessRuleError(ErrorCodes.BUSINESS_ALREADY_REPORTED)

        report = JobReport(job_id=job_id, candidate_id=candidate_id, reason=reason, description=description or "")
        if await self.report_repository.add(report) is None:
            raise BusinessRuleError(ErrorCodes.BUSINESS_ALREADY_REPORTED)

        job.report_count = await self.repository.increment_report_count(job_id)

        hidden_now = False
        if job.reached_report_threshold(self._report_threshold):
            # Only the request whose update flips the status sends the notification
            hidden_now = await self.repository.hide_job(job_id)
            job.status = JobStatus.HIDDEN

        if hidden_now:
            logger.warning(f"Job {job_id} hidden after {job.report_count} reports")
            await self.notification_service.notify(
                job.employer_id,
                NotificationTypes.JOB_HIDDEN,
                "Job Hidden Due to Reports",
                "Your job posting has been hidden due to multiple reports. Please review and update it.",
                related_id=job.id,
            )

        return job

    async def save_job_for_candidate(self, candidate_id: UUID, job_id: UUID) -> SavedJob:
        await self.get_job(job_id)

        if await self.saved_job_repository.exists(candidate_id, job_id):
            raise BusinessRuleError(ErrorCodes.BUSINESS_ALREADY_SAVED)

        saved = await self.saved_job_repository.add(SavedJob(candidate_id=candidate_id, job_id=job_id))
        if saved is None:
            raise BusinessRuleError(ErrorCodes.BUSINESS_ALREADY_SAVED)
        return saved

    async def unsave_job(self, candidate_id: UUID, job_id: UUID) -> bool:
        return await self.saved_job_repository.remove(candidate_id, job_id)

    async def is_job_saved(self, candidate_id: UUID, job_id: UUID) -> bool:
        return await self.saved_job_repository.exists(candidate_id, job_id)

    async def saved_jobs(self, candidate_id: UUID) -> List[Job]:
        """Jobs bookmarked by the candidate, most recently saved first."""
        bookmarks = await self.saved_job_repository.list_for_candidate(candidate_id)
        jobs = await self.repository.get_jobs_by_ids([b.job_id for b in bookmarks])
        return [jobs[b.job_id] for b in bookmarks if b.job_id in jobs]

    async def saved_job_count(self, candidate_id: UUID) -> int:
        return await self.saved_job_repository.count_for_candidate(candidate_id)
