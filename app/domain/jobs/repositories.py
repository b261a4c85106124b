"""
Jobs domain repositories providing data access interfaces and implementations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete, desc, func, or_, select, update
from sqlalchemy.exc import IntegrityError

from app.models import JobPosting, JobReport as JobReportModel, SavedJob as SavedJobModel

from ..matching.value_objects import parse_skill_set
from .entities import CategorySummary, Job, JobFilters, JobReport, JobStatus, JobType, SavedJob


class JobRepository(ABC):
    """
    Abstract repository interface for job operations.

    This interface defines the contract for data access operations
    related to jobs, following the Repository pattern.
    """

    @abstractmethod
    async def save_job(self, job: Job) -> Job:
        """Insert or update a job."""
        pass

    @abstractmethod
    async def get_job_by_id(self, job_id: UUID) -> Optional[Job]:
        """Retrieve a job by its ID."""
        pass

    @abstractmethod
    async def get_jobs_by_ids(self, job_ids: List[UUID]) -> Dict[UUID, Job]:
        """Retrieve multiple jobs keyed by ID."""
        pass

    @abstractmethod
    async def get_open_jobs(self, limit: Optional[int] = None) -> List[Job]:
        """Open jobs, newest first. `None` returns every open job."""
        pass

    @abstractmethod
    async def search_open_jobs(self, filters: JobFilters, limit: int) -> List[Job]:
        """Open jobs matching the listing filters, newest first."""
        pass

    @abstractmethod
    async def get_jobs_by_employer(
        self, employer_id: UUID, status: Optional[JobStatus] = None
    ) -> List[Job]:
        """All jobs of an employer, newest first."""
        pass

    @abstractmethod
    async def get_similar_open_jobs(self, job: Job, limit: int) -> List[Job]:
        """Open jobs sharing the category or the primary location of `job`."""
        pass

    @abstractmethod
    async def get_other_open_jobs_by_employer(self, job: Job, limit: int) -> List[Job]:
        """Other open jobs posted by the same employer."""
        pass

    @abstractmethod
    async def get_category_summaries(self) -> List[CategorySummary]:
        """Open-job counts per non-empty category."""
        pass

    @abstractmethod
    async def count_jobs(self, status: Optional[JobStatus] = None) -> int:
        pass

    @abstractmethod
    async def get_job_type_counts(self) -> Dict[JobType, int]:
        """Open-job counts per job type."""
        pass

    @abstractmethod
    async def get_top_locations(self, limit: int) -> List[Tuple[str, int]]:
        """Locations with the most open jobs, busiest first."""
        pass

    @abstractmethod
    async def increment_application_count(self, job_id: UUID) -> None:
        pass

    @abstractmethod
    async def increment_report_count(self, job_id: UUID) -> int:
        """Atomically add one report and return the new count."""
        pass

    @abstractmethod
    async def hide_job(self, job_id: UUID) -> bool:
        """Hide a job. Returns False if it was already hidden."""
        pass

    @abstractmethod
    async def delete_job(self, job_id: UUID) -> bool:
        """Delete a job from storage."""
        pass


class SavedJobRepository(ABC):
    """Abstract repository interface for candidate bookmarks."""

    @abstractmethod
    async def add(self, saved_job: SavedJob) -> Optional[SavedJob]:
        """Store a bookmark. Returns None if it already exists."""
        pass

    @abstractmethod
    async def remove(self, candidate_id: UUID, job_id: UUID) -> bool:
        pass

    @abstractmethod
    async def exists(self, candidate_id: UUID, job_id: UUID) -> bool:
        pass

    @abstractmethod
    async def list_for_candidate(self, candidate_id: UUID) -> List[SavedJob]:
        """Bookmarks of a candidate, newest first."""
        pass

    @abstractmethod
    async def count_for_candidate(self, candidate_id: UUID) -> int:
        pass


class JobReportRepository(ABC):
    """Abstract repository interface for job reports."""

    @abstractmethod
    async def exists(self, job_id: UUID, candidate_id: UUID) -> bool:
        pass

    @abstractmethod
    async def add(self, report: JobReport) -> Optional[JobReport]:
        """Store a report. Returns None if the candidate already reported the job."""
        pass


def job_from_model(job_posting: JobPosting) -> Job:
    """Convert a JobPosting row into the domain entity."""
    return Job(
        id=job_posting.id,
        employer_id=job_posting.employer_id,
        title=job_posting.title,
        description=job_posting.description,
        location=job_posting.location,
        job_type=JobType(job_posting.job_type),
        salary_min=job_posting.salary_min,
        salary_max=job_posting.salary_max,
        category=job_posting.category or "",
        required_skills=parse_skill_set(
            job_posting.required_skills, source=f"job {job_posting.id}"
        ),
        experience_level=job_posting.experience_level or "",
        status=JobStatus(job_posting.status),
        report_count=job_posting.report_count or 0,
        application_count=job_posting.application_count or 0,
        created_at=job_posting.created_at,
        updated_at=job_posting.updated_at or job_posting.created_at,
    )


class SQLAlchemyJobRepository(JobRepository):
    """
    SQLAlchemy implementation of the job repository.

    This class provides concrete implementation of data access operations
    using SQLAlchemy ORM and the JobPosting model.
    """

    def __init__(self, db_session):
        """Initialize with database session."""
        self.db_session = db_session

    async def save_job(self, job: Job) -> Job:
        job_posting = await self.db_session.get(JobPosting, job.id)
        if job_posting is None:
            job_posting = JobPosting(
                id=job.id,
                created_at=job.created_at,
                report_count=job.report_count,
                application_count=job.application_count,
            )
            self.db_session.add(job_posting)

        job_posting.employer_id = job.employer_id
        job_posting.title = job.title
        job_posting.description = job.description
        job_posting.location = job.location
        job_posting.job_type = job.job_type.value
        job_posting.salary_min = job.salary_min
        job_posting.salary_max = job.salary_max
        job_posting.category = job.category
        job_posting.required_skills = job.required_skills.to_list()
        job_posting.experience_level = job.experience_level
        job_posting.status = job.status.value
        job_posting.updated_at = datetime.utcnow()

        await self.db_session.commit()
        await self.db_session.refresh(job_posting)

        return job_from_model(job_posting)

    async def get_job_by_id(self, job_id: UUID) -> Optional[Job]:
        job_posting = await self.db_session.get(JobPosting, job_id)
        if not job_posting:
            return None

        return job_from_model(job_posting)

    async def get_jobs_by_ids(self, job_ids: List[UUID]) -> Dict[UUID, Job]:
        if not job_ids:
            return {}

        stmt = select(JobPosting).where(JobPosting.id.in_(job_ids))
        result = await self.db_session.execute(stmt)

        return {jp.id: job_from_model(jp) for jp in result.scalars().all()}

    async def get_open_jobs(self, limit: Optional[int] = None) -> List[Job]:
        stmt = (
            select(JobPosting)
            .where(JobPosting.status == JobStatus.OPEN.value)
            .order_by(desc(JobPosting.created_at))
        )
        if limit:
            stmt = stmt.limit(limit)

        result = await self.db_session.execute(stmt)
        return [job_from_model(jp) for jp in result.scalars().all()]

    async def search_open_jobs(self, filters: JobFilters, limit: int) -> List[Job]:
        stmt = select(JobPosting).where(JobPosting.status == JobStatus.OPEN.value)

        if filters.keyword:
            pattern = f"%{filters.keyword}%"
            stmt = stmt.where(
                or_(JobPosting.title.ilike(pattern), JobPosting.description.ilike(pattern))
            )
        if filters.location:
            stmt = stmt.where(JobPosting.location.ilike(f"%{filters.location}%"))
        if filters.job_type:
            stmt = stmt.where(JobPosting.job_type == filters.job_type.value)
        if filters.category:
            stmt = stmt.where(JobPosting.category == filters.category)
        if filters.salary_min is not None:
            stmt = stmt.where(JobPosting.salary_max >= filters.salary_min)
        if filters.salary_max is not None:
            stmt = stmt.where(JobPosting.salary_min <= filters.salary_max)

        stmt = stmt.order_by(desc(JobPosting.created_at))

        # Skill terms live in a JSON column, so they are filtered after loading
        if not filters.skills:
            stmt = stmt.limit(limit)

        result = await self.db_session.execute(stmt)
        jobs = [job_from_model(jp) for jp in result.scalars().all()]

        if filters.skills:
            jobs = [job for job in jobs if filters.matches_skills(job)][:limit]

        return jobs

    async def get_jobs_by_employer(
        self, employer_id: UUID, status: Optional[JobStatus] = None
    ) -> List[Job]:
        stmt = select(JobPosting).where(JobPosting.employer_id == employer_id)
        if status is not None:
            stmt = stmt.where(JobPosting.status == status.value)
        stmt = stmt.order_by(desc(JobPosting.created_at))

        result = await self.db_session.execute(stmt)
        return [job_from_model(jp) for jp in result.scalars().all()]

    async def get_similar_open_jobs(self, job: Job, limit: int) -> List[Job]:
        conditions = [JobPosting.category == job.category]
        primary_location = job.primary_location()
        if primary_location:
            conditions.append(JobPosting.location.ilike(f"%{primary_location}%"))

        stmt = (
            select(JobPosting)
            .where(
                JobPosting.status == JobStatus.OPEN.value,
                JobPosting.id != job.id,
                or_(*conditions),
            )
            .order_by(desc(JobPosting.created_at))
            .limit(limit)
        )

        result = await self.db_session.execute(stmt)
        return [job_from_model(jp) for jp in result.scalars().all()]

    async def get_other_open_jobs_by_employer(self, job: Job, limit: int) -> List[Job]:
        stmt = (
            select(JobPosting)
            .where(
                JobPosting.status == JobStatus.OPEN.value,
                JobPosting.employer_id == job.employer_id,
                JobPosting.id != job.id,
            )
            .order_by(desc(JobPosting.created_at))
            .limit(limit)
        )

        result = await self.db_session.execute(stmt)
        return [job_from_model(jp) for jp in result.scalars().all()]

    async def get_category_summaries(self) -> List[CategorySummary]:
        stmt = (
            select(
                JobPosting.category,
                func.count(JobPosting.id),
                func.coalesce(func.sum(JobPosting.application_count), 0),
            )
            .where(JobPosting.status == JobStatus.OPEN.value, JobPosting.category != "")
            .group_by(JobPosting.category)
            .order_by(JobPosting.category)
        )

        result = await self.db_session.execute(stmt)
        return [
            CategorySummary(name=name, job_count=job_count, total_applications=int(total))
            for name, job_count, total in result.all()
        ]

    async def increment_application_count(self, job_id: UUID) -> None:
        stmt = (
            update(JobPosting)
            .where(JobPosting.id == job_id)
            .values(application_count=JobPosting.application_count + 1)
        )
        await self.db_session.execute(stmt)
        await self.db_session.commit()

    async def count_jobs(self, status: Optional[JobStatus] = None) -> int:
        stmt = select(func.count(JobPosting.id))
        if status is not None:
            stmt = stmt.where(JobPosting.status == status.value)

        result = await self.db_session.execute(stmt)
        return result.scalar_one()

    async def get_job_type_counts(self) -> Dict[JobType, int]:
        stmt = (
            select(JobPosting.job_type, func.count(JobPosting.id))
            .where(JobPosting.status == JobStatus.OPEN.value)
            .group_by(JobPosting.job_type)
        )

        result = await self.db_session.execute(stmt)
        return {JobType(job_type): count for job_type, count in result.all()}

    async def get_top_locations(self, limit: int) -> List[Tuple[str, int]]:
        job_count = func.count(JobPosting.id).label("job_count")
        stmt = (
            select(JobPosting.location, job_count)
            .where(JobPosting.status == JobStatus.OPEN.value)
            .group_by(JobPosting.location)
            .order_by(desc(job_count), JobPosting.location)
            .limit(limit)
        )

        result = await self.db_session.execute(stmt)
        return [(location, count) for location, count in result.all()]

    async def increment_report_count(self, job_id: UUID) -> int:
        stmt = (
            update(JobPosting)
            .where(JobPosting.id == job_id)
            .values(report_count=JobPosting.report_count + 1, updated_at=datetime.utcnow())
            .returning(JobPosting.report_count)
        )
        result = await self.db_session.execute(stmt)
        report_count = result.scalar_one()
        await self.db_session.commit()
        return report_count

    async def hide_job(self, job_id: UUID) -> bool:
        stmt = (
            update(JobPosting)
            .where(JobPosting.id == job_id, JobPosting.status != JobStatus.HIDDEN.value)
            .values(status=JobStatus.HIDDEN.value, updated_at=datetime.utcnow())
        )
        result = await self.db_session.execute(stmt)
        await self.db_session.commit()
        return result.rowcount > 0

    async def delete_job(self, job_id: UUID) -> bool:
        result = await self.db_session.execute(delete(JobPosting).where(JobPosting.id == job_id))
        await self.db_session.commit()
        return result.rowcount > 0


def saved_job_from_model(row: SavedJobModel) -> SavedJob:
    return SavedJob(
        id=row.id, candidate_id=row.candidate_id, job_id=row.job_id, created_at=row.created_at
    )


class SQLAlchemySavedJobRepository(SavedJobRepository):
    """SQLAlchemy implementation of the saved job repository."""

    def __init__(self, db_session):
        self.db_session = db_session

    async def add(self, saved_job: SavedJob) -> Optional[SavedJob]:
        row = SavedJobModel(
            id=saved_job.id,
            candidate_id=saved_job.candidate_id,
            job_id=saved_job.job_id,
            created_at=saved_job.created_at,
        )
        self.db_session.add(row)
        try:
            await self.db_session.commit()
        except IntegrityError:
            await self.db_session.rollback()
            return None

        return saved_job

    async def remove(self, candidate_id: UUID, job_id: UUID) -> bool:
        stmt = delete(SavedJobModel).where(
            SavedJobModel.candidate_id == candidate_id, SavedJobModel.job_id == job_id
        )
        result = await self.db_session.execute(stmt)
        await self.db_session.commit()
        return result.rowcount > 0

    async def exists(self, candidate_id: UUID, job_id: UUID) -> bool:
        stmt = select(SavedJobModel.id).where(
            SavedJobModel.candidate_id == candidate_id, SavedJobModel.job_id == job_id
        )
        result = await self.db_session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_for_candidate(self, candidate_id: UUID) -> List[SavedJob]:
        stmt = (
            select(SavedJobModel)
            .where(SavedJobModel.candidate_id == candidate_id)
            .order_by(desc(SavedJobModel.created_at))
        )
        result = await self.db_session.execute(stmt)
        return [saved_job_from_model(row) for row in result.scalars().all()]

    async def count_for_candidate(self, candidate_id: UUID) -> int:
        stmt = select(func.count(SavedJobModel.id)).where(
            SavedJobModel.candidate_id == candidate_id
        )
        result = await self.db_session.execute(stmt)
        return result.scalar_one()


class SQLAlchemyJobReportRepository(JobReportRepository):
    """SQLAlchemy implementation of the job report repository."""

    def __init__(self, db_session):
        self.db_session = db_session

    async def exists(self, job_id: UUID, candidate_id: UUID) -> bool:
        stmt = select(JobReportModel.id).where(
            JobReportModel.job_id == job_id, JobReportModel.candidate_id == candidate_id
        )
        result = await self.db_session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def add(self, report: JobReport) -> Optional[JobReport]:
        row = JobReportModel(
            id=report.id,
            job_id=report.job_id,
            candidate_id=report.candidate_id,
            reason=report.reason,
            description=report.description,
            created_at=report.created_at,
        )
        self.db_session.add(row)
        try:
            await self.db_session.commit()
        except IntegrityError:
            await self.db_session.rollback()
            return None

        return report
