"""
Applications domain repositories providing data access interfaces and implementations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Set
from uuid import UUID

from sqlalchemy import desc, func, select
from sqlalchemy.exc import IntegrityError

from app.models import JobApplication

from .entities import Application, ApplicationStatus, StatusCounts


class ApplicationRepository(ABC):
    """
    Abstract repository interface for application operations.

    Listing methods return applications newest first.
    """

    @abstractmethod
    async def add(self, application: Application) -> Optional[Application]:
        """Store a new application. Returns None if the candidate already applied."""
        pass

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        pass

    @abstractmethod
    async def find_for_candidate_and_job(
        self, candidate_id: UUID, job_id: UUID
    ) -> Optional[Application]:
        pass

    @abstractmethod
    async def list_for_candidate(
        self,
        candidate_id: UUID,
        status: Optional[ApplicationStatus] = None,
        limit: Optional[int] = None,
    ) -> List[Application]:
        pass

    @abstractmethod
    async def list_for_job(
        self, job_id: UUID, status: Optional[ApplicationStatus] = None
    ) -> List[Application]:
        pass

    @abstractmethod
    async def list_for_employer(self, employer_id: UUID, limit: Optional[int] = None) -> List[Application]:
        pass

    @abstractmethod
    async def get_applied_job_ids(self, candidate_id: UUID) -> Set[UUID]:
        """IDs of every job the candidate has applied to."""
        pass

    @abstractmethod
    async def update_status(self, application_id: UUID, status: ApplicationStatus) -> None:
        pass

    @abstractmethod
    async def count_by_status_for_candidate(self, candidate_id: UUID) -> StatusCounts:
        pass

    @abstractmethod
    async def count_by_status_for_employer(self, employer_id: UUID) -> StatusCounts:
        pass

    @abstractmethod
    async def count_for_employer_since(self, employer_id: UUID, since: datetime) -> int:
        """Applications received by an employer at or after `since`."""
        pass

    @abstractmethod
    async def count_all(self) -> int:
        pass


def application_from_model(row: JobApplication) -> Application:
    return Application(
        id=row.id,
        job_id=row.job_id,
        candidate_id=row.candidate_id,
        employer_id=row.employer_id,
        resume_path=row.resume_path,
        cover_letter=row.cover_letter or "",
        status=ApplicationStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at or row.created_at,
    )


class SQLAlchemyApplicationRepository(ApplicationRepository):
    """SQLAlchemy implementation of the application repository."""

    def __init__(self, db_session):
        """Initialize with database session."""
        self.db_session = db_session

    async def add(self, application: Application) -> Optional[Application]:
        row = JobApplication(
            id=application.id,
            job_id=application.job_id,
            candidate_id=application.candidate_id,
            employer_id=application.employer_id,
            resume_path=application.resume_path,
            cover_letter=application.cover_letter,
            status=application.status.value,
            created_at=application.created_at,
            updated_at=application.updated_at,
        )
        self.db_session.add(row)
        try:
            await self.db_session.commit()
        except IntegrityError:
            await self.db_session.rollback()
            return None

        return application

    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        row = await self.db_session.get(JobApplication, application_id)
        return application_from_model(row) if row else None

    async def find_for_candidate_and_job(
        self, candidate_id: UUID, job_id: UUID
    ) -> Optional[Application]:
        stmt = select(JobApplication).where(
            JobApplication.candidate_id == candidate_id, JobApplication.job_id == job_id
        )
        result = await self.db_session.execute(stmt)
        row = result.scalar_one_or_none()
        return application_from_model(row) if row else None

    async def list_for_candidate(
        self,
        candidate_id: UUID,
        status: Optional[ApplicationStatus] = None,
        limit: Optional[int] = None,
    ) -> List[Application]:
        stmt = select(JobApplication).where(JobApplication.candidate_id == candidate_id)
        if status is not None:
            stmt = stmt.where(JobApplication.status == status.value)
        stmt = stmt.order_by(desc(JobApplication.created_at))
        if limit:
            stmt = stmt.limit(limit)

        result = await self.db_session.execute(stmt)
        return [application_from_model(row) for row in result.scalars().all()]

    async def list_for_job(
        self, job_id: UUID, status: Optional[ApplicationStatus] = None
    ) -> List[Application]:
        stmt = select(JobApplication).where(JobApplication.job_id == job_id)
        if status is not None:
            stmt = stmt.where(JobApplication.status == status.value)
        stmt = stmt.order_by(desc(JobApplication.created_at))

        result = await self.db_session.execute(stmt)
        return [application_from_model(row) for row in result.scalars().all()]

    async def list_for_employer(self, employer_id: UUID, limit: Optional[int] = None) -> List[Application]:
        stmt = (
            select(JobApplication)
            .where(JobApplication.employer_id == employer_id)
            .order_by(desc(JobApplication.created_at))
        )
        if limit:
            stmt = stmt.limit(limit)

        result = await self.db_session.execute(stmt)
        return [application_from_model(row) for row in result.scalars().all()]

    async def get_applied_job_ids(self, candidate_id: UUID) -> Set[UUID]:
        stmt = select(JobApplication.job_id).where(JobApplication.candidate_id == candidate_id)
        result = await self.db_session.execute(stmt)
        return set(result.scalars().all())

    async def update_status(self, application_id: UUID, status: ApplicationStatus) -> None:
        row = await self.db_session.get(JobApplication, application_id)
        if row is None:
            return
        row.status = status.value
        await self.db_session.commit()

    async def _count_by_status(self, column, owner_id: UUID) -> StatusCounts:
        stmt = (
            select(JobApplication.status, func.count(JobApplication.id))
            .where(column == owner_id)
            .group_by(JobApplication.status)
        )
        result = await self.db_session.execute(stmt)
        return StatusCounts({ApplicationStatus(status): count for status, count in result.all()})

    async def count_by_status_for_candidate(self, candidate_id: UUID) -> StatusCounts:
        return await self._count_by_status(JobApplication.candidate_id, candidate_id)

    async def count_by_status_for_employer(self, employer_id: UUID) -> StatusCounts:
        return await self._count_by_status(JobApplication.employer_id, employer_id)

    async def count_for_employer_since(self, employer_id: UUID, since: datetime) -> int:
        stmt = select(func.count(JobApplication.id)).where(
            JobApplication.employer_id == employer_id, JobApplication.created_at >= since
        )
        result = await self.db_session.execute(stmt)
        return result.scalar_one()

    async def count_all(self) -> int:
        result = await self.db_session.execute(select(func.count(JobApplication.id)))
        return result.scalar_one()
