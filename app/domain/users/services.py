"""
Users domain service containing core business logic for accounts and profiles.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID
import logging

from app.core.constants import ErrorCodes
from app.utils.error_handling import ResourceNotFoundError, ValidationError

from ..jobs.entities import Job, JobStatus
from ..jobs.repositories import JobRepository
from .entities import CandidateProfile, EmployerProfile, User, UserRole
from .repositories import ProfileRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass
class CompanyPage:
    """Public view of an employer: profile plus open jobs"""

    profile: EmployerProfile
    jobs: List[Job] = field(default_factory=list)
    member_since: Optional[datetime] = None

    @property
    def job_count(self) -> int:
        return len(self.jobs)


class UserDomainService:
    """
    Core domain service for user-related business logic.

    Accounts themselves are created by the auth service; this service keeps
    a local mirror of identity and role and owns the profiles.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        profile_repository: ProfileRepository,
        job_repository: JobRepository,
    ):
        """Initialize with repository dependencies."""
        self.user_repository = user_repository
        self.profile_repository = profile_repository
        self.job_repository = job_repository

    async def ensure_user(self, user_id: UUID, role: UserRole, email: Optional[str] = None) -> User:
        """Mirror an authenticated account locally, updating role or email if they changed."""
        existing = await self.user_repository.get_user_by_id(user_id)
        if existing and existing.role == role and (not email or existing.email == email):
            return existing

        user = User(id=user_id, role=role, email=email or (existing.email if existing else None))
        if existing:
            user.created_at = existing.created_at
        else:
            logger.info(f"Registering {role.value} account {user_id}")
        return await self.user_repository.save_user(user)

    async def get_candidate_profile(self, user_id: UUID) -> CandidateProfile:
        profile = await self.profile_repository.get_candidate_profile(user_id)
        if not profile:
            raise ResourceNotFoundError(
                "candidate_profile", user_id, ErrorCodes.RESOURCE_PROFILE_NOT_FOUND
            )
        return profile

    async def find_candidate_profile(self, user_id: UUID) -> Optional[CandidateProfile]:
        return await self.profile_repository.get_candidate_profile(user_id)

    async def update_candidate_profile(
        self, user_id: UUID, changes: Dict[str, Any]
    ) -> CandidateProfile:
        """Apply the given fields, creating the profile on first update."""
        profile = await self.profile_repository.get_candidate_profile(user_id)
        if profile is None:
            profile = CandidateProfile(user_id=user_id)

        profile.apply_changes(changes)
        return await self.profile_repository.save_candidate_profile(profile)

    async def get_employer_profile(self, user_id: UUID) -> EmployerProfile:
        profile = await self.profile_repository.get_employer_profile(user_id)
        if not profile:
            raise ResourceNotFoundError(
                "employer_profile", user_id, ErrorCodes.RESOURCE_PROFILE_NOT_FOUND
            )
        return profile

    async def update_employer_profile(
        self, user_id: UUID, changes: Dict[str, Any]
    ) -> EmployerProfile:
        """
        Apply the given fields to the employer's company profile.

        A company name is required when the profile does not exist yet.
        """
        profile = await self.profile_repository.get_employer_profile(user_id)
        if profile is None:
            company_name = changes.get("company_name")
            if not company_name:
                raise ValidationError(
                    message="Company name is required",
                    field_name="companyName",
                    error_code=ErrorCodes.VALIDATION_REQUIRED_FIELD_MISSING,
                )
            profile = EmployerProfile(user_id=user_id, company_name=company_name)

        profile.apply_changes(changes)
        return await self.profile_repository.save_employer_profile(profile)

    async def get_company_page(self, employer_id: UUID) -> CompanyPage:
        profile = await self.profile_repository.get_employer_profile(employer_id)
        if not profile:
            raise ResourceNotFoundError(
                "company", employer_id, ErrorCodes.RESOURCE_COMPANY_NOT_FOUND
            )

        user = await self.user_repository.get_user_by_id(employer_id)
        jobs = await self.job_repository.get_jobs_by_employer(employer_id, status=JobStatus.OPEN)

        return CompanyPage(
            profile=profile,
            jobs=jobs,
            member_since=user.created_at if user else None,
        )

    async def get_company_profiles(self, employer_ids: List[UUID]) -> Dict[UUID, EmployerProfile]:
        """Employer profiles used to decorate job listings with company details."""
        return await self.profile_repository.get_employer_profiles(list(set(employer_ids)))
