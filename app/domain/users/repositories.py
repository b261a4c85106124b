"""
Users domain repositories providing data access interfaces and implementations.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import func, select

from app.models import (
    CandidateProfile as CandidateProfileModel,
    EmployerProfile as EmployerProfileModel,
    User as UserModel,
)

from ..matching.value_objects import parse_skill_set
from .entities import CandidateProfile, EmployerProfile, User, UserRole


class UserRepository(ABC):
    """Abstract repository interface for mirrored user accounts."""

    @abstractmethod
    async def get_user_by_id(self, user_id: UUID) -> Optional[User]:
        pass

    @abstractmethod
    async def get_users_by_ids(self, user_ids: List[UUID]) -> Dict[UUID, User]:
        pass

    @abstractmethod
    async def save_user(self, user: User) -> User:
        pass

    @abstractmethod
    async def count_by_role(self, role: UserRole) -> int:
        pass


class ProfileRepository(ABC):
    """Abstract repository interface for candidate and employer profiles."""

    @abstractmethod
    async def get_candidate_profile(self, user_id: UUID) -> Optional[CandidateProfile]:
        pass

    @abstractmethod
    async def get_candidate_profiles(self, user_ids: List[UUID]) -> Dict[UUID, CandidateProfile]:
        """Profiles keyed by user ID; users without a profile are absent."""
        pass

    @abstractmethod
    async def save_candidate_profile(self, profile: CandidateProfile) -> CandidateProfile:
        pass

    @abstractmethod
    async def get_employer_profile(self, user_id: UUID) -> Optional[EmployerProfile]:
        pass

    @abstractmethod
    async def get_employer_profiles(self, user_ids: List[UUID]) -> Dict[UUID, EmployerProfile]:
        pass

    @abstractmethod
    async def save_employer_profile(self, profile: EmployerProfile) -> EmployerProfile:
        pass


def user_from_model(row: UserModel) -> User:
    return User(id=row.id, role=UserRole(row.role), email=row.email, created_at=row.created_at)


class SQLAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation of the user repository."""

    def __init__(self, db_session):
        self.db_session = db_session

    async def get_user_by_id(self, user_id: UUID) -> Optional[User]:
        row = await self.db_session.get(UserModel, user_id)
        if not row:
            return None
        return user_from_model(row)

    async def get_users_by_ids(self, user_ids: List[UUID]) -> Dict[UUID, User]:
        if not user_ids:
            return {}
        result = await self.db_session.execute(select(UserModel).where(UserModel.id.in_(user_ids)))
        return {row.id: user_from_model(row) for row in result.scalars().all()}

    async def save_user(self, user: User) -> User:
        row = await self.db_session.get(UserModel, user.id)
        if row is None:
            row = UserModel(id=user.id, created_at=user.created_at)
            self.db_session.add(row)
        row.role = user.role.value
        if user.email:
            row.email = user.email
        await self.db_session.commit()
        return user

    async def count_by_role(self, role: UserRole) -> int:
        stmt = select(func.count(UserModel.id)).where(UserModel.role == role.value)
        result = await self.db_session.execute(stmt)
        return result.scalar_one()


def candidate_profile_from_model(row: CandidateProfileModel) -> CandidateProfile:
    return CandidateProfile(
        id=row.id,
        user_id=row.user_id,
        full_name=row.full_name or "",
        phone=row.phone or "",
        location=row.location or "",
        headline=row.headline or "",
        bio=row.bio or "",
        skills=parse_skill_set(row.skills, source=f"candidate {row.user_id}"),
        education=list(row.education or []),
        experience=list(row.experience or []),
        linkedin_url=row.linkedin_url or "",
        github_url=row.github_url or "",
        portfolio_url=row.portfolio_url or "",
        resume_path=row.resume_path,
        profile_picture=row.profile_picture,
        created_at=row.created_at,
        updated_at=row.updated_at or row.created_at,
    )


def employer_profile_from_model(row: EmployerProfileModel) -> EmployerProfile:
    return EmployerProfile(
        id=row.id,
        user_id=row.user_id,
        company_name=row.company_name,
        company_description=row.company_description or "",
        industry=row.industry or "",
        company_size=row.company_size or "",
        website=row.website or "",
        location=row.location or "",
        phone=row.phone or "",
        logo_path=row.logo_path,
        is_verified=bool(row.is_verified),
        created_at=row.created_at,
        updated_at=row.updated_at or row.created_at,
    )


class SQLAlchemyProfileRepository(ProfileRepository):
    """
    SQLAlchemy implementation of the profile repository.

    Skill lists are validated on the way out of the database so malformed
    stored data never reaches the matcher.
    """

    def __init__(self, db_session):
        self.db_session = db_session

    async def get_candidate_profile(self, user_id: UUID) -> Optional[CandidateProfile]:
        stmt = select(CandidateProfileModel).where(CandidateProfileModel.user_id == user_id)
        result = await self.db_session.execute(stmt)
        row = result.scalar_one_or_none()
        return candidate_profile_from_model(row) if row else None

    async def get_candidate_profiles(self, user_ids: List[UUID]) -> Dict[UUID, CandidateProfile]:
        if not user_ids:
            return {}
        stmt = select(CandidateProfileModel).where(CandidateProfileModel.user_id.in_(user_ids))
        result = await self.db_session.execute(stmt)
        return {row.user_id: candidate_profile_from_model(row) for row in result.scalars().all()}

    async def save_candidate_profile(self, profile: CandidateProfile) -> CandidateProfile:
        stmt = select(CandidateProfileModel).where(CandidateProfileModel.user_id == profile.user_id)
        row = (await self.db_session.execute(stmt)).scalar_one_or_none()
        if row is None:
            row = CandidateProfileModel(
                id=profile.id, user_id=profile.user_id, created_at=profile.created_at
            )
            self.db_session.add(row)

        row.full_name = profile.full_name
        row.phone = profile.phone
        row.location = profile.location
        row.headline = profile.headline
        row.bio = profile.bio
        row.skills = profile.skills.to_list()
        row.education = list(profile.education)
        row.experience = list(profile.experience)
        row.linkedin_url = profile.linkedin_url
        row.github_url = profile.github_url
        row.portfolio_url = profile.portfolio_url
        row.resume_path = profile.resume_path
        row.profile_picture = profile.profile_picture
        row.updated_at = profile.updated_at

        await self.db_session.commit()
        await self.db_session.refresh(row)
        return candidate_profile_from_model(row)

    async def get_employer_profile(self, user_id: UUID) -> Optional[EmployerProfile]:
        stmt = select(EmployerProfileModel).where(EmployerProfileModel.user_id == user_id)
        result = await self.db_session.execute(stmt)
        row = result.scalar_one_or_none()
        return employer_profile_from_model(row) if row else None

    async def get_employer_profiles(self, user_ids: List[UUID]) -> Dict[UUID, EmployerProfile]:
        if not user_ids:
            return {}
        stmt = select(EmployerProfileModel).where(EmployerProfileModel.user_id.in_(user_ids))
        result = await self.db_session.execute(stmt)
        return {row.user_id: employer_profile_from_model(row) for row in result.scalars().all()}

    async def save_employer_profile(self, profile: EmployerProfile) -> EmployerProfile:
        stmt = select(EmployerProfileModel).where(EmployerProfileModel.user_id == profile.user_id)
        row = (await self.db_session.execute(stmt)).scalar_one_or_none()
        if row is None:
            row = EmployerProfileModel(
                id=profile.id, user_id=profile.user_id, created_at=profile.created_at
            )
            self.db_session.add(row)

        row.company_name = profile.company_name
        row.company_description = profile.company_description
        row.industry = profile.industry
        row.company_size = profile.company_size
        row.website = profile.website
        row.location = profile.location
        row.phone = profile.phone
        row.logo_path = profile.logo_path
        row.is_verified = profile.is_verified
        row.updated_at = profile.updated_at

        await self.db_session.commit()
        await self.db_session.refresh(row)
        return employer_profile_from_model(row)
