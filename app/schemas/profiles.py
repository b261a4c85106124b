from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import Field

from app.domain.users.entities import CandidateProfile, EmployerProfile

from .base import CamelModel
from .jobs import JobSummary


class CandidateProfileUpdate(CamelModel):
    full_name: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    location: Optional[str] = Field(None, max_length=255)
    headline: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    education: Optional[List[Dict[str, Any]]] = None
    experience: Optional[List[Dict[str, Any]]] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    resume_path: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}


class CandidateProfileResponse(CamelModel):
    id: UUID
    user_id: UUID
    full_name: str = ""
    phone: str = ""
    location: str = ""
    headline: str = ""
    bio: str = ""
    skills: List[str] = Field(default_factory=list)
    education: List[Dict[str, Any]] = Field(default_factory=list)
    experience: List[Dict[str, Any]] = Field(default_factory=list)
    linkedin_url: str = ""
    github_url: str = ""
    portfolio_url: str = ""
    resume_path: Optional[str] = None
    profile_picture: Optional[str] = None
    email: Optional[str] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, profile: CandidateProfile, email: Optional[str] = None):
        return cls(
            id=profile.id,
            user_id=profile.user_id,
            full_name=profile.full_name,
            phone=profile.phone,
            location=profile.location,
            headline=profile.headline,
            bio=profile.bio,
            skills=profile.skills.to_list(),
            education=profile.education,
            experience=profile.experience,
            linkedin_url=profile.linkedin_url,
            github_url=profile.github_url,
            portfolio_url=profile.portfolio_url,
            resume_path=profile.resume_path,
            profile_picture=profile.profile_picture,
            email=email,
            updated_at=profile.updated_at,
        )


class EmployerProfileUpdate(CamelModel):
    company_name: Optional[str] = Field(None, min_length=1, max_length=255)
    company_description: Optional[str] = None
    industry: Optional[str] = None
    company_size: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}


class EmployerProfileResponse(CamelModel):
    id: UUID
    user_id: UUID
    company_name: str
    company_description: str = ""
    industry: str = ""
    company_size: str = ""
    website: str = ""
    location: str = ""
    phone: str = ""
    logo_path: Optional[str] = None
    is_verified: bool = True
    member_since: Optional[datetime] = None

    @classmethod
    def from_domain(cls, profile: EmployerProfile, member_since: Optional[datetime] = None):
        return cls(
            id=profile.id,
            user_id=profile.user_id,
            company_name=profile.company_name,
            company_description=profile.company_description,
            industry=profile.industry,
            company_size=profile.company_size,
            website=profile.website,
            location=profile.location,
            phone=profile.phone,
            logo_path=profile.logo_path,
            is_verified=profile.is_verified,
            member_since=member_since,
        )


class CandidateProfileMutationResponse(CamelModel):
    message: str
    profile: CandidateProfileResponse


class EmployerProfileMutationResponse(CamelModel):
    message: str
    profile: EmployerProfileResponse


class CompanyPageResponse(CamelModel):
    company: EmployerProfileResponse
    jobs: List[JobSummary] = Field(default_factory=list)
    job_count: int = 0
