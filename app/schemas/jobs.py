from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import Field

from app.domain.jobs.entities import CategorySummary, Job, JobStatus, JobType
from app.domain.users.entities import EmployerProfile

from .base import CamelModel

# Fields that may legitimately be cleared with an explicit null
_NULLABLE_FIELDS = {"salary_min", "salary_max"}


class JobCreateRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1, max_length=255)
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    job_type: JobType = JobType.FULL_TIME
    category: str = ""
    required_skills: List[str] = Field(default_factory=list)
    experience_level: str = ""


class JobUpdateRequest(CamelModel):
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    job_type: Optional[JobType] = None
    category: Optional[str] = None
    required_skills: Optional[List[str]] = None
    experience_level: Optional[str] = None
    status: Optional[JobStatus] = None

    def changes(self) -> Dict[str, Any]:
        """Fields present in the request, without nulls for required attributes."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in _NULLABLE_FIELDS
        }


class JobReportRequest(CamelModel):
    reason: str = Field(..., max_length=255)
    description: str = ""


class JobResponse(CamelModel):
    id: UUID
    employer_id: UUID
    title: str
    description: str
    location: str
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    job_type: JobType
    category: str = ""
    required_skills: List[str] = Field(default_factory=list)
    experience_level: str = ""
    status: JobStatus
    application_count: int = 0
    created_at: datetime
    updated_at: datetime
    company_name: Optional[str] = None
    logo_path: Optional[str] = None

    @classmethod
    def from_domain(cls, job: Job, company: Optional[EmployerProfile] = None, **extra):
        return cls(
            id=job.id,
            employer_id=job.employer_id,
            title=job.title,
            description=job.description,
            location=job.location,
            salary_min=job.salary_min,
            salary_max=job.salary_max,
            job_type=job.job_type,
            category=job.category,
            required_skills=job.required_skills.to_list(),
            experience_level=job.experience_level,
            status=job.status,
            application_count=job.application_count,
            created_at=job.created_at,
            updated_at=job.updated_at,
            company_name=company.company_name if company else None,
            logo_path=company.logo_path if company else None,
            **extra,
        )


class JobSummary(CamelModel):
    """Compact job card used in related-job lists and company pages"""

    id: UUID
    title: str
    location: str
    job_type: JobType
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    category: str = ""
    created_at: datetime
    company_name: Optional[str] = None
    logo_path: Optional[str] = None

    @classmethod
    def from_domain(cls, job: Job, company: Optional[EmployerProfile] = None):
        return cls(
            id=job.id,
            title=job.title,
            location=job.location,
            job_type=job.job_type,
            salary_min=job.salary_min,
            salary_max=job.salary_max,
            category=job.category,
            created_at=job.created_at,
            company_name=company.company_name if company else None,
            logo_path=company.logo_path if company else None,
        )


class CompanyDetails(CamelModel):
    company_name: Optional[str] = None
    company_description: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None
    company_location: Optional[str] = None
    logo_path: Optional[str] = None


class JobDetailResponse(CamelModel):
    job: JobResponse
    company: CompanyDetails
    similar_jobs: List[JobSummary] = Field(default_factory=list)
    company_jobs: List[JobSummary] = Field(default_factory=list)


class JobMutationResponse(CamelModel):
    message: str
    job: JobResponse


class CategoryResponse(CamelModel):
    category: str
    job_count: int
    total_applications: int = 0

    @classmethod
    def from_domain(cls, summary: CategorySummary):
        return cls(
            category=summary.name,
            job_count=summary.job_count,
            total_applications=summary.total_applications,
        )


class SavedJobCheckResponse(CamelModel):
    is_saved: bool
