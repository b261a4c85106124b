from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import Field

from app.domain.applications.entities import ApplicationStatus
from app.domain.applications.services import ApplicationView

from .base import CamelModel


class ApplyRequest(CamelModel):
    cover_letter: str = ""
    resume_path: Optional[str] = None


class ApplyResponse(CamelModel):
    message: str
    application_id: UUID


class StatusUpdateRequest(CamelModel):
    status: ApplicationStatus


class StatusUpdateResponse(CamelModel):
    message: str
    status: ApplicationStatus


class ApplicationStatusBrief(CamelModel):
    id: UUID
    status: ApplicationStatus


class ApplicationCheckResponse(CamelModel):
    has_applied: bool
    application: Optional[ApplicationStatusBrief] = None


class ApplicationResponse(CamelModel):
    """An application with the job, company and candidate fields shown next to it"""

    id: UUID
    job_id: UUID
    candidate_id: UUID
    employer_id: UUID
    status: ApplicationStatus
    cover_letter: str = ""
    resume_path: Optional[str] = None
    created_at: datetime
    job_title: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    company_name: Optional[str] = None
    company_logo: Optional[str] = None
    candidate_name: Optional[str] = None
    candidate_skills: List[str] = Field(default_factory=list)
    candidate_location: Optional[str] = None
    candidate_headline: Optional[str] = None

    @classmethod
    def from_view(cls, view: ApplicationView):
        application, job, company, candidate = (
            view.application,
            view.job,
            view.company,
            view.candidate,
        )
        return cls(
            id=application.id,
            job_id=application.job_id,
            candidate_id=application.candidate_id,
            employer_id=application.employer_id,
            status=application.status,
            cover_letter=application.cover_letter,
            resume_path=application.resume_path,
            created_at=application.created_at,
            job_title=job.title if job else None,
            location=job.location if job else None,
            job_type=job.job_type.value if job else None,
            salary_min=job.salary_min if job else None,
            salary_max=job.salary_max if job else None,
            company_name=company.company_name if company else None,
            company_logo=company.logo_path if company else None,
            candidate_name=candidate.full_name if candidate else None,
            candidate_skills=candidate.skills.to_list() if candidate else [],
            candidate_location=candidate.location if candidate else None,
            candidate_headline=candidate.headline if candidate else None,
        )


class CandidateDashboardStats(CamelModel):
    total_applications: int = 0
    pending: int = 0
    reviewed: int = 0
    shortlisted: int = 0
    rejected: int = 0
    hired: int = 0
    saved_jobs: int = 0
    unread_notifications: int = 0


class CandidateDashboardResponse(CamelModel):
    stats: CandidateDashboardStats
    recent_applications: List[ApplicationResponse] = Field(default_factory=list)


class EmployerDashboardStats(CamelModel):
    total_jobs: int = 0
    active_jobs: int = 0
    closed_jobs: int = 0
    total_applications: int = 0
    applications_this_month: int = 0


class EmployerDashboardResponse(CamelModel):
    stats: EmployerDashboardStats
    application_stats: Dict[str, int] = Field(default_factory=dict)
    recent_applications: List[ApplicationResponse] = Field(default_factory=list)
