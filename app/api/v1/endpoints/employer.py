from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends

from app.core.auth import require_employer
from app.dependencies import (
    get_application_service,
    get_job_service,
    get_matching_service,
    get_user_service,
)
from app.domain.applications.entities import ApplicationStatus
from app.domain.applications.services import ApplicationDomainService
from app.domain.jobs.entities import JobStatus
from app.domain.jobs.services import JobDomainService
from app.domain.matching.services import MatchingDomainService
from app.domain.users.entities import User
from app.domain.users.services import UserDomainService
from app.schemas.applications import (
    ApplicationResponse,
    EmployerDashboardResponse,
    EmployerDashboardStats,
    StatusUpdateRequest,
    StatusUpdateResponse,
)
from app.schemas.jobs import JobResponse, JobSummary
from app.schemas.matching import ApplicantDetailResponse, RankedApplicantResponse
from app.schemas.profiles import (
    CompanyPageResponse,
    EmployerProfileMutationResponse,
    EmployerProfileResponse,
    EmployerProfileUpdate,
)

router = APIRouter(tags=["employer"])


@router.get("/dashboard", response_model=EmployerDashboardResponse)
async def dashboard(
    employer: User = Depends(require_employer),
    application_service: ApplicationDomainService = Depends(get_application_service),
):
    summary = await application_service.employer_dashboard(employer.id)
    return EmployerDashboardResponse(
        stats=EmployerDashboardStats(
            total_jobs=summary.total_jobs,
            active_jobs=summary.active_jobs,
            closed_jobs=summary.closed_jobs,
            total_applications=summary.total_applications,
            applications_this_month=summary.applications_this_month,
        ),
        application_stats=summary.status_counts.as_dict(),
        recent_applications=[ApplicationResponse.from_view(v) for v in summary.recent_applications],
    )


@router.get("/profile", response_model=EmployerProfileResponse)
async def get_profile(
    employer: User = Depends(require_employer),
    user_service: UserDomainService = Depends(get_user_service),
):
    profile = await user_service.get_employer_profile(employer.id)
    return EmployerProfileResponse.from_domain(profile)


@router.put("/profile", response_model=EmployerProfileMutationResponse)
async def update_profile(
    request: EmployerProfileUpdate,
    employer: User = Depends(require_employer),
    user_service: UserDomainService = Depends(get_user_service),
):
    profile = await user_service.update_employer_profile(employer.id, request.changes())
    return EmployerProfileMutationResponse(
        message="Profile updated successfully",
        profile=EmployerProfileResponse.from_domain(profile),
    )


@router.get("/jobs", response_model=List[JobResponse])
async def jobs(
    status: Optional[JobStatus] = None,
    employer: User = Depends(require_employer),
    job_service: JobDomainService = Depends(get_job_service),
):
    """All of the employer's jobs, including closed and hidden ones"""
    return [JobResponse.from_domain(job) for job in await job_service.employer_jobs(employer.id, status)]


@router.get("/jobs/{job_id}/applications", response_model=List[ApplicationResponse])
async def job_applications(
    job_id: UUID,
    status: Optional[ApplicationStatus] = None,
    employer: User = Depends(require_employer),
    job_service: JobDomainService = Depends(get_job_service),
    application_service: ApplicationDomainService = Depends(get_application_service),
):
    job = await job_service.get_owned_job(job_id, employer.id)
    views = await application_service.job_applications(job, status=status)
    return [ApplicationResponse.from_view(v) for v in views]


@router.get("/jobs/{job_id}/recommended-candidates", response_model=List[RankedApplicantResponse])
async def recommended_candidates(
    job_id: UUID,
    employer: User = Depends(require_employer),
    job_service: JobDomainService = Depends(get_job_service),
    matching_service: MatchingDomainService = Depends(get_matching_service),
):
    """The job's applicants ranked by skill match, zero scores included"""
    job = await job_service.get_owned_job(job_id, employer.id)
    ranked = await matching_service.rank_applicants(job)
    return [RankedApplicantResponse.from_domain(r) for r in ranked]


@router.put("/applications/{application_id}/status", response_model=StatusUpdateResponse)
async def update_application_status(
    application_id: UUID,
    request: StatusUpdateRequest,
    employer: User = Depends(require_employer),
    application_service: ApplicationDomainService = Depends(get_application_service),
):
    application = await application_service.update_status(
        application_id, employer.id, request.status
    )
    return StatusUpdateResponse(
        message="Application status updated successfully", status=application.status
    )


@router.get("/applications/{application_id}/candidate", response_model=ApplicantDetailResponse)
async def applicant_detail(
    application_id: UUID,
    employer: User = Depends(require_employer),
    application_service: ApplicationDomainService = Depends(get_application_service),
    matching_service: MatchingDomainService = Depends(get_matching_service),
):
    """Full candidate profile behind an application, with its skill match"""
    application = await application_service.get_employer_application(application_id, employer.id)
    applicant = await matching_service.match_applicant(application)
    return ApplicantDetailResponse.from_domain(applicant)


@router.get("/company/{employer_id}", response_model=CompanyPageResponse)
async def company_page(
    employer_id: UUID,
    user_service: UserDomainService = Depends(get_user_service),
):
    """Public company page"""
    page = await user_service.get_company_page(employer_id)
    return CompanyPageResponse(
        company=EmployerProfileResponse.from_domain(page.profile, member_since=page.member_since),
        jobs=[JobSummary.from_domain(job, page.profile) for job in page.jobs],
        job_count=page.job_count,
    )
