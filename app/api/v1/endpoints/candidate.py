from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status

from app.core.auth import require_candidate
from app.dependencies import (
    get_application_service,
    get_job_service,
    get_matching_service,
    get_user_service,
)
from app.domain.applications.entities import ApplicationStatus
from app.domain.applications.services import ApplicationDomainService
from app.domain.jobs.services import JobDomainService
from app.domain.matching.services import MatchingDomainService
from app.domain.users.entities import User
from app.domain.users.services import UserDomainService
from app.schemas.applications import (
    ApplicationCheckResponse,
    ApplicationResponse,
    ApplicationStatusBrief,
    ApplyRequest,
    ApplyResponse,
    CandidateDashboardResponse,
    CandidateDashboardStats,
)
from app.schemas.base import MessageResponse
from app.schemas.jobs import JobResponse, SavedJobCheckResponse
from app.schemas.matching import RecommendedJobResponse
from app.schemas.profiles import (
    CandidateProfileMutationResponse,
    CandidateProfileResponse,
    CandidateProfileUpdate,
)

router = APIRouter(tags=["candidate"])


@router.get("/dashboard", response_model=CandidateDashboardResponse)
async def dashboard(
    candidate: User = Depends(require_candidate),
    application_service: ApplicationDomainService = Depends(get_application_service),
):
    summary = await application_service.candidate_dashboard(candidate.id)
    counts = summary.status_counts
    return CandidateDashboardResponse(
        stats=CandidateDashboardStats(
            total_applications=counts.total,
            pending=counts.get(ApplicationStatus.PENDING),
            reviewed=counts.get(ApplicationStatus.REVIEWED),
            shortlisted=counts.get(ApplicationStatus.SHORTLISTED),
            rejected=counts.get(ApplicationStatus.REJECTED),
            hired=counts.get(ApplicationStatus.HIRED),
            saved_jobs=summary.saved_jobs,
            unread_notifications=summary.unread_notifications,
        ),
        recent_applications=[ApplicationResponse.from_view(v) for v in summary.recent_applications],
    )


@router.get("/profile", response_model=CandidateProfileResponse)
async def get_profile(
    candidate: User = Depends(require_candidate),
    user_service: UserDomainService = Depends(get_user_service),
):
    profile = await user_service.get_candidate_profile(candidate.id)
    return CandidateProfileResponse.from_domain(profile, email=candidate.email)


@router.put("/profile", response_model=CandidateProfileMutationResponse)
async def update_profile(
    request: CandidateProfileUpdate,
    candidate: User = Depends(require_candidate),
    user_service: UserDomainService = Depends(get_user_service),
):
    profile = await user_service.update_candidate_profile(candidate.id, request.changes())
    return CandidateProfileMutationResponse(
        message="Profile updated successfully",
        profile=CandidateProfileResponse.from_domain(profile, email=candidate.email),
    )


@router.post("/apply/{job_id}", response_model=ApplyResponse, status_code=status.HTTP_201_CREATED)
async def apply(
    job_id: UUID,
    request: Optional[ApplyRequest] = Body(None),
    candidate: User = Depends(require_candidate),
    application_service: ApplicationDomainService = Depends(get_application_service),
):
    """Apply to an open job with the given or the profile resume"""
    request = request or ApplyRequest()
    application = await application_service.apply(
        candidate.id,
        job_id,
        cover_letter=request.cover_letter,
        resume_path=request.resume_path,
    )
    return ApplyResponse(message="Application submitted successfully", application_id=application.id)


@router.get("/applications", response_model=List[ApplicationResponse])
async def applications(
    status: Optional[ApplicationStatus] = None,
    candidate: User = Depends(require_candidate),
    application_service: ApplicationDomainService = Depends(get_application_service),
):
    views = await application_service.candidate_applications(candidate.id, status=status)
    return [ApplicationResponse.from_view(v) for v in views]


@router.get("/applications/check/{job_id}", response_model=ApplicationCheckResponse)
async def check_application(
    job_id: UUID,
    candidate: User = Depends(require_candidate),
    application_service: ApplicationDomainService = Depends(get_application_service),
):
    application = await application_service.check_applied(candidate.id, job_id)
    return ApplicationCheckResponse(
        has_applied=application is not None,
        application=(
            ApplicationStatusBrief(id=application.id, status=application.status)
            if application
            else None
        ),
    )


@router.get("/saved-jobs", response_model=List[JobResponse])
async def saved_jobs(
    candidate: User = Depends(require_candidate),
    job_service: JobDomainService = Depends(get_job_service),
    user_service: UserDomainService = Depends(get_user_service),
):
    jobs = await job_service.saved_jobs(candidate.id)
    companies = await user_service.get_company_profiles([job.employer_id for job in jobs])
    return [JobResponse.from_domain(job, companies.get(job.employer_id)) for job in jobs]


@router.post("/saved-jobs/{job_id}", response_model=MessageResponse)
async def save_job(
    job_id: UUID,
    candidate: User = Depends(require_candidate),
    job_service: JobDomainService = Depends(get_job_service),
):
    await job_service.save_job_for_candidate(candidate.id, job_id)
    return MessageResponse(message="Job saved successfully")


@router.delete("/saved-jobs/{job_id}", response_model=MessageResponse)
async def unsave_job(
    job_id: UUID,
    candidate: User = Depends(require_candidate),
    job_service: JobDomainService = Depends(get_job_service),
):
    await job_service.unsave_job(candidate.id, job_id)
    return MessageResponse(message="Job removed from saved list")


@router.get("/saved-jobs/check/{job_id}", response_model=SavedJobCheckResponse)
async def check_saved_job(
    job_id: UUID,
    candidate: User = Depends(require_candidate),
    job_service: JobDomainService = Depends(get_job_service),
):
    return SavedJobCheckResponse(is_saved=await job_service.is_job_saved(candidate.id, job_id))


@router.get("/recommended-jobs", response_model=List[RecommendedJobResponse])
async def recommended_jobs(
    candidate: User = Depends(require_candidate),
    matching_service: MatchingDomainService = Depends(get_matching_service),
    user_service: UserDomainService = Depends(get_user_service),
):
    """Open jobs ranked by how well the candidate's skills cover their requirements"""
    recommendations = await matching_service.recommend_jobs_for_candidate(candidate.id)
    companies = await user_service.get_company_profiles(
        [r.job.employer_id for r in recommendations]
    )
    return [
        RecommendedJobResponse.from_recommendation(r, companies.get(r.job.employer_id))
        for r in recommendations
    ]
