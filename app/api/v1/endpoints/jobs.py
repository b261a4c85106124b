from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.config.config_validator import get_config
from app.core.auth import require_candidate, require_employer
from app.dependencies import get_job_service, get_user_service
from app.domain.jobs.entities import Job, JobFilters, JobType
from app.domain.jobs.services import JobDomainService
from app.domain.users.entities import User
from app.domain.users.services import UserDomainService
from app.schemas.base import MessageResponse
from app.schemas.jobs import (
    CategoryResponse,
    CompanyDetails,
    JobCreateRequest,
    JobDetailResponse,
    JobMutationResponse,
    JobReportRequest,
    JobResponse,
    JobSummary,
    JobUpdateRequest,
)
from app.utils.logger import logger

config = get_config()

router = APIRouter(tags=["jobs"])


async def _with_companies(jobs: List[Job], user_service: UserDomainService) -> List[JobResponse]:
    companies = await user_service.get_company_profiles([job.employer_id for job in jobs])
    return [JobResponse.from_domain(job, companies.get(job.employer_id)) for job in jobs]


@router.post("", response_model=JobMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    request: JobCreateRequest,
    employer: User = Depends(require_employer),
    job_service: JobDomainService = Depends(get_job_service),
):
    """Post a new job"""
    job = await job_service.create_job(
        employer_id=employer.id,
        title=request.title,
        description=request.description,
        location=request.location,
        job_type=request.job_type,
        salary_min=request.salary_min,
        salary_max=request.salary_max,
        category=request.category,
        required_skills=request.required_skills,
        experience_level=request.experience_level,
    )
    return JobMutationResponse(message="Job posted successfully", job=JobResponse.from_domain(job))


@router.get("", response_model=List[JobResponse])
async def list_jobs(
    keyword: Optional[str] = None,
    location: Optional[str] = None,
    job_type: Optional[JobType] = Query(None, alias="jobType"),
    category: Optional[str] = None,
    salary_min: Optional[int] = Query(None, alias="salaryMin", ge=0),
    salary_max: Optional[int] = Query(None, alias="salaryMax", ge=0),
    skills: Optional[str] = Query(None, description="Comma-separated skills"),
    limit: int = Query(config.DEFAULT_LIST_LIMIT, ge=1, le=config.MAX_LIST_LIMIT),
    job_service: JobDomainService = Depends(get_job_service),
    user_service: UserDomainService = Depends(get_user_service),
):
    """Open jobs matching the filters, newest first"""
    filters = JobFilters.from_query(
        keyword=keyword,
        location=location,
        job_type=job_type,
        category=category,
        salary_min=salary_min,
        salary_max=salary_max,
        skills=skills,
    )
    jobs = await job_service.list_jobs(filters, limit=limit)
    return await _with_companies(jobs, user_service)


@router.get("/recent", response_model=List[JobResponse])
async def recent_jobs(
    limit: int = Query(config.RECENT_JOBS_DEFAULT_LIMIT, ge=1, le=config.MAX_LIST_LIMIT),
    job_service: JobDomainService = Depends(get_job_service),
    user_service: UserDomainService = Depends(get_user_service),
):
    """Newest open jobs for the home page"""
    jobs = await job_service.recent_jobs(limit=limit)
    return await _with_companies(jobs, user_service)


@router.get("/categories", response_model=List[CategoryResponse])
async def categories(job_service: JobDomainService = Depends(get_job_service)):
    summaries = await job_service.categories()
    return [CategoryResponse.from_domain(s) for s in summaries]


@router.get("/categories/trending", response_model=List[CategoryResponse])
async def trending_categories(job_service: JobDomainService = Depends(get_job_service)):
    summaries = await job_service.trending_categories()
    return [CategoryResponse.from_domain(s) for s in summaries]


@router.get("/{job_id}", response_model=JobDetailResponse)
async def get_job(
    job_id: UUID,
    job_service: JobDomainService = Depends(get_job_service),
    user_service: UserDomainService = Depends(get_user_service),
):
    """Job details with similar jobs and other openings from the same company"""
    detail = await job_service.get_job_detail(job_id)

    related = detail.similar_jobs + detail.company_jobs
    companies = await user_service.get_company_profiles(
        [detail.job.employer_id] + [job.employer_id for job in related]
    )
    company = companies.get(detail.job.employer_id)

    return JobDetailResponse(
        job=JobResponse.from_domain(detail.job, company),
        company=CompanyDetails(
            company_name=company.company_name if company else None,
            company_description=company.company_description if company else None,
            website=company.website if company else None,
            industry=company.industry if company else None,
            company_location=company.location if company else None,
            logo_path=company.logo_path if company else None,
        ),
        similar_jobs=[
            JobSummary.from_domain(job, companies.get(job.employer_id)) for job in detail.similar_jobs
        ],
        company_jobs=[JobSummary.from_domain(job) for job in detail.company_jobs],
    )


@router.put("/{job_id}", response_model=JobMutationResponse)
async def update_job(
    job_id: UUID,
    request: JobUpdateRequest,
    employer: User = Depends(require_employer),
    job_service: JobDomainService = Depends(get_job_service),
):
    job = await job_service.update_job(job_id, employer.id, request.changes())
    return JobMutationResponse(message="Job updated successfully", job=JobResponse.from_domain(job))


@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: UUID,
    employer: User = Depends(require_employer),
    job_service: JobDomainService = Depends(get_job_service),
):
    await job_service.delete_job(job_id, employer.id)
    return MessageResponse(message="Job deleted successfully")


@router.post("/{job_id}/report", response_model=MessageResponse)
async def report_job(
    job_id: UUID,
    request: JobReportRequest,
    candidate: User = Depends(require_candidate),
    job_service: JobDomainService = Depends(get_job_service),
):
    """Report a job; enough reports hide it from the board"""
    job = await job_service.report_job(job_id, candidate.id, request.reason, request.description)
    logger.info("Job reported", job_id=str(job_id), report_count=job.report_count)
    return MessageResponse(message="Job reported successfully")
