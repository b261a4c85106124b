from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import Field

from app.domain.applications.entities import ApplicationStatus
from app.domain.matching.entities import ApplicantMatch, JobRecommendation, RankedApplicant
from app.domain.users.entities import EmployerProfile

from .base import CamelModel
from .jobs import JobResponse
from .profiles import CandidateProfileResponse


class RecommendedJobResponse(JobResponse):
    match_score: int
    matching_skills: List[str] = Field(default_factory=list)

    @classmethod
    def from_recommendation(
        cls, recommendation: JobRecommendation, company: Optional[EmployerProfile] = None
    ):
        return cls.from_domain(
            recommendation.job,
            company,
            match_score=recommendation.match.score,
            matching_skills=recommendation.match.matching_skills(),
        )


class RankedApplicantResponse(CamelModel):
    application_id: UUID
    candidate_id: UUID
    status: ApplicationStatus
    applied_at: datetime
    full_name: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    experience: List[Dict[str, Any]] = Field(default_factory=list)
    email: Optional[str] = None
    match_score: int
    matching_skills: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, ranked: RankedApplicant):
        candidate = ranked.candidate
        return cls(
            application_id=ranked.application.id,
            candidate_id=ranked.application.candidate_id,
            status=ranked.application.status,
            applied_at=ranked.application.created_at,
            full_name=candidate.full_name if candidate else None,
            skills=candidate.skills.to_list() if candidate else [],
            location=candidate.location if candidate else None,
            experience=candidate.experience if candidate else [],
            email=ranked.email,
            match_score=ranked.match.score,
            matching_skills=ranked.match.matching_skills(),
        )


class ApplicantApplication(CamelModel):
    id: UUID
    status: ApplicationStatus
    cover_letter: str = ""
    resume_path: Optional[str] = None
    applied_at: datetime
    job_title: Optional[str] = None


class ApplicantDetailResponse(CamelModel):
    application: ApplicantApplication
    candidate: CandidateProfileResponse
    match_score: int
    matching_skills: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, applicant: ApplicantMatch):
        application = applicant.application
        return cls(
            application=ApplicantApplication(
                id=application.id,
                status=application.status,
                cover_letter=application.cover_letter,
                resume_path=application.resume_path,
                applied_at=application.created_at,
                job_title=applicant.job.title if applicant.job else None,
            ),
            candidate=CandidateProfileResponse.from_domain(applicant.candidate, email=applicant.email),
            match_score=applicant.match.score,
            matching_skills=applicant.match.matching_skills(),
        )
