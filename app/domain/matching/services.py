"""
Matching domain service: skill-based job recommendations for candidates
and applicant ranking for employers.
"""

from typing import Iterable, List, Optional, Sequence, Set, Tuple
from uuid import UUID
import logging

from app.core.constants import BusinessRules, ErrorCodes
from app.utils.error_handling import ResourceNotFoundError

from ..applications.entities import Application
from ..applications.repositories import ApplicationRepository
from ..jobs.entities import Job
from ..jobs.repositories import JobRepository
from ..users.entities import CandidateProfile
from ..users.repositories import ProfileRepository, UserRepository
from .entities import ApplicantMatch, JobRecommendation, RankedApplicant
from .skill_matcher import match_skills
from .value_objects import SkillSet

logger = logging.getLogger(__name__)


def rank_recommendations(
    jobs: Sequence[Job],
    candidate_skills: SkillSet,
    excluded_job_ids: Set[UUID],
    limit: int = BusinessRules.DEFAULT_RECOMMENDATION_LIMIT,
) -> List[JobRecommendation]:
    """
    Score jobs against a candidate's skills.

    Excluded jobs are dropped, only positive scores are kept and the result
    is sorted by score descending. The sort is stable, so equal scores keep
    the order of `jobs`.
    """
    scored = [
        JobRecommendation(job=job, match=match_skills(job.required_skills, candidate_skills))
        for job in jobs
        if job.id not in excluded_job_ids
    ]
    positive = [r for r in scored if r.match.has_match]
    positive.sort(key=lambda r: r.score, reverse=True)
    return positive[:limit]


def rank_applicants_by_fit(
    required_skills: SkillSet,
    applicants: Iterable[Tuple[Application, Optional[CandidateProfile], Optional[str]]],
) -> List[RankedApplicant]:
    """
    Score every applicant against the job's required skills.

    Nobody is filtered out; applicants without a profile score 0. Stable
    sort by score descending.
    """
    ranked = [
        RankedApplicant(
            application=application,
            candidate=profile,
            email=email,
            match=match_skills(required_skills, profile.skills if profile else SkillSet()),
        )
        for application, profile, email in applicants
    ]
    ranked.sort(key=lambda r: r.score, reverse=True)
    return ranked


class MatchingDomainService:
    """
    Core domain service for skill matching.

    Data is fetched through the repositories passed in; scoring itself is
    pure and holds no state between calls.
    """

    def __init__(
        self,
        job_repository: JobRepository,
        application_repository: ApplicationRepository,
        profile_repository: ProfileRepository,
        user_repository: UserRepository,
        working_set_limit: Optional[int] = BusinessRules.DEFAULT_RECOMMENDATION_WORKING_SET,
        recommendation_limit: int = BusinessRules.DEFAULT_RECOMMENDATION_LIMIT,
    ):
        """Initialize with repository dependencies."""
        self.job_repository = job_repository
        self.application_repository = application_repository
        self.profile_repository = profile_repository
        self.user_repository = user_repository
        self.working_set_limit = working_set_limit or None
        self.recommendation_limit = recommendation_limit

    async def recommend_jobs_for_candidate(self, candidate_id: UUID) -> List[JobRecommendation]:
        """
        Best-matching open jobs the candidate has not applied to yet.

        A candidate without a profile or without skills gets an empty list.
        """
        profile = await self.profile_repository.get_candidate_profile(candidate_id)
        if profile is None or profile.skills.is_empty():
            return []

        applied = await self.application_repository.get_applied_job_ids(candidate_id)
        open_jobs = await self.job_repository.get_open_jobs(limit=self.working_set_limit)

        recommendations = rank_recommendations(
            open_jobs, profile.skills, applied, limit=self.recommendation_limit
        )
        logger.debug(
            f"Scored {len(open_jobs)} open jobs for candidate {candidate_id}, "
            f"{len(recommendations)} recommended"
        )
        return recommendations

    async def rank_applicants(self, job: Job) -> List[RankedApplicant]:
        """Every applicant of `job`, best fit first. Ownership is checked by the caller."""
        applications = await self.application_repository.list_for_job(job.id)
        candidate_ids = [a.candidate_id for a in applications]
        profiles = await self.profile_repository.get_candidate_profiles(candidate_ids)
        users = await self.user_repository.get_users_by_ids(candidate_ids)

        return rank_applicants_by_fit(
            job.required_skills,
            (
                (
                    a,
                    profiles.get(a.candidate_id),
                    users[a.candidate_id].email if a.candidate_id in users else None,
                )
                for a in applications
            ),
        )

    async def match_applicant(self, application: Application) -> ApplicantMatch:
        """Full profile of one applicant with their fit for the job applied to."""
        profile = await self.profile_repository.get_candidate_profile(application.candidate_id)
        if profile is None:
            raise ResourceNotFoundError(
                "candidate_profile",
                application.candidate_id,
                ErrorCodes.RESOURCE_PROFILE_NOT_FOUND,
                message="Candidate profile not found",
            )

        job = await self.job_repository.get_job_by_id(application.job_id)
        user = await self.user_repository.get_user_by_id(application.candidate_id)

        return ApplicantMatch(
            application=application,
            job=job,
            candidate=profile,
            email=user.email if user else None,
            match=match_skills(job.required_skills if job else SkillSet(), profile.skills),
        )
