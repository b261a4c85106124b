"""
Analytics domain service aggregating board statistics from the job,
application and user repositories.
"""

from typing import List
import logging

from app.core.constants import BusinessRules

from ..applications.repositories import ApplicationRepository
from ..jobs.entities import CategorySummary, JobStatus, JobType
from ..jobs.repositories import JobRepository
from ..users.entities import UserRole
from ..users.repositories import UserRepository
from .entities import BoardTotals, JobTypeCount, LocationCount, PublicAnalytics

logger = logging.getLogger(__name__)


def top_categories_by_applications(
    summaries: List[CategorySummary], limit: int
) -> List[CategorySummary]:
    """Categories with the most applications; ties keep alphabetical order."""
    ranked = sorted(summaries, key=lambda c: c.total_applications, reverse=True)
    return ranked[:limit]


class AnalyticsDomainService:
    """Read-only statistics about the whole board."""

    def __init__(
        self,
        job_repository: JobRepository,
        application_repository: ApplicationRepository,
        user_repository: UserRepository,
    ):
        self.job_repository = job_repository
        self.application_repository = application_repository
        self.user_repository = user_repository

    async def board_totals(self) -> BoardTotals:
        return BoardTotals(
            total_candidates=await self.user_repository.count_by_role(UserRole.CANDIDATE),
            total_employers=await self.user_repository.count_by_role(UserRole.EMPLOYER),
            total_jobs=await self.job_repository.count_jobs(),
            active_jobs=await self.job_repository.count_jobs(status=JobStatus.OPEN),
            total_applications=await self.application_repository.count_all(),
        )

    async def public_analytics(
        self,
        category_limit: int = BusinessRules.TOP_CATEGORIES_LIMIT,
        location_limit: int = BusinessRules.TOP_LOCATIONS_LIMIT,
    ) -> PublicAnalytics:
        totals = await self.board_totals()

        summaries = await self.job_repository.get_category_summaries()
        type_counts = await self.job_repository.get_job_type_counts()
        locations = await self.job_repository.get_top_locations(location_limit)

        logger.debug(
            f"Public analytics: {totals.active_jobs} open jobs in {len(summaries)} categories"
        )

        return PublicAnalytics(
            totals=totals,
            top_categories=top_categories_by_applications(summaries, category_limit),
            job_types=[
                JobTypeCount(job_type=job_type, count=type_counts[job_type])
                for job_type in JobType
                if type_counts.get(job_type)
            ],
            top_locations=[LocationCount(location=loc, count=count) for loc, count in locations],
        )
