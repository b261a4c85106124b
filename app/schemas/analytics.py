from typing import List

from pydantic import Field

from app.domain.analytics.entities import PublicAnalytics
from app.domain.jobs.entities import JobType

from .base import CamelModel


class BoardStats(CamelModel):
    total_candidates: int = 0
    total_employers: int = 0
    total_jobs: int = 0
    active_jobs: int = 0
    total_applications: int = 0


class CategoryStat(CamelModel):
    category: str
    applications: int
    jobs: int


class JobTypeStat(CamelModel):
    job_type: JobType
    count: int


class LocationStat(CamelModel):
    location: str
    count: int


class PublicAnalyticsResponse(CamelModel):
    stats: BoardStats
    top_categories: List[CategoryStat] = Field(default_factory=list)
    job_types: List[JobTypeStat] = Field(default_factory=list)
    top_locations: List[LocationStat] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, analytics: PublicAnalytics):
        totals = analytics.totals
        return cls(
            stats=BoardStats(
                total_candidates=totals.total_candidates,
                total_employers=totals.total_employers,
                total_jobs=totals.total_jobs,
                active_jobs=totals.active_jobs,
                total_applications=totals.total_applications,
            ),
            top_categories=[
                CategoryStat(category=c.name, applications=c.total_applications, jobs=c.job_count)
                for c in analytics.top_categories
            ],
            job_types=[JobTypeStat(job_type=t.job_type, count=t.count) for t in analytics.job_types],
            top_locations=[
                LocationStat(location=loc.location, count=loc.count) for loc in analytics.top_locations
            ],
        )
