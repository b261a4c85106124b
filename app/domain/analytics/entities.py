"""
Analytics domain entities: board-wide figures for the public home page.
"""

from dataclasses import dataclass, field
from typing import List

from ..jobs.entities import CategorySummary, JobType


@dataclass
class BoardTotals:
    total_candidates: int = 0
    total_employers: int = 0
    total_jobs: int = 0
    active_jobs: int = 0
    total_applications: int = 0


@dataclass
class JobTypeCount:
    job_type: JobType
    count: int


@dataclass
class LocationCount:
    location: str
    count: int


@dataclass
class PublicAnalytics:
    """
    Public snapshot of the board.

    Apart from the totals, every figure covers open jobs only.
    """

    totals: BoardTotals
    top_categories: List[CategorySummary] = field(default_factory=list)
    job_types: List[JobTypeCount] = field(default_factory=list)
    top_locations: List[LocationCount] = field(default_factory=list)
