"""
Jobs domain entities representing job-related business objects.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4

from ..matching.value_objects import SkillSet


class JobStatus(str, Enum):
    """Lifecycle of a job posting"""
    OPEN = "open"
    CLOSED = "closed"
    HIDDEN = "hidden"


class JobType(str, Enum):
    """Employment types offered on the board"""
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"
    REMOTE = "remote"


@dataclass
class Job:
    """
    Job posting aggregate.

    Only open jobs are visible in public listings and accept applications.
    A job that collects enough reports is hidden from the board.
    """

    employer_id: UUID
    title: str
    description: str
    location: str
    job_type: JobType = JobType.FULL_TIME
    id: UUID = field(default_factory=uuid4)
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    category: str = ""
    required_skills: SkillSet = field(default_factory=SkillSet)
    experience_level: str = ""
    status: JobStatus = JobStatus.OPEN
    report_count: int = 0
    application_count: int = 0
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise ValueError("Job title cannot be empty")

        if self.salary_min is not None and self.salary_min < 0:
            raise ValueError("Minimum salary cannot be negative")

        if (
            self.salary_min is not None
            and self.salary_max is not None
            and self.salary_max < self.salary_min
        ):
            raise ValueError("Maximum salary cannot be less than minimum salary")

    @property
    def is_open(self) -> bool:
        return self.status == JobStatus.OPEN

    def is_owned_by(self, employer_id: UUID) -> bool:
        return self.employer_id == employer_id

    def reached_report_threshold(self, threshold: int) -> bool:
        """True when a visible job has collected enough reports to be hidden."""
        return self.report_count >= threshold and self.status != JobStatus.HIDDEN

    def primary_location(self) -> str:
        """First comma-separated segment of the location, e.g. the city."""
        return self.location.split(",")[0].strip()


@dataclass
class JobFilters:
    """Filters accepted by the public job listing"""

    keyword: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[JobType] = None
    category: Optional[str] = None
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    skills: List[str] = field(default_factory=list)

    @classmethod
    def from_query(
        cls,
        keyword: Optional[str] = None,
        location: Optional[str] = None,
        job_type: Optional[JobType] = None,
        category: Optional[str] = None,
        salary_min: Optional[int] = None,
        salary_max: Optional[int] = None,
        skills: Optional[str] = None,
    ) -> "JobFilters":
        skill_terms = [s.strip() for s in (skills or "").split(",") if s.strip()]
        return cls(
            keyword=keyword or None,
            location=location or None,
            job_type=job_type,
            category=category or None,
            salary_min=salary_min,
            salary_max=salary_max,
            skills=skill_terms,
        )

    def matches_skills(self, job: Job) -> bool:
        """Every requested skill must appear in the job's required skills."""
        if not self.skills:
            return True
        job_skills = job.required_skills.normalized()
        return all(
            any(wanted.lower() in skill for skill in job_skills) for wanted in self.skills
        )


@dataclass
class CategorySummary:
    """Open-job statistics for one category"""

    name: str
    job_count: int = 0
    total_applications: int = 0


@dataclass
class SavedJob:
    """A candidate's bookmark of a job"""

    candidate_id: UUID
    job_id: UUID
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class JobReport:
    """A candidate's complaint about a job posting"""

    job_id: UUID
    candidate_id: UUID
    reason: str
    description: str = ""
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        if not self.reason or not self.reason.strip():
            raise ValueError("Report reason is required")
