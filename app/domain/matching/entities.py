"""
Matching domain entities: the scored results handed back to callers.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..applications.entities import Application
from ..jobs.entities import Job
from ..users.entities import CandidateProfile
from .value_objects import MatchResult


@dataclass
class JobRecommendation:
    """An open job scored against a candidate's skills"""

    job: Job
    match: MatchResult = field(default_factory=MatchResult)

    @property
    def score(self) -> int:
        return self.match.score


@dataclass
class RankedApplicant:
    """An application scored against the job it was made for"""

    application: Application
    candidate: Optional[CandidateProfile] = None
    email: Optional[str] = None
    match: MatchResult = field(default_factory=MatchResult)

    @property
    def score(self) -> int:
        return self.match.score


@dataclass
class ApplicantMatch:
    """Full applicant view for an employer: application, profile and fit"""

    application: Application
    job: Optional[Job]
    candidate: CandidateProfile
    email: Optional[str] = None
    match: MatchResult = field(default_factory=MatchResult)
