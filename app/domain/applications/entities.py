"""
Applications domain entities.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Optional
from uuid import UUID, uuid4


class ApplicationStatus(str, Enum):
    """
    Application lifecycle: pending -> reviewed -> shortlisted/rejected -> hired.

    Employers may set any status; transitions are not enforced.
    """
    PENDING = "pending"
    REVIEWED = "reviewed"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    HIRED = "hired"


@dataclass
class Application:
    """A candidate's application to one job"""

    job_id: UUID
    candidate_id: UUID
    employer_id: UUID
    resume_path: Optional[str] = None
    cover_letter: str = ""
    status: ApplicationStatus = ApplicationStatus.PENDING
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def belongs_to_employer(self, employer_id: UUID) -> bool:
        return self.employer_id == employer_id

    def change_status(self, status: ApplicationStatus) -> None:
        self.status = status
        self.updated_at = datetime.utcnow()


@dataclass
class StatusCounts:
    """Number of applications per status"""

    counts: Dict[ApplicationStatus, int] = field(default_factory=dict)

    def get(self, status: ApplicationStatus) -> int:
        return self.counts.get(status, 0)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def as_dict(self) -> Dict[str, int]:
        return {status.value: self.get(status) for status in ApplicationStatus}
