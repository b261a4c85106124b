"""
Users domain entities: accounts mirrored from the auth service and the
profiles candidates and employers maintain on the board.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from ..matching.value_objects import SkillSet


class UserRole(str, Enum):
    """Account roles"""
    EMPLOYER = "employer"
    CANDIDATE = "candidate"


@dataclass
class User:
    """Identity and role of an account issued by the auth service"""

    id: UUID
    role: UserRole
    email: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_candidate(self) -> bool:
        return self.role == UserRole.CANDIDATE

    @property
    def is_employer(self) -> bool:
        return self.role == UserRole.EMPLOYER


@dataclass
class CandidateProfile:
    """
    Candidate profile.

    `skills` is the possessed side of every skill match; education and
    experience are free-form entries kept as the client sends them.
    """

    user_id: UUID
    id: UUID = field(default_factory=uuid4)
    full_name: str = ""
    phone: str = ""
    location: str = ""
    headline: str = ""
    bio: str = ""
    skills: SkillSet = field(default_factory=SkillSet)
    education: List[Dict[str, Any]] = field(default_factory=list)
    experience: List[Dict[str, Any]] = field(default_factory=list)
    linkedin_url: str = ""
    github_url: str = ""
    portfolio_url: str = ""
    resume_path: Optional[str] = None
    profile_picture: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def has_resume(self) -> bool:
        return bool(self.resume_path)

    def display_name(self) -> str:
        return self.full_name or "A candidate"

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        """Overwrite the given fields; unknown keys are ignored."""
        for key, value in changes.items():
            if key == "skills":
                value = SkillSet.of(value)
            if hasattr(self, key) and key not in ("id", "user_id", "created_at"):
                setattr(self, key, value)
        self.updated_at = datetime.utcnow()


@dataclass
class EmployerProfile:
    """Company information attached to an employer account"""

    user_id: UUID
    company_name: str
    id: UUID = field(default_factory=uuid4)
    company_description: str = ""
    industry: str = ""
    company_size: str = ""
    website: str = ""
    location: str = ""
    phone: str = ""
    logo_path: Optional[str] = None
    is_verified: bool = True
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        for key, value in changes.items():
            if hasattr(self, key) and key not in ("id", "user_id", "created_at", "is_verified"):
                setattr(self, key, value)
        self.updated_at = datetime.utcnow()
