"""
Builders for signed-in accounts and records seeded straight through the
repositories.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from jose import jwt

from app.config.config_validator import get_config
from app.domain.applications.entities import Application
from app.domain.applications.repositories import SQLAlchemyApplicationRepository
from app.domain.jobs.entities import Job, JobStatus, JobType
from app.domain.jobs.repositories import SQLAlchemyJobRepository
from app.domain.matching.value_objects import SkillSet
from app.domain.users.entities import CandidateProfile, EmployerProfile, User, UserRole
from app.domain.users.repositories import SQLAlchemyProfileRepository, SQLAlchemyUserRepository

API = get_config().API_V1_STR


def make_token(user_id: uuid.UUID, role: str, email: Optional[str] = None, expires_in: int = 3600) -> str:
    """Sign a token the way the auth service does."""
    config = get_config()
    claims = {
        "id": str(user_id),
        "role": role,
        "exp": datetime.utcnow() + timedelta(seconds=expires_in),
    }
    if email:
        claims["email"] = email
    return jwt.encode(claims, config.SECRET_KEY, algorithm=config.ALGORITHM)


@dataclass
class Account:
    """A signed-in user as seen by the API."""

    id: uuid.UUID
    role: str
    email: str

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {make_token(self.id, self.role, self.email)}"}


def new_account(role: str) -> Account:
    user_id = uuid.uuid4()
    return Account(id=user_id, role=role, email=f"{role}-{user_id.hex[:8]}@example.com")


class Seeder:
    """Writes records through the repositories, bypassing the API."""

    def __init__(self, session_factory):
        self.session_factory = session_factory

    async def user(self, account: Account) -> None:
        async with self.session_factory() as session:
            await SQLAlchemyUserRepository(session).save_user(
                User(id=account.id, role=UserRole(account.role), email=account.email)
            )

    async def employer_profile(self, account: Account, company_name: str = "Acme Corp") -> None:
        await self.user(account)
        async with self.session_factory() as session:
            await SQLAlchemyProfileRepository(session).save_employer_profile(
                EmployerProfile(user_id=account.id, company_name=company_name)
            )

    async def candidate_profile(
        self,
        account: Account,
        skills: List[str],
        full_name: str = "Test Candidate",
        resume_path: Optional[str] = "resumes/cv.pdf",
    ) -> None:
        await self.user(account)
        async with self.session_factory() as session:
            await SQLAlchemyProfileRepository(session).save_candidate_profile(
                CandidateProfile(
                    user_id=account.id,
                    full_name=full_name,
                    skills=SkillSet.of(skills),
                    resume_path=resume_path,
                )
            )

    async def job(
        self,
        employer: Account,
        title: str,
        skills: List[str],
        created_at: Optional[datetime] = None,
        status: JobStatus = JobStatus.OPEN,
        category: str = "Engineering",
        location: str = "Berlin, Germany",
        job_type: JobType = JobType.FULL_TIME,
    ) -> Job:
        job = Job(
            employer_id=employer.id,
            title=title,
            description=f"{title} description",
            location=location,
            job_type=job_type,
            category=category,
            required_skills=SkillSet.of(skills),
            status=status,
            created_at=created_at or datetime.utcnow(),
        )
        async with self.session_factory() as session:
            return await SQLAlchemyJobRepository(session).save_job(job)

    async def application(
        self, candidate: Account, job: Job, created_at: Optional[datetime] = None
    ) -> Application:
        application = Application(
            job_id=job.id,
            candidate_id=candidate.id,
            employer_id=job.employer_id,
            resume_path="resumes/cv.pdf",
            created_at=created_at or datetime.utcnow(),
        )
        async with self.session_factory() as session:
            return await SQLAlchemyApplicationRepository(session).add(application)
