"""
Unit tests for job recommendations and applicant ranking.

Tests: ranking functions directly, and MatchingDomainService over
in-memory repositories.
"""
import uuid
from datetime import datetime, timedelta

import pytest

from app.core.constants import ErrorCodes
from app.domain.applications.entities import Application
from app.domain.jobs.entities import Job, JobStatus
from app.domain.matching.services import (
    MatchingDomainService,
    rank_applicants_by_fit,
    rank_recommendations,
)
from app.domain.matching.value_objects import SkillSet
from app.domain.users.entities import CandidateProfile, User, UserRole
from app.utils.error_handling import ResourceNotFoundError


pytestmark = pytest.mark.unit

CANDIDATE_SKILLS = SkillSet.of(
    ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel", "india", "juliet"]
)

# Required skill lists producing 40, 90 and 10 against CANDIDATE_SKILLS
SCORE_40 = ["alpha", "bravo", "kilo", "lima", "mike"]
SCORE_90 = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel", "india", "kilo"]
SCORE_10 = ["alpha", "kilo", "lima", "mike", "november", "oscar", "papa", "quebec", "romeo", "sierra"]
SCORE_0 = ["kilo", "lima"]


def make_job(title, skills, employer_id=None, created_at=None, status=JobStatus.OPEN):
    return Job(
        employer_id=employer_id or uuid.uuid4(),
        title=title,
        description="",
        location="Remote",
        required_skills=SkillSet.of(skills),
        status=status,
        created_at=created_at or datetime.utcnow(),
    )


class FakeJobRepository:
    def __init__(self, jobs):
        self.jobs = {job.id: job for job in jobs}
        self.requested_limits = []

    async def get_open_jobs(self, limit=None):
        self.requested_limits.append(limit)
        open_jobs = sorted(
            (job for job in self.jobs.values() if job.status == JobStatus.OPEN),
            key=lambda job: job.created_at,
            reverse=True,
        )
        return open_jobs[:limit] if limit else open_jobs

    async def get_job_by_id(self, job_id):
        return self.jobs.get(job_id)


class FakeApplicationRepository:
    def __init__(self, applications=()):
        self.applications = list(applications)

    async def get_applied_job_ids(self, candidate_id):
        return {a.job_id for a in self.applications if a.candidate_id == candidate_id}

    async def list_for_job(self, job_id, status=None):
        return [a for a in self.applications if a.job_id == job_id]


class FakeProfileRepository:
    def __init__(self, profiles=()):
        self.profiles = {p.user_id: p for p in profiles}

    async def get_candidate_profile(self, user_id):
        return self.profiles.get(user_id)

    async def get_candidate_profiles(self, user_ids):
        return {uid: self.profiles[uid] for uid in user_ids if uid in self.profiles}


class FakeUserRepository:
    def __init__(self, users=()):
        self.users = {u.id: u for u in users}

    async def get_user_by_id(self, user_id):
        return self.users.get(user_id)

    async def get_users_by_ids(self, user_ids):
        return {uid: self.users[uid] for uid in user_ids if uid in self.users}


def make_service(jobs=(), applications=(), profiles=(), users=(), working_set_limit=100, recommendation_limit=10):
    job_repository = FakeJobRepository(jobs)
    service = MatchingDomainService(
        job_repository,
        FakeApplicationRepository(applications),
        FakeProfileRepository(profiles),
        FakeUserRepository(users),
        working_set_limit=working_set_limit,
        recommendation_limit=recommendation_limit,
    )
    return service, job_repository


class TestRankRecommendations:
    """Tests for the pure recommendation ranking."""

    def test_sorted_by_score_with_ties_in_input_order(self):
        """Scores [40, 90, 90, 10] come back as [90, 90, 40, 10], tied jobs keeping input order."""
        j40 = make_job("forty", SCORE_40)
        j90a = make_job("ninety a", SCORE_90)
        j90b = make_job("ninety b", SCORE_90)
        j10 = make_job("ten", SCORE_10)

        ranked = rank_recommendations([j40, j90a, j90b, j10], CANDIDATE_SKILLS, set())

        assert [r.score for r in ranked] == [90, 90, 40, 10]
        assert [r.job.title for r in ranked] == ["ninety a", "ninety b", "forty", "ten"]

    def test_zero_scores_are_dropped(self):
        ranked = rank_recommendations(
            [make_job("none", SCORE_0), make_job("some", SCORE_40)], CANDIDATE_SKILLS, set()
        )
        assert [r.job.title for r in ranked] == ["some"]

    def test_jobs_without_requirements_are_dropped(self):
        assert rank_recommendations([make_job("open brief", [])], CANDIDATE_SKILLS, set()) == []

    def test_excluded_jobs_never_appear(self):
        applied = make_job("applied", SCORE_90)
        other = make_job("other", SCORE_40)

        ranked = rank_recommendations([applied, other], CANDIDATE_SKILLS, {applied.id})

        assert [r.job.id for r in ranked] == [other.id]

    def test_limit_truncates_after_sorting(self):
        jobs = [make_job(f"job {i}", SCORE_10) for i in range(5)] + [make_job("best", SCORE_90)]

        ranked = rank_recommendations(jobs, CANDIDATE_SKILLS, set(), limit=3)

        assert len(ranked) == 3
        assert ranked[0].job.title == "best"

    def test_matching_skills_are_reported(self):
        ranked = rank_recommendations([make_job("forty", SCORE_40)], CANDIDATE_SKILLS, set())
        assert ranked[0].match.matching_skills() == ["alpha", "bravo"]


class TestRankApplicantsByFit:
    """Tests for ranking a job's applicants."""

    def test_all_applicants_kept_best_first(self):
        job_id, employer_id = uuid.uuid4(), uuid.uuid4()
        required = SkillSet.of(["python", "sql"])

        entries = []
        for name, skills in (("none", ["cobol"]), ("half", ["python"]), ("full", ["python", "sql"])):
            candidate_id = uuid.uuid4()
            application = Application(job_id=job_id, candidate_id=candidate_id, employer_id=employer_id)
            profile = CandidateProfile(user_id=candidate_id, full_name=name, skills=SkillSet.of(skills))
            entries.append((application, profile, f"{name}@example.com"))

        ranked = rank_applicants_by_fit(required, entries)

        assert [r.score for r in ranked] == [100, 50, 0]
        assert [r.candidate.full_name for r in ranked] == ["full", "half", "none"]
        assert ranked[0].email == "full@example.com"

    def test_applicant_without_profile_scores_zero(self):
        application = Application(job_id=uuid.uuid4(), candidate_id=uuid.uuid4(), employer_id=uuid.uuid4())

        ranked = rank_applicants_by_fit(SkillSet.of(["python"]), [(application, None, None)])

        assert len(ranked) == 1
        assert ranked[0].score == 0
        assert ranked[0].candidate is None

    def test_no_applicants(self):
        assert rank_applicants_by_fit(SkillSet.of(["python"]), []) == []


class TestRecommendJobsForCandidate:
    """Tests for MatchingDomainService.recommend_jobs_for_candidate."""

    async def test_candidate_without_profile_gets_nothing(self):
        service, _ = make_service(jobs=[make_job("job", SCORE_90)])
        assert await service.recommend_jobs_for_candidate(uuid.uuid4()) == []

    async def test_candidate_without_skills_gets_nothing(self):
        candidate_id = uuid.uuid4()
        service, _ = make_service(
            jobs=[make_job("job", SCORE_90)],
            profiles=[CandidateProfile(user_id=candidate_id)],
        )
        assert await service.recommend_jobs_for_candidate(candidate_id) == []

    async def test_applied_and_closed_jobs_are_excluded(self):
        candidate_id = uuid.uuid4()
        applied = make_job("applied", SCORE_90)
        closed = make_job("closed", SCORE_90, status=JobStatus.CLOSED)
        hidden = make_job("hidden", SCORE_90, status=JobStatus.HIDDEN)
        fresh = make_job("fresh", SCORE_40)
        service, _ = make_service(
            jobs=[applied, closed, hidden, fresh],
            applications=[
                Application(job_id=applied.id, candidate_id=candidate_id, employer_id=applied.employer_id)
            ],
            profiles=[CandidateProfile(user_id=candidate_id, skills=CANDIDATE_SKILLS)],
        )

        recommendations = await service.recommend_jobs_for_candidate(candidate_id)

        assert [r.job.title for r in recommendations] == ["fresh"]

    async def test_ties_follow_newest_first(self):
        candidate_id = uuid.uuid4()
        now = datetime.utcnow()
        older = make_job("older", SCORE_90, created_at=now - timedelta(days=2))
        newer = make_job("newer", SCORE_90, created_at=now - timedelta(days=1))
        service, _ = make_service(
            jobs=[older, newer],
            profiles=[CandidateProfile(user_id=candidate_id, skills=CANDIDATE_SKILLS)],
        )

        recommendations = await service.recommend_jobs_for_candidate(candidate_id)

        assert [r.job.title for r in recommendations] == ["newer", "older"]

    async def test_only_the_newest_jobs_are_scanned(self):
        """A strong match outside the working set is not recommended."""
        candidate_id = uuid.uuid4()
        now = datetime.utcnow()
        old_perfect = make_job("old perfect", SCORE_90, created_at=now - timedelta(days=30))
        recent = [make_job(f"recent {i}", SCORE_10, created_at=now - timedelta(hours=i)) for i in range(3)]
        service, job_repository = make_service(
            jobs=[old_perfect] + recent,
            profiles=[CandidateProfile(user_id=candidate_id, skills=CANDIDATE_SKILLS)],
            working_set_limit=3,
        )

        recommendations = await service.recommend_jobs_for_candidate(candidate_id)

        assert job_repository.requested_limits == [3]
        assert "old perfect" not in [r.job.title for r in recommendations]
        assert len(recommendations) == 3

    async def test_zero_working_set_limit_scans_everything(self):
        candidate_id = uuid.uuid4()
        service, job_repository = make_service(
            jobs=[make_job("job", SCORE_40)],
            profiles=[CandidateProfile(user_id=candidate_id, skills=CANDIDATE_SKILLS)],
            working_set_limit=0,
        )

        await service.recommend_jobs_for_candidate(candidate_id)

        assert job_repository.requested_limits == [None]

    async def test_recommendation_limit(self):
        candidate_id = uuid.uuid4()
        service, _ = make_service(
            jobs=[make_job(f"job {i}", SCORE_40) for i in range(15)],
            profiles=[CandidateProfile(user_id=candidate_id, skills=CANDIDATE_SKILLS)],
        )

        assert len(await service.recommend_jobs_for_candidate(candidate_id)) == 10


class TestRankApplicants:
    """Tests for MatchingDomainService.rank_applicants and match_applicant."""

    async def test_emails_and_profiles_are_merged(self):
        job = make_job("backend", ["python", "sql"])
        strong, weak = uuid.uuid4(), uuid.uuid4()
        applications = [
            Application(job_id=job.id, candidate_id=weak, employer_id=job.employer_id),
            Application(job_id=job.id, candidate_id=strong, employer_id=job.employer_id),
        ]
        service, _ = make_service(
            jobs=[job],
            applications=applications,
            profiles=[
                CandidateProfile(user_id=strong, skills=SkillSet.of(["Python", "SQL"])),
                CandidateProfile(user_id=weak, skills=SkillSet.of(["excel"])),
            ],
            users=[User(id=strong, role=UserRole.CANDIDATE, email="strong@example.com")],
        )

        ranked = await service.rank_applicants(job)

        assert [r.application.candidate_id for r in ranked] == [strong, weak]
        assert [r.score for r in ranked] == [100, 0]
        assert ranked[0].email == "strong@example.com"
        assert ranked[1].email is None

    async def test_match_applicant_requires_profile(self):
        job = make_job("backend", ["python"])
        application = Application(job_id=job.id, candidate_id=uuid.uuid4(), employer_id=job.employer_id)
        service, _ = make_service(jobs=[job], applications=[application])

        with pytest.raises(ResourceNotFoundError) as exc_info:
            await service.match_applicant(application)

        assert exc_info.value.error_code == ErrorCodes.RESOURCE_PROFILE_NOT_FOUND
        assert exc_info.value.status_code == 404

    async def test_match_applicant_scores_against_job(self):
        job = make_job("backend", ["python", "docker"])
        candidate_id = uuid.uuid4()
        application = Application(job_id=job.id, candidate_id=candidate_id, employer_id=job.employer_id)
        service, _ = make_service(
            jobs=[job],
            applications=[application],
            profiles=[CandidateProfile(user_id=candidate_id, skills=SkillSet.of(["Docker"]))],
        )

        applicant = await service.match_applicant(application)

        assert applicant.match.score == 50
        assert applicant.match.matching_skills() == ["docker"]
        assert applicant.job.id == job.id
