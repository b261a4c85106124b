"""
Integration tests for the job endpoints.
"""
import uuid

import pytest

from app.core.constants import ErrorCodes
from app.domain.jobs.entities import JobStatus
from app.domain.jobs.repositories import SQLAlchemyJobRepository

from tests.factories import API, new_account


pytestmark = pytest.mark.integration


JOB_PAYLOAD = {
    "title": "Backend Engineer",
    "description": "Build and run our APIs",
    "location": "Berlin, Germany",
    "jobType": "full-time",
    "category": "Engineering",
    "salaryMin": 60000,
    "salaryMax": 80000,
    "requiredSkills": ["Python", "PostgreSQL"],
    "experienceLevel": "Mid",
}


class TestCreateJob:

    async def test_employer_posts_job(self, client, employer):
        response = await client.post(f"{API}/jobs", json=JOB_PAYLOAD, headers=employer.headers)

        assert response.status_code == 201
        job = response.json()["job"]
        assert job["title"] == "Backend Engineer"
        assert job["status"] == "open"
        assert job["requiredSkills"] == ["Python", "PostgreSQL"]
        assert job["employerId"] == str(employer.id)

    async def test_candidate_cannot_post(self, client, candidate):
        response = await client.post(f"{API}/jobs", json=JOB_PAYLOAD, headers=candidate.headers)

        assert response.status_code == 403
        assert response.json()["error_code"] == ErrorCodes.AUTH_INSUFFICIENT_PERMISSIONS

    async def test_missing_token(self, client):
        response = await client.post(f"{API}/jobs", json=JOB_PAYLOAD)

        assert response.status_code == 401
        assert response.json()["error_code"] == ErrorCodes.AUTH_TOKEN_MISSING
        assert response.headers["WWW-Authenticate"] == "Bearer"

    async def test_invalid_token(self, client):
        response = await client.post(
            f"{API}/jobs", json=JOB_PAYLOAD, headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == ErrorCodes.AUTH_TOKEN_INVALID

    async def test_inverted_salary_range(self, client, employer):
        payload = dict(JOB_PAYLOAD, salaryMin=90000, salaryMax=50000)

        response = await client.post(f"{API}/jobs", json=payload, headers=employer.headers)

        assert response.status_code == 400
        assert response.json()["error_code"] == ErrorCodes.VALIDATION_VALUE_OUT_OF_RANGE


class TestListJobs:
    """Tests for the public job listing."""

    async def test_only_open_jobs_newest_first(self, client, seed, employer, minutes_ago):
        await seed.employer_profile(employer, company_name="Acme")
        await seed.job(employer, "Old Open", ["python"], created_at=minutes_ago(30))
        await seed.job(employer, "New Open", ["python"], created_at=minutes_ago(10))
        await seed.job(employer, "Closed", ["python"], status=JobStatus.CLOSED)
        await seed.job(employer, "Hidden", ["python"], status=JobStatus.HIDDEN)

        response = await client.get(f"{API}/jobs")

        assert response.status_code == 200
        jobs = response.json()
        assert [j["title"] for j in jobs] == ["New Open", "Old Open"]
        assert jobs[0]["companyName"] == "Acme"

    async def test_filters(self, client, seed, employer):
        await seed.job(employer, "Python Developer", ["Python", "Django"], location="Berlin, Germany")
        await seed.job(employer, "Go Developer", ["Go"], location="Munich, Germany", category="Platform")

        by_keyword = await client.get(f"{API}/jobs", params={"keyword": "python"})
        by_location = await client.get(f"{API}/jobs", params={"location": "munich"})
        by_skills = await client.get(f"{API}/jobs", params={"skills": "django,python"})
        by_category = await client.get(f"{API}/jobs", params={"category": "Platform"})

        assert [j["title"] for j in by_keyword.json()] == ["Python Developer"]
        assert [j["title"] for j in by_location.json()] == ["Go Developer"]
        assert [j["title"] for j in by_skills.json()] == ["Python Developer"]
        assert [j["title"] for j in by_category.json()] == ["Go Developer"]

    async def test_recent_jobs_limit(self, client, seed, employer, minutes_ago):
        for i in range(4):
            await seed.job(employer, f"Job {i}", ["python"], created_at=minutes_ago(i))

        response = await client.get(f"{API}/jobs/recent", params={"limit": 2})

        assert [j["title"] for j in response.json()] == ["Job 0", "Job 1"]

    async def test_categories(self, client, seed, employer):
        await seed.job(employer, "A", ["python"], category="Engineering")
        await seed.job(employer, "B", ["python"], category="Engineering")
        await seed.job(employer, "C", ["figma"], category="Design")
        await seed.job(employer, "D", ["figma"], category="Design", status=JobStatus.CLOSED)

        response = await client.get(f"{API}/jobs/categories")

        counts = {c["category"]: c["jobCount"] for c in response.json()}
        assert counts == {"Design": 1, "Engineering": 2}


class TestJobDetail:

    async def test_detail_with_company(self, client, seed, employer):
        await seed.employer_profile(employer, company_name="Acme")
        job = await seed.job(employer, "Backend Engineer", ["python"])
        await seed.job(employer, "Frontend Engineer", ["react"])

        response = await client.get(f"{API}/jobs/{job.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["job"]["id"] == str(job.id)
        assert body["company"]["companyName"] == "Acme"
        assert [j["title"] for j in body["companyJobs"]] == ["Frontend Engineer"]

    async def test_unknown_job(self, client):
        response = await client.get(f"{API}/jobs/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["error_code"] == ErrorCodes.RESOURCE_JOB_NOT_FOUND


class TestUpdateAndDelete:
    """Tests for employer-only job changes."""

    async def test_owner_closes_job(self, client, seed, employer):
        job = await seed.job(employer, "Backend Engineer", ["python"])

        response = await client.put(
            f"{API}/jobs/{job.id}", json={"status": "closed"}, headers=employer.headers
        )

        assert response.status_code == 200
        assert response.json()["job"]["status"] == "closed"
        assert (await client.get(f"{API}/jobs")).json() == []

    async def test_other_employer_sees_not_found(self, client, seed, employer):
        job = await seed.job(employer, "Backend Engineer", ["python"])
        intruder = new_account("employer")

        update = await client.put(f"{API}/jobs/{job.id}", json={"title": "Mine"}, headers=intruder.headers)
        delete = await client.delete(f"{API}/jobs/{job.id}", headers=intruder.headers)

        assert update.status_code == 404
        assert update.json()["message"] == "Job not found or unauthorized"
        assert delete.status_code == 404

    async def test_required_fields_cannot_be_blanked(self, client, seed, employer):
        job = await seed.job(employer, "Backend Engineer", ["python"])

        response = await client.put(
            f"{API}/jobs/{job.id}", json={"location": "", "description": ""}, headers=employer.headers
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == ErrorCodes.VALIDATION_REQUIRED_FIELD_MISSING
        stored = (await client.get(f"{API}/jobs/{job.id}")).json()["job"]
        assert stored["location"] == "Berlin, Germany"
        assert stored["description"] == "Backend Engineer description"

    async def test_edit_keeps_report_count(self, client, seed, employer, session_factory):
        job = await seed.job(employer, "Backend Engineer", ["python"])
        reporter = new_account("candidate")
        await client.post(f"{API}/jobs/{job.id}/report", json={"reason": "spam"}, headers=reporter.headers)

        await client.put(f"{API}/jobs/{job.id}", json={"title": "Senior Backend Engineer"}, headers=employer.headers)

        async with session_factory() as session:
            stored = await SQLAlchemyJobRepository(session).get_job_by_id(job.id)
        assert stored.title == "Senior Backend Engineer"
        assert stored.report_count == 1

    async def test_owner_deletes_job(self, client, seed, employer):
        job = await seed.job(employer, "Backend Engineer", ["python"])

        response = await client.delete(f"{API}/jobs/{job.id}", headers=employer.headers)

        assert response.status_code == 200
        assert (await client.get(f"{API}/jobs/{job.id}")).status_code == 404


class TestReportJob:
    """Tests for reporting and automatic hiding."""

    async def test_fifth_report_hides_job_and_notifies_employer(self, client, seed, employer):
        job = await seed.job(employer, "Too Good To Be True", ["python"])

        for _ in range(4):
            reporter = new_account("candidate")
            response = await client.post(
                f"{API}/jobs/{job.id}/report", json={"reason": "spam"}, headers=reporter.headers
            )
            assert response.status_code == 200

        assert len((await client.get(f"{API}/jobs")).json()) == 1
        notifications = (await client.get(f"{API}/notifications", headers=employer.headers)).json()
        assert notifications["notifications"] == []

        last = new_account("candidate")
        await client.post(f"{API}/jobs/{job.id}/report", json={"reason": "scam"}, headers=last.headers)

        assert (await client.get(f"{API}/jobs")).json() == []
        notifications = (await client.get(f"{API}/notifications", headers=employer.headers)).json()
        assert [n["type"] for n in notifications["notifications"]] == ["job_hidden"]
        assert notifications["notifications"][0]["title"] == "Job Hidden Due to Reports"
        assert notifications["notifications"][0]["relatedId"] == str(job.id)

    async def test_same_candidate_reports_once(self, client, seed, employer, candidate):
        job = await seed.job(employer, "Backend Engineer", ["python"])

        first = await client.post(f"{API}/jobs/{job.id}/report", json={"reason": "spam"}, headers=candidate.headers)
        second = await client.post(f"{API}/jobs/{job.id}/report", json={"reason": "spam"}, headers=candidate.headers)

        assert first.status_code == 200
        assert second.status_code == 400
        assert second.json()["error_code"] == ErrorCodes.BUSINESS_ALREADY_REPORTED

    async def test_blank_reason(self, client, seed, employer, candidate):
        job = await seed.job(employer, "Backend Engineer", ["python"])

        response = await client.post(f"{API}/jobs/{job.id}/report", json={"reason": " "}, headers=candidate.headers)

        assert response.status_code == 400


class TestReportCounters:
    """Tests for the atomic report counter in the job repository."""

    async def test_increment_returns_running_total(self, seed, employer, session_factory):
        job = await seed.job(employer, "Backend Engineer", ["python"])

        async with session_factory() as session:
            repository = SQLAlchemyJobRepository(session)
            counts = [await repository.increment_report_count(job.id) for _ in range(3)]

        assert counts == [1, 2, 3]

    async def test_hide_job_only_once(self, seed, employer, session_factory):
        job = await seed.job(employer, "Backend Engineer", ["python"])

        async with session_factory() as session:
            repository = SQLAlchemyJobRepository(session)
            first = await repository.hide_job(job.id)
            second = await repository.hide_job(job.id)
            stored = await repository.get_job_by_id(job.id)

        assert (first, second) == (True, False)
        assert stored.status == JobStatus.HIDDEN
