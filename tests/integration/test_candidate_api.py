"""
Integration tests for candidate endpoints: profile, applying, saved jobs
and recommendations.
"""
import uuid

import pytest

from app.core.constants import ErrorCodes
from app.domain.jobs.entities import JobStatus

from tests.factories import API


pytestmark = pytest.mark.integration


class TestProfile:

    async def test_missing_profile(self, client, candidate):
        response = await client.get(f"{API}/candidate/profile", headers=candidate.headers)

        assert response.status_code == 404
        assert response.json()["error_code"] == ErrorCodes.RESOURCE_PROFILE_NOT_FOUND

    async def test_first_update_creates_profile(self, client, candidate):
        response = await client.put(
            f"{API}/candidate/profile",
            json={"fullName": "Ada Lovelace", "skills": ["Python", "SQL"], "location": "London"},
            headers=candidate.headers,
        )

        assert response.status_code == 200
        profile = (await client.get(f"{API}/candidate/profile", headers=candidate.headers)).json()
        assert profile["fullName"] == "Ada Lovelace"
        assert profile["skills"] == ["Python", "SQL"]
        assert profile["email"] == candidate.email

    async def test_partial_update_keeps_other_fields(self, client, candidate):
        await client.put(
            f"{API}/candidate/profile",
            json={"fullName": "Ada Lovelace", "skills": ["Python"]},
            headers=candidate.headers,
        )
        await client.put(f"{API}/candidate/profile", json={"headline": "Engineer"}, headers=candidate.headers)

        profile = (await client.get(f"{API}/candidate/profile", headers=candidate.headers)).json()
        assert profile["fullName"] == "Ada Lovelace"
        assert profile["headline"] == "Engineer"
        assert profile["skills"] == ["Python"]

    async def test_employer_is_forbidden(self, client, employer):
        response = await client.get(f"{API}/candidate/profile", headers=employer.headers)
        assert response.status_code == 403


class TestApply:
    """Tests for submitting applications."""

    async def test_apply_notifies_employer(self, client, seed, employer, candidate):
        job = await seed.job(employer, "Backend Engineer", ["python"])
        await seed.candidate_profile(candidate, ["python"], full_name="Ada Lovelace")

        response = await client.post(
            f"{API}/candidate/apply/{job.id}",
            json={"coverLetter": "Hello"},
            headers=candidate.headers,
        )

        assert response.status_code == 201
        application_id = response.json()["applicationId"]

        check = (await client.get(f"{API}/candidate/applications/check/{job.id}", headers=candidate.headers)).json()
        assert check["hasApplied"] is True
        assert check["application"] == {"id": application_id, "status": "pending"}

        notifications = (await client.get(f"{API}/notifications", headers=employer.headers)).json()
        assert notifications["unreadCount"] == 1
        assert notifications["notifications"][0]["type"] == "new_application"
        assert notifications["notifications"][0]["message"] == "Ada Lovelace applied for Backend Engineer"

        detail = (await client.get(f"{API}/jobs/{job.id}")).json()
        assert detail["job"]["applicationCount"] == 1

    async def test_apply_without_body_uses_profile_resume(self, client, seed, employer, candidate):
        job = await seed.job(employer, "Backend Engineer", ["python"])
        await seed.candidate_profile(candidate, ["python"], resume_path="resumes/ada.pdf")

        await client.post(f"{API}/candidate/apply/{job.id}", headers=candidate.headers)

        applications = (await client.get(f"{API}/candidate/applications", headers=candidate.headers)).json()
        assert [a["resumePath"] for a in applications] == ["resumes/ada.pdf"]
        assert applications[0]["jobTitle"] == "Backend Engineer"

    async def test_duplicate_application(self, client, seed, employer, candidate):
        job = await seed.job(employer, "Backend Engineer", ["python"])
        await seed.candidate_profile(candidate, ["python"])

        first = await client.post(f"{API}/candidate/apply/{job.id}", headers=candidate.headers)
        second = await client.post(f"{API}/candidate/apply/{job.id}", headers=candidate.headers)

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json()["error_code"] == ErrorCodes.BUSINESS_ALREADY_APPLIED

        applications = (await client.get(f"{API}/candidate/applications", headers=candidate.headers)).json()
        assert len(applications) == 1

    async def test_resume_required(self, client, seed, employer, candidate):
        job = await seed.job(employer, "Backend Engineer", ["python"])
        await seed.candidate_profile(candidate, ["python"], resume_path=None)

        response = await client.post(f"{API}/candidate/apply/{job.id}", headers=candidate.headers)

        assert response.status_code == 400
        assert response.json()["error_code"] == ErrorCodes.VALIDATION_RESUME_REQUIRED

    @pytest.mark.parametrize("status", [JobStatus.CLOSED, JobStatus.HIDDEN])
    async def test_job_not_open(self, client, seed, employer, candidate, status):
        job = await seed.job(employer, "Backend Engineer", ["python"], status=status)
        await seed.candidate_profile(candidate, ["python"])

        response = await client.post(f"{API}/candidate/apply/{job.id}", headers=candidate.headers)

        assert response.status_code == 404
        assert response.json()["error_code"] == ErrorCodes.BUSINESS_JOB_NOT_OPEN

    async def test_unknown_job(self, client, seed, candidate):
        await seed.candidate_profile(candidate, ["python"])

        response = await client.post(f"{API}/candidate/apply/{uuid.uuid4()}", headers=candidate.headers)

        assert response.status_code == 404


class TestSavedJobs:

    async def test_save_check_and_remove(self, client, seed, employer, candidate):
        job = await seed.job(employer, "Backend Engineer", ["python"])

        saved = await client.post(f"{API}/candidate/saved-jobs/{job.id}", headers=candidate.headers)
        again = await client.post(f"{API}/candidate/saved-jobs/{job.id}", headers=candidate.headers)

        assert saved.status_code == 200
        assert again.status_code == 400
        assert again.json()["error_code"] == ErrorCodes.BUSINESS_ALREADY_SAVED

        check = await client.get(f"{API}/candidate/saved-jobs/check/{job.id}", headers=candidate.headers)
        assert check.json() == {"isSaved": True}

        listed = (await client.get(f"{API}/candidate/saved-jobs", headers=candidate.headers)).json()
        assert [j["id"] for j in listed] == [str(job.id)]

        await client.delete(f"{API}/candidate/saved-jobs/{job.id}", headers=candidate.headers)
        check = await client.get(f"{API}/candidate/saved-jobs/check/{job.id}", headers=candidate.headers)
        assert check.json() == {"isSaved": False}

    async def test_dashboard_counts(self, client, seed, employer, candidate):
        applied = await seed.job(employer, "Backend Engineer", ["python"])
        bookmarked = await seed.job(employer, "Data Engineer", ["sql"])
        await seed.candidate_profile(candidate, ["python"])

        await client.post(f"{API}/candidate/apply/{applied.id}", headers=candidate.headers)
        await client.post(f"{API}/candidate/saved-jobs/{bookmarked.id}", headers=candidate.headers)

        dashboard = (await client.get(f"{API}/candidate/dashboard", headers=candidate.headers)).json()

        assert dashboard["stats"]["totalApplications"] == 1
        assert dashboard["stats"]["pending"] == 1
        assert dashboard["stats"]["savedJobs"] == 1
        assert [a["jobId"] for a in dashboard["recentApplications"]] == [str(applied.id)]


class TestRecommendedJobs:
    """Tests for skill-based job recommendations."""

    async def test_ranked_by_match_score(self, client, seed, employer, candidate, minutes_ago):
        await seed.employer_profile(employer, company_name="Acme")
        await seed.candidate_profile(candidate, ["Python", "Docker"])
        await seed.job(employer, "Two of three", ["python", "sql", "docker"], created_at=minutes_ago(30))
        await seed.job(employer, "Perfect", ["Python"], created_at=minutes_ago(20))
        await seed.job(employer, "Unrelated", ["figma"], created_at=minutes_ago(10))
        await seed.job(employer, "Closed", ["python"], status=JobStatus.CLOSED)

        response = await client.get(f"{API}/candidate/recommended-jobs", headers=candidate.headers)

        assert response.status_code == 200
        jobs = response.json()
        assert [(j["title"], j["matchScore"]) for j in jobs] == [("Perfect", 100), ("Two of three", 67)]
        assert jobs[1]["matchingSkills"] == ["python", "docker"]
        assert jobs[0]["companyName"] == "Acme"

    async def test_applied_jobs_are_excluded(self, client, seed, employer, candidate):
        applied = await seed.job(employer, "Applied", ["python"])
        other = await seed.job(employer, "Other", ["python"])
        await seed.candidate_profile(candidate, ["python"])

        await client.post(f"{API}/candidate/apply/{applied.id}", headers=candidate.headers)
        response = await client.get(f"{API}/candidate/recommended-jobs", headers=candidate.headers)

        assert [j["id"] for j in response.json()] == [str(other.id)]

    async def test_no_profile_means_no_recommendations(self, client, seed, employer, candidate):
        await seed.job(employer, "Backend Engineer", ["python"])

        response = await client.get(f"{API}/candidate/recommended-jobs", headers=candidate.headers)

        assert response.status_code == 200
        assert response.json() == []

    async def test_empty_skills_mean_no_recommendations(self, client, seed, employer, candidate):
        await seed.job(employer, "Backend Engineer", ["python"])
        await seed.candidate_profile(candidate, [])

        response = await client.get(f"{API}/candidate/recommended-jobs", headers=candidate.headers)

        assert response.json() == []
