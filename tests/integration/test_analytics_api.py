"""
Integration tests for the public analytics endpoint.
"""
import pytest

from app.domain.jobs.entities import JobStatus, JobType

from tests.factories import API, new_account


pytestmark = pytest.mark.integration


async def apply(client, account, job):
    response = await client.post(f"{API}/candidate/apply/{job.id}", headers=account.headers)
    assert response.status_code == 201


class TestPublicAnalytics:

    async def test_empty_board(self, client):
        response = await client.get(f"{API}/analytics/public")

        assert response.status_code == 200
        assert response.json() == {
            "stats": {
                "totalCandidates": 0,
                "totalEmployers": 0,
                "totalJobs": 0,
                "activeJobs": 0,
                "totalApplications": 0,
            },
            "topCategories": [],
            "jobTypes": [],
            "topLocations": [],
        }

    async def test_board_snapshot(self, client, seed, employer, candidate):
        other_employer = new_account("employer")
        other_candidate = new_account("candidate")
        await seed.employer_profile(employer)
        await seed.user(other_employer)
        await seed.candidate_profile(candidate, ["python"])
        await seed.candidate_profile(other_candidate, ["figma"])

        backend = await seed.job(employer, "Backend Engineer", ["python"])
        await seed.job(employer, "Frontend Engineer", ["react"], job_type=JobType.PART_TIME)
        designer = await seed.job(
            other_employer,
            "Product Designer",
            ["figma"],
            category="Design",
            location="Paris, France",
            job_type=JobType.CONTRACT,
        )
        await seed.job(employer, "Account Executive", ["sales"], category="Sales", status=JobStatus.CLOSED)

        await apply(client, candidate, backend)
        await apply(client, candidate, designer)
        await apply(client, other_candidate, designer)

        body = (await client.get(f"{API}/analytics/public")).json()

        assert body["stats"] == {
            "totalCandidates": 2,
            "totalEmployers": 2,
            "totalJobs": 4,
            "activeJobs": 3,
            "totalApplications": 3,
        }
        assert body["topCategories"] == [
            {"category": "Design", "applications": 2, "jobs": 1},
            {"category": "Engineering", "applications": 1, "jobs": 2},
        ]
        assert body["jobTypes"] == [
            {"jobType": "full-time", "count": 1},
            {"jobType": "part-time", "count": 1},
            {"jobType": "contract", "count": 1},
        ]
        assert body["topLocations"] == [
            {"location": "Berlin, Germany", "count": 2},
            {"location": "Paris, France", "count": 1},
        ]

    async def test_top_lists_are_capped_at_six(self, client, seed, employer):
        for i in range(8):
            await seed.job(employer, f"Role {i}", ["python"], category=f"Category {i}", location=f"City {i}")

        body = (await client.get(f"{API}/analytics/public")).json()

        assert len(body["topCategories"]) == 6
        assert len(body["topLocations"]) == 6
        assert body["stats"]["activeJobs"] == 8
