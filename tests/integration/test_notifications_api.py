"""
Integration tests for notification endpoints.
"""
import uuid

import pytest

from app.core.constants import ErrorCodes

from tests.factories import API, new_account


pytestmark = pytest.mark.integration


async def receive_applications(client, seed, employer, count):
    """Have `count` candidates apply to one of the employer's jobs."""
    job = await seed.job(employer, "Backend Engineer", ["python"])
    for _ in range(count):
        applicant = new_account("candidate")
        await seed.candidate_profile(applicant, ["python"])
        await client.post(f"{API}/candidate/apply/{job.id}", headers=applicant.headers)


class TestNotifications:

    async def test_empty_inbox(self, client, candidate):
        response = await client.get(f"{API}/notifications", headers=candidate.headers)

        assert response.status_code == 200
        assert response.json() == {"notifications": [], "unreadCount": 0}

    async def test_mark_one_read(self, client, seed, employer):
        await receive_applications(client, seed, employer, 2)
        inbox = (await client.get(f"{API}/notifications", headers=employer.headers)).json()
        assert inbox["unreadCount"] == 2

        target = inbox["notifications"][0]["id"]
        response = await client.put(f"{API}/notifications/{target}/read", headers=employer.headers)

        assert response.status_code == 200
        inbox = (await client.get(f"{API}/notifications", headers=employer.headers)).json()
        assert inbox["unreadCount"] == 1
        assert {n["id"]: n["isRead"] for n in inbox["notifications"]}[target] is True

    async def test_mark_all_read_and_clear(self, client, seed, employer):
        await receive_applications(client, seed, employer, 3)

        await client.put(f"{API}/notifications/read-all", headers=employer.headers)
        inbox = (await client.get(f"{API}/notifications", headers=employer.headers)).json()
        assert inbox["unreadCount"] == 0
        assert len(inbox["notifications"]) == 3

        await client.delete(f"{API}/notifications", headers=employer.headers)
        inbox = (await client.get(f"{API}/notifications", headers=employer.headers)).json()
        assert inbox["notifications"] == []

    async def test_other_users_notifications_are_untouchable(self, client, seed, employer):
        await receive_applications(client, seed, employer, 1)
        inbox = (await client.get(f"{API}/notifications", headers=employer.headers)).json()
        target = inbox["notifications"][0]["id"]
        stranger = new_account("candidate")

        read = await client.put(f"{API}/notifications/{target}/read", headers=stranger.headers)
        delete = await client.delete(f"{API}/notifications/{target}", headers=stranger.headers)
        await client.put(f"{API}/notifications/read-all", headers=stranger.headers)
        await client.delete(f"{API}/notifications", headers=stranger.headers)

        assert read.status_code == 404
        assert read.json()["error_code"] == ErrorCodes.RESOURCE_NOTIFICATION_NOT_FOUND
        assert delete.status_code == 404

        inbox = (await client.get(f"{API}/notifications", headers=employer.headers)).json()
        assert inbox["unreadCount"] == 1
        assert [n["id"] for n in inbox["notifications"]] == [target]

    async def test_delete_one(self, client, seed, employer):
        await receive_applications(client, seed, employer, 1)
        target = (await client.get(f"{API}/notifications", headers=employer.headers)).json()["notifications"][0]["id"]

        response = await client.delete(f"{API}/notifications/{target}", headers=employer.headers)

        assert response.status_code == 200
        assert (await client.delete(f"{API}/notifications/{target}", headers=employer.headers)).status_code == 404

    async def test_unknown_notification(self, client, candidate):
        response = await client.put(f"{API}/notifications/{uuid.uuid4()}/read", headers=candidate.headers)
        assert response.status_code == 404
