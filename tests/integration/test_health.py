"""
Integration tests for health and request tracing.
"""
import pytest
from httpx import ASGITransport, AsyncClient

from app.core.constants import ErrorCodes
from app.dependencies import get_job_service
from app.main import app

from tests.factories import API


pytestmark = pytest.mark.integration


class TestHealth:

    async def test_health_checks_database(self, client):
        response = await client.get(f"{API}/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "testing"
        assert body["services"]["database"]["status"] == "healthy"

    async def test_liveness(self, client):
        response = await client.get(f"{API}/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"


class TestCorrelationId:

    async def test_generated_when_missing(self, client):
        response = await client.get(f"{API}/health/live")
        assert response.headers.get("X-Correlation-ID")

    async def test_echoed_from_request(self, client):
        response = await client.get(f"{API}/health/live", headers={"X-Correlation-ID": "trace-123"})
        assert response.headers["X-Correlation-ID"] == "trace-123"

    async def test_error_body_carries_correlation_id(self, client):
        response = await client.get(f"{API}/candidate/profile", headers={"X-Correlation-ID": "trace-456"})

        assert response.status_code == 401
        assert response.json()["correlation_id"] == "trace-456"

    async def test_unhandled_error_body_carries_correlation_id(self):
        async def broken_job_service():
            raise RuntimeError("connection pool exhausted")

        app.dependency_overrides[get_job_service] = broken_job_service
        try:
            transport = ASGITransport(app=app, raise_app_exceptions=False)
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                response = await ac.get(f"{API}/jobs/categories", headers={"X-Correlation-ID": "trace-789"})
        finally:
            app.dependency_overrides.pop(get_job_service, None)

        assert response.status_code == 500
        body = response.json()
        assert body["error_code"] == ErrorCodes.SYSTEM_INTERNAL_ERROR
        assert body["message"] == "Server error"
        assert body["correlation_id"] == "trace-789"
