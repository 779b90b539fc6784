"""Tests for health endpoints."""

from fastapi.testclient import TestClient

from edufin import __version__


def test_api_health_check(client: TestClient):
    """Test API health endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == __version__
    assert "uptime_seconds" in data
    assert data["open_drafts"] == 0


async def test_health_counts_drafts(async_client):
    await async_client.post("/api/drafts")
    await async_client.post("/api/drafts")

    response = await async_client.get("/api/health")

    assert response.json()["open_drafts"] == 2
