"""Tests for health, readiness and version endpoints."""

from httpx import AsyncClient


class TestHealth:
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    async def test_ready(self, client: AsyncClient):
        response = await client.get("/ready")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["checks"]["database"] == "ok"

    async def test_version(self, client: AsyncClient):
        response = await client.get("/version")
        assert response.status_code == 200
        data = response.json()
        assert data["version"] == "0.1.0"
        assert "environment" in data
