"""API tests for the non-versioned system endpoints."""

import pytest


@pytest.mark.api
class TestSystemRoutes:
    async def test_root(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "operational"

    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    async def test_unknown_route_is_problem_details(self, client):
        response = await client.get("/api/v1/auth/nope")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("application/problem+json")
