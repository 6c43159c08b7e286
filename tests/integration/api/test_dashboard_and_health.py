"""Integration tests for the dashboard redirect and health checks."""

import pytest
from httpx import AsyncClient

from leadbooth.modules.users.models import User


pytestmark = pytest.mark.integration


class TestDashboardRedirect:
    async def test_anonymous_goes_to_login(self, client: AsyncClient):
        response = await client.get("/dashboard")

        assert response.status_code == 307
        assert response.headers["location"] == "/login"

    async def test_admin(self, client: AsyncClient, admin_headers: dict[str, str]):
        response = await client.get("/dashboard", headers=admin_headers)

        assert response.status_code == 307
        assert response.headers["location"] == "/dashboard/admin"

    async def test_rep(self, client: AsyncClient, rep_headers: dict[str, str]):
        response = await client.get("/dashboard", headers=rep_headers)

        assert response.headers["location"] == "/dashboard/rep"

    async def test_invalid_token_counts_as_anonymous(self, client: AsyncClient):
        response = await client.get("/dashboard", headers={"Authorization": "Bearer junk"})

        assert response.headers["location"] == "/login"

    async def test_session_cookie(self, client: AsyncClient, admin_headers, admin_user: User):
        token = admin_headers["Authorization"].removeprefix("Bearer ")

        response = await client.get(
            "/dashboard", headers={"Cookie": f"leadbooth_session={token}"}
        )

        assert response.headers["location"] == "/dashboard/admin"


class TestHealth:
    async def test_liveness(self, client: AsyncClient):
        response = await client.get("/health/live")

        assert response.status_code == 200
        assert response.json() == {"status": "alive"}

    async def test_readiness(self, client: AsyncClient):
        response = await client.get("/health/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "checks": {"database": "ok"}}

    async def test_request_id_is_echoed(self, client: AsyncClient):
        response = await client.get("/health/live", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    async def test_request_id_is_generated(self, client: AsyncClient):
        response = await client.get("/health/live")

        assert response.headers["X-Request-ID"]
