"""Tests that one tenant's admin never sees another tenant's data."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from leadbooth.modules.tenants.models import Tenant
from leadbooth.modules.tradeshows.models import Tradeshow
from leadbooth.modules.users.models import User
from tests.conftest import TEST_PASSWORD_HASH, session_headers


pytestmark = pytest.mark.integration


@pytest.fixture
async def globex_admin(db: AsyncSession, globex: Tenant) -> User:
    user = User(
        name="Gus Globex",
        email="admin@globex.example.com",
        password_hash=TEST_PASSWORD_HASH,
        role="admin",
        rep_code="GLOBEX-ADMIN",
        tenant_id=globex.id,
    )
    db.add(user)
    await db.flush()
    return user


@pytest.fixture
def globex_headers(globex_admin: User) -> dict[str, str]:
    return session_headers(globex_admin, "globex")


class TestTenantIsolation:
    async def test_tradeshow_list_is_scoped(
        self,
        client: AsyncClient,
        db: AsyncSession,
        tradeshow: Tradeshow,
        globex_admin: User,
        globex_headers: dict[str, str],
        admin_headers: dict[str, str],
    ):
        db.add(
            Tradeshow(
                name="Globex Summit",
                slug="globex-summit",
                is_active=True,
                created_by=globex_admin.id,
            )
        )
        await db.flush()

        globex_view = await client.get("/api/tradeshows", headers=globex_headers)
        acme_view = await client.get("/api/tradeshows", headers=admin_headers)

        assert [t["slug"] for t in globex_view.json()] == ["globex-summit"]
        assert [t["slug"] for t in acme_view.json()] == ["spring-expo"]

    async def test_rep_list_is_scoped(
        self,
        client: AsyncClient,
        rep_user: User,
        globex_headers: dict[str, str],
    ):
        response = await client.get("/api/reps", headers=globex_headers)

        assert response.status_code == 200
        assert response.json() == []

    async def test_branding_is_scoped(
        self,
        client: AsyncClient,
        acme: Tenant,
        globex_headers: dict[str, str],
    ):
        response = await client.put(
            "/api/tenant/branding",
            json={"primary_color": "#000000"},
            headers=globex_headers,
        )

        assert response.json()["subdomain"] == "globex"
        assert acme.primary_color == "#E4572E"

    async def test_rep_codes_are_unique_across_tenants(
        self,
        client: AsyncClient,
        rep_user: User,
        globex_headers: dict[str, str],
    ):
        response = await client.post(
            "/api/reps",
            json={
                "email": "riley@globex.example.com",
                "name": "Riley Clone",
                "rep_code": "ACME-RILEY",
                "password": "a-long-password",
            },
            headers=globex_headers,
        )

        assert response.status_code == 409

    async def test_same_email_in_two_tenants(
        self,
        client: AsyncClient,
        rep_user: User,
        globex_headers: dict[str, str],
    ):
        response = await client.post(
            "/api/reps",
            json={
                "email": "riley@acme.example.com",
                "name": "Riley at Globex",
                "rep_code": "GLOBEX-RILEY",
                "password": "a-long-password",
            },
            headers=globex_headers,
        )

        assert response.status_code == 201
