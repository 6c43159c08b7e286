"""Integration tests for rep endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from leadbooth.modules.leads.models import BadgePhoto
from leadbooth.modules.tenants.models import Tenant
from leadbooth.modules.users.models import User
from tests.conftest import TEST_PASSWORD, TEST_PASSWORD_HASH


pytestmark = pytest.mark.integration


class TestRepLookup:
    """Tests for GET /api/reps/by-code/{rep_code}."""

    async def test_finds_rep(self, client: AsyncClient, rep_user: User):
        response = await client.get("/api/reps/by-code/ACME-RILEY")

        assert response.status_code == 200
        assert response.json() == {
            "id": rep_user.id,
            "name": "Riley Rep",
            "rep_code": "ACME-RILEY",
            "email": "riley@acme.example.com",
            "role": "rep",
        }

    async def test_admins_hold_rep_codes_too(self, client: AsyncClient, admin_user: User):
        response = await client.get("/api/reps/by-code/ACME-ADMIN")

        assert response.status_code == 200
        assert response.json()["role"] == "admin"

    async def test_other_roles_are_not_reps(
        self, client: AsyncClient, db: AsyncSession, acme: Tenant
    ):
        db.add(
            User(
                name="Vic Viewer",
                email="viewer@acme.example.com",
                password_hash=TEST_PASSWORD_HASH,
                role="viewer",
                rep_code="ACME-VIEW",
                tenant_id=acme.id,
            )
        )
        await db.flush()

        response = await client.get("/api/reps/by-code/ACME-VIEW")

        assert response.status_code == 404

    async def test_unknown_code(self, client: AsyncClient, rep_user: User):
        response = await client.get("/api/reps/by-code/NOPE")

        assert response.status_code == 404
        assert response.json() == {"error": "Representative not found"}


class TestListReps:
    """Tests for GET /api/reps."""

    async def test_admin_lists_reps_by_name(
        self,
        client: AsyncClient,
        db: AsyncSession,
        acme: Tenant,
        rep_user: User,
        admin_headers: dict[str, str],
    ):
        db.add(
            User(
                name="Alex Early",
                email="alex@acme.example.com",
                password_hash=TEST_PASSWORD_HASH,
                role="rep",
                rep_code="ACME-ALEX",
                tenant_id=acme.id,
            )
        )
        await db.flush()

        response = await client.get("/api/reps", headers=admin_headers)

        assert response.status_code == 200
        names = [rep["name"] for rep in response.json()]
        assert names == ["Alex Early", "Riley Rep"]

    async def test_rep_is_refused(self, client: AsyncClient, rep_headers: dict[str, str]):
        response = await client.get("/api/reps", headers=rep_headers)

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    async def test_anonymous_is_refused(self, client: AsyncClient):
        response = await client.get("/api/reps")

        assert response.status_code == 401


class TestCreateRep:
    """Tests for POST /api/reps."""

    async def test_creates_rep(
        self, client: AsyncClient, acme: Tenant, admin_headers: dict[str, str]
    ):
        response = await client.post(
            "/api/reps",
            json={
                "email": "New.Rep@Acme.example.com",
                "name": "New Rep",
                "rep_code": " ACME-NEW ",
                "password": "a-long-password",
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "new.rep@acme.example.com"
        assert data["rep_code"] == "ACME-NEW"
        assert data["role"] == "rep"
        assert "password" not in data
        assert "password_hash" not in data

        lookup = await client.get("/api/reps/by-code/ACME-NEW")
        assert lookup.status_code == 200

    async def test_new_rep_can_log_in(
        self, client: AsyncClient, acme: Tenant, admin_headers: dict[str, str]
    ):
        await client.post(
            "/api/reps",
            json={
                "email": "jo@acme.example.com",
                "name": "Jo",
                "rep_code": "ACME-JO",
                "password": "a-long-password",
            },
            headers=admin_headers,
        )

        response = await client.post(
            "/api/auth/login",
            json={"email": "jo@acme.example.com", "password": "a-long-password"},
        )

        assert response.status_code == 200
        assert response.json()["user"]["rep_code"] == "ACME-JO"

    async def test_duplicate_rep_code(
        self, client: AsyncClient, rep_user: User, admin_headers: dict[str, str]
    ):
        response = await client.post(
            "/api/reps",
            json={
                "email": "other@acme.example.com",
                "name": "Other",
                "rep_code": "ACME-RILEY",
                "password": "a-long-password",
            },
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.json() == {"error": "Rep code is already in use"}

    async def test_duplicate_email(
        self, client: AsyncClient, rep_user: User, admin_headers: dict[str, str]
    ):
        response = await client.post(
            "/api/reps",
            json={
                "email": "riley@acme.example.com",
                "name": "Riley Again",
                "rep_code": "ACME-R2",
                "password": "a-long-password",
            },
            headers=admin_headers,
        )

        assert response.status_code == 409

    async def test_short_password(self, client: AsyncClient, admin_headers: dict[str, str]):
        response = await client.post(
            "/api/reps",
            json={
                "email": "short@acme.example.com",
                "name": "Short",
                "rep_code": "ACME-S",
                "password": "short",
            },
            headers=admin_headers,
        )

        assert response.status_code == 400

    async def test_rep_cannot_create(self, client: AsyncClient, rep_headers: dict[str, str]):
        response = await client.post(
            "/api/reps",
            json={
                "email": "x@acme.example.com",
                "name": "X",
                "rep_code": "ACME-X",
                "password": "a-long-password",
            },
            headers=rep_headers,
        )

        assert response.status_code == 401


def rep_update(rep: User, **overrides) -> dict:
    data = {
        "id": rep.id,
        "email": rep.email,
        "name": rep.name,
        "rep_code": rep.rep_code,
    }
    data.update(overrides)
    return data


class TestUpdateRep:
    """Tests for PUT /api/reps."""

    async def test_updates_details(
        self, client: AsyncClient, rep_user: User, admin_headers: dict[str, str]
    ):
        response = await client.put(
            "/api/reps",
            json=rep_update(rep_user, name="Riley Renamed", rep_code="ACME-RR"),
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == rep_user.id
        assert data["name"] == "Riley Renamed"
        assert data["rep_code"] == "ACME-RR"

        lookup = await client.get("/api/reps/by-code/ACME-RR")
        assert lookup.json()["id"] == rep_user.id

    async def test_keeping_own_email_and_code(
        self, client: AsyncClient, rep_user: User, admin_headers: dict[str, str]
    ):
        response = await client.put(
            "/api/reps", json=rep_update(rep_user), headers=admin_headers
        )

        assert response.status_code == 200

    async def test_password_changes_only_when_sent(
        self, client: AsyncClient, rep_user: User, admin_headers: dict[str, str]
    ):
        await client.put("/api/reps", json=rep_update(rep_user), headers=admin_headers)
        old = await client.post(
            "/api/auth/login",
            json={"email": "riley@acme.example.com", "password": TEST_PASSWORD},
        )
        assert old.status_code == 200

        await client.put(
            "/api/reps",
            json=rep_update(rep_user, password="a-brand-new-password"),
            headers=admin_headers,
        )
        new = await client.post(
            "/api/auth/login",
            json={"email": "riley@acme.example.com", "password": "a-brand-new-password"},
        )
        assert new.status_code == 200

    async def test_code_held_by_another_user(
        self,
        client: AsyncClient,
        admin_user: User,
        rep_user: User,
        admin_headers: dict[str, str],
    ):
        response = await client.put(
            "/api/reps",
            json=rep_update(rep_user, rep_code="ACME-ADMIN"),
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.json() == {"error": "Email or rep code already exists"}

    async def test_email_held_by_another_user(
        self,
        client: AsyncClient,
        admin_user: User,
        rep_user: User,
        admin_headers: dict[str, str],
    ):
        response = await client.put(
            "/api/reps",
            json=rep_update(rep_user, email="admin@acme.example.com"),
            headers=admin_headers,
        )

        assert response.status_code == 409

    async def test_admins_are_not_editable_as_reps(
        self, client: AsyncClient, admin_user: User, admin_headers: dict[str, str]
    ):
        response = await client.put(
            "/api/reps", json=rep_update(admin_user), headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Rep not found"}

    async def test_rep_of_another_tenant(
        self, client: AsyncClient, db: AsyncSession, globex: Tenant, admin_headers
    ):
        outsider = User(
            name="Sam Globex",
            email="sam@globex.example.com",
            password_hash=TEST_PASSWORD_HASH,
            role="rep",
            rep_code="GLOBEX-SAM",
            tenant_id=globex.id,
        )
        db.add(outsider)
        await db.flush()

        response = await client.put(
            "/api/reps", json=rep_update(outsider, name="Hijacked"), headers=admin_headers
        )

        assert response.status_code == 404
        assert outsider.name == "Sam Globex"

    async def test_rep_cannot_update(
        self, client: AsyncClient, rep_user: User, rep_headers: dict[str, str]
    ):
        response = await client.put("/api/reps", json=rep_update(rep_user), headers=rep_headers)

        assert response.status_code == 401

    async def test_missing_fields(self, client: AsyncClient, admin_headers: dict[str, str]):
        response = await client.put("/api/reps", json={"id": 1}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request parameters"}


class TestDeleteRep:
    """Tests for DELETE /api/reps."""

    async def test_deletes_rep_without_submissions(
        self, client: AsyncClient, rep_user: User, admin_headers: dict[str, str]
    ):
        response = await client.delete(
            "/api/reps", params={"id": rep_user.id}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Rep deleted successfully"}

        lookup = await client.get("/api/reps/by-code/ACME-RILEY")
        assert lookup.status_code == 404

    async def test_rep_with_submissions_is_kept(
        self,
        client: AsyncClient,
        db: AsyncSession,
        rep_user: User,
        admin_headers: dict[str, str],
    ):
        for n in range(2):
            db.add(
                BadgePhoto(
                    filename="badge.jpg",
                    mime_type="image/jpeg",
                    file_size=4,
                    image_data=b"\xff\xd8\xff\xe0",
                    contact_email=f"lead{n}@example.com",
                    contact_name=f"Lead {n}",
                    submitted_by_rep=rep_user.id,
                    form_source="trade-show-lead",
                )
            )
        await db.flush()

        response = await client.delete(
            "/api/reps", params={"id": rep_user.id}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "Cannot delete rep with 2 submissions. Consider deactivating instead."
        }

    async def test_missing_id(self, client: AsyncClient, admin_headers: dict[str, str]):
        response = await client.delete("/api/reps", headers=admin_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing rep ID"}

    async def test_unknown_id(self, client: AsyncClient, admin_headers: dict[str, str]):
        response = await client.delete("/api/reps", params={"id": 424242}, headers=admin_headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Rep not found"}

    @pytest.mark.parametrize("rep_id", ["0", "99999999999999999999", "abc"])
    async def test_malformed_id(
        self, client: AsyncClient, admin_headers: dict[str, str], rep_id: str
    ):
        response = await client.delete("/api/reps", params={"id": rep_id}, headers=admin_headers)

        assert response.status_code == 400

    async def test_rep_cannot_delete(
        self, client: AsyncClient, rep_user: User, rep_headers: dict[str, str]
    ):
        response = await client.delete(
            "/api/reps", params={"id": rep_user.id}, headers=rep_headers
        )

        assert response.status_code == 401
