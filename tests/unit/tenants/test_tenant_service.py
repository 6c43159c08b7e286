"""Unit tests for TenantService."""

from unittest.mock import AsyncMock

import pytest

from leadbooth.core.errors import BadRequestError, NotFoundError
from leadbooth.modules.tenants.models import Tenant
from leadbooth.modules.tenants.schemas import BrandingUpdate
from leadbooth.modules.tenants.services import TenantService, login_url
from leadbooth.modules.users.models import User
from tests.factories.session import SessionUserFactory


pytestmark = pytest.mark.unit


@pytest.fixture
def repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def user_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def service(repo: AsyncMock, user_repo: AsyncMock) -> TenantService:
    return TenantService(repo, user_repo)


class TestResolveTenant:
    """Tests for subdomain resolution."""

    async def test_lower_cases_and_strips(self, service, repo):
        tenant = Tenant(id=1, name="Acme", slug="acme", subdomain="acme")
        repo.get_active_by_subdomain.return_value = tenant

        result = await service.resolve_tenant("  ACME ")

        assert result is tenant
        repo.get_active_by_subdomain.assert_awaited_once_with("acme")

    async def test_missing_tenant_is_not_found(self, service, repo):
        repo.get_active_by_subdomain.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await service.resolve_tenant("ghost")

        assert exc_info.value.message == "Account not found"
        assert exc_info.value.status_code == 404

    @pytest.mark.parametrize("subdomain", [None, "", "   "])
    async def test_blank_subdomain_is_bad_request(self, service, repo, subdomain):
        with pytest.raises(BadRequestError) as exc_info:
            await service.resolve_tenant(subdomain)

        assert exc_info.value.message == "Subdomain parameter is required"
        repo.get_active_by_subdomain.assert_not_awaited()


class TestUpdateBranding:
    """Tests for partial branding updates."""

    async def test_empty_update_is_rejected(self, service, repo):
        admin = SessionUserFactory.build(role="admin")

        with pytest.raises(BadRequestError) as exc_info:
            await service.update_branding(BrandingUpdate(), admin.tenant_id, admin)

        assert exc_info.value.message == "No updates provided"
        repo.get_active_by_id.assert_not_awaited()

    async def test_only_given_fields_change(self, service, repo):
        admin = SessionUserFactory.build(role="admin", tenant_id=1)
        tenant = Tenant(
            id=1,
            name="Acme",
            slug="acme",
            subdomain="acme",
            primary_color="#000000",
            dark_color="#111111",
        )
        repo.get_active_by_id.return_value = tenant
        repo.update.side_effect = lambda t: t

        result = await service.update_branding(
            BrandingUpdate(primary_color="#FF0000"), admin.tenant_id, admin
        )

        assert result.primary_color == "#FF0000"
        assert result.dark_color == "#111111"
        assert result.name == "Acme"


class TestLookupAccount:
    """Tests for account lookup."""

    async def test_miss_and_hit_look_the_same(self, service, user_repo):
        user_repo.find_account.return_value = None
        assert await service.lookup_account("nobody@example.com") is None

        tenant = Tenant(id=1, name="Acme", slug="acme", subdomain="acme")
        user = User(id=5, name="Ada", email="ada@acme.example.com", tenant_id=1)
        user_repo.find_account.return_value = (user, tenant)
        assert await service.lookup_account("ADA@acme.example.com") is None

        user_repo.find_account.assert_awaited_with("ada@acme.example.com")

    async def test_blank_email_is_bad_request(self, service):
        with pytest.raises(BadRequestError):
            await service.lookup_account("   ")

    def test_login_url_uses_main_domain(self):
        assert login_url("acme") == "http://acme.localhost/login"
