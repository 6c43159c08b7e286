"""Tenant service for subdomain resolution and branding."""

from datetime import UTC, datetime
from typing import Annotated

import structlog
from fastapi import Depends

from leadbooth.config import settings
from leadbooth.core.auth.schemas import SessionUser
from leadbooth.core.errors import BadRequestError, NotFoundError
from leadbooth.modules.tenants.models import Tenant
from leadbooth.modules.tenants.repos import TenantRepo
from leadbooth.modules.tenants.schemas import BrandingUpdate
from leadbooth.modules.users.repos import UserRepo


logger = structlog.get_logger()


def normalize_subdomain(subdomain: str | None) -> str:
    """Strip and lower-case a subdomain.

    Raises:
        BadRequestError: If the subdomain is missing or blank
    """
    value = (subdomain or "").strip().lower()
    if not value:
        raise BadRequestError(
            "Subdomain parameter is required",
            error_code="subdomain_required",
        )
    return value


def login_url(subdomain: str) -> str:
    """Build the login URL of a tenant."""
    scheme = "https" if settings.is_production else "http"
    return f"{scheme}://{subdomain}.{settings.main_domain}/login"


class TenantService:
    """Service for tenant resolution, branding and account lookup."""

    def __init__(self, repo: TenantRepo, user_repo: UserRepo) -> None:
        self.repo = repo
        self.user_repo = user_repo

    async def resolve_tenant(self, subdomain: str | None) -> Tenant:
        """Resolve a subdomain to its active tenant.

        Args:
            subdomain: Subdomain in any case, surrounding whitespace ignored

        Returns:
            The active, non-deleted tenant

        Raises:
            BadRequestError: If the subdomain is blank
            NotFoundError: If no active tenant uses the subdomain
        """
        value = normalize_subdomain(subdomain)
        tenant = await self.repo.get_active_by_subdomain(value)
        if not tenant:
            raise NotFoundError("Account not found", resource="tenant", resource_id=value)
        return tenant

    async def get_branding(self, tenant_id: int) -> Tenant:
        """Get an active tenant for its branding.

        Raises:
            NotFoundError: If the caller's tenant is inactive or deleted
        """
        tenant = await self.repo.get_active_by_id(tenant_id)
        if not tenant:
            raise NotFoundError(
                "Account not found",
                resource="tenant",
                resource_id=str(tenant_id),
            )
        return tenant

    async def update_branding(
        self, data: BrandingUpdate, tenant_id: int, admin: SessionUser
    ) -> Tenant:
        """Apply a partial branding update to the admin's tenant.

        Args:
            data: Fields to change
            tenant_id: The tenant resolved for the admin's session
            admin: The admin performing the update

        Returns:
            The updated tenant

        Raises:
            BadRequestError: If no field was provided
            NotFoundError: If the tenant is inactive or deleted
        """
        changes = data.model_dump(exclude_unset=True)
        if not changes:
            raise BadRequestError("No updates provided", error_code="no_updates")

        tenant = await self.get_branding(tenant_id)
        for field, value in changes.items():
            setattr(tenant, field, value)
        tenant.updated_at = datetime.now(UTC)
        tenant = await self.repo.update(tenant)

        logger.info(
            "tenant_branding_updated",
            tenant_id=tenant.id,
            admin_id=admin.id,
            admin_email=admin.email,
            fields=sorted(changes),
        )
        return tenant

    async def lookup_account(self, email: str) -> None:
        """Look up the tenant an e-mail belongs to.

        The outcome is only logged; callers always get the same answer
        so that account existence is not revealed.

        Raises:
            BadRequestError: If the e-mail is blank
        """
        value = email.strip().lower()
        if not value:
            raise BadRequestError("Email is required", error_code="email_required")

        account = await self.user_repo.find_account(value)
        if account is None:
            logger.info("account_lookup_miss")
            return

        user, tenant = account
        logger.info(
            "account_lookup_hit",
            user_id=user.id,
            tenant_subdomain=tenant.subdomain,
            login_url=login_url(tenant.subdomain),
        )


# Type alias for dependency injection
TenantSvc = Annotated[TenantService, Depends(TenantService)]
