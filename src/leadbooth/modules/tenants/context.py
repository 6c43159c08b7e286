"""Request-scoped tenant context.

The context is built once per request by ``get_tenant_context`` and
handed to whatever needs it through dependency injection. It is never
stored in module-level state.

Usage:
    @router.get("/tenant/context")
    async def read_context(context: CurrentTenantContext):
        return context.branding
"""

from typing import Annotated

import structlog
from fastapi import Depends, Request
from pydantic import BaseModel, ConfigDict

from leadbooth.core.auth.dependencies import OptionalSession
from leadbooth.core.constants import (
    DEFAULT_BRAND_NAME,
    DEFAULT_DARK_COLOR,
    DEFAULT_PRIMARY_COLOR,
)
from leadbooth.core.errors import AppException, NotFoundError
from leadbooth.core.permissions import AuthenticatedSession
from leadbooth.modules.tenants.models import Tenant
from leadbooth.modules.tenants.repos import TenantRepo


logger = structlog.get_logger()


class TenantContextRequired(AppException):
    """Raised when code that needs a tenant runs without one.

    This indicates a programming error rather than bad client input.
    """

    message = "Tenant is required but not found"
    error_code = "tenant_context_required"
    status_code = 500


class TenantBranding(BaseModel):
    """White-label branding shown by the UI."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    name: str
    logo_url: str | None = None
    primary_color: str
    dark_color: str
    accent_color: str | None = None


DEFAULT_BRANDING = TenantBranding(
    name=DEFAULT_BRAND_NAME,
    logo_url=None,
    primary_color=DEFAULT_PRIMARY_COLOR,
    dark_color=DEFAULT_DARK_COLOR,
    accent_color=None,
)


class TenantContext(BaseModel):
    """The tenant a request runs on behalf of, plus its branding.

    Attributes:
        tenant_id: The resolved tenant's ID, if any
        tenant_subdomain: The resolved or requested subdomain, if any
        branding: Tenant branding, or the default branding
        is_loading: True while resolution has not completed
    """

    model_config = ConfigDict(frozen=True)

    tenant_id: int | None = None
    tenant_subdomain: str | None = None
    branding: TenantBranding = DEFAULT_BRANDING
    is_loading: bool = False

    @classmethod
    def from_tenant(cls, tenant: Tenant) -> "TenantContext":
        """Build a resolved context from a tenant row."""
        return cls(
            tenant_id=tenant.id,
            tenant_subdomain=tenant.subdomain,
            branding=TenantBranding.model_validate(tenant),
        )

    def is_tenant(self, subdomain: str) -> bool:
        """Check whether the context belongs to ``subdomain`` (case-insensitive)."""
        if not self.tenant_subdomain:
            return False
        return self.tenant_subdomain == subdomain.strip().lower()

    def require_tenant(self) -> int:
        """Return the tenant ID, failing when resolution finished without one.

        Returns:
            The tenant ID

        Raises:
            TenantContextRequired: If not loading and no tenant was resolved
        """
        if not self.is_loading and self.tenant_id is None:
            raise TenantContextRequired()
        return self.tenant_id  # type: ignore[return-value]


async def get_tenant_context(
    request: Request,
    session: OptionalSession,
    repo: TenantRepo,
) -> TenantContext:
    """Resolve the tenant context for the current request.

    The session's tenant wins over the request subdomain. When neither
    resolves to an active tenant the default branding is used.

    Args:
        request: The incoming request
        session: The caller's session, if any
        repo: Tenant repository

    Returns:
        The resolved context
    """
    subdomain = getattr(request.state, "tenant_subdomain", None)

    tenant = None
    if session is not None:
        tenant = await repo.get_active_by_id(session.tenant_id)
    if tenant is None and subdomain:
        tenant = await repo.get_active_by_subdomain(subdomain)

    if tenant is None:
        logger.debug("tenant_context_default", tenant_subdomain=subdomain)
        return TenantContext(tenant_subdomain=subdomain)

    return TenantContext.from_tenant(tenant)


CurrentTenantContext = Annotated[TenantContext, Depends(get_tenant_context)]


async def get_session_tenant_context(
    session: AuthenticatedSession,
    context: CurrentTenantContext,
) -> TenantContext:
    """Resolve the tenant context of a signed-in caller.

    The context falls back to the request subdomain when the session's
    tenant is inactive or deleted, so a context for any other tenant is
    reported as a missing account.

    Raises:
        NotFoundError: If the session's tenant did not resolve
    """
    if context.tenant_id != session.tenant_id:
        raise NotFoundError(
            "Account not found",
            resource="tenant",
            resource_id=str(session.tenant_id),
        )
    return context


SessionTenantContext = Annotated[TenantContext, Depends(get_session_tenant_context)]
