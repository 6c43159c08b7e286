"""Tenant API routes.

Provides endpoints for:
- Resolving a subdomain to its tenant
- Reading the request's tenant context
- Reading and updating branding
- Looking up an account's login URL
"""

from fastapi import APIRouter

from leadbooth.core.permissions import AdminSession
from leadbooth.modules.tenants.context import (
    CurrentTenantContext,
    SessionTenantContext,
    TenantContext,
)
from leadbooth.modules.tenants.schemas import (
    AccountLookupRequest,
    BrandingResponse,
    BrandingUpdate,
    SuccessResponse,
    TenantResponse,
)
from leadbooth.modules.tenants.services import TenantSvc


router = APIRouter(tags=["tenants"])


@router.get(
    "/tenant",
    response_model=TenantResponse,
    summary="Resolve a tenant by subdomain",
    description="Returns the active tenant for a subdomain. Matching is case-insensitive.",
)
async def get_tenant(service: TenantSvc, subdomain: str | None = None) -> TenantResponse:
    """Resolve a subdomain to its tenant."""
    tenant = await service.resolve_tenant(subdomain)
    return TenantResponse.model_validate(tenant)


@router.get(
    "/tenant/context",
    response_model=TenantContext,
    summary="Current tenant context",
    description="Tenant id, subdomain and branding for the current request.",
)
async def get_tenant_context(context: CurrentTenantContext) -> TenantContext:
    """Get the tenant context of the current request."""
    return context


@router.get(
    "/tenant/branding",
    response_model=BrandingResponse,
    summary="Get branding",
)
async def get_branding(context: SessionTenantContext, service: TenantSvc) -> BrandingResponse:
    """Get the branding of the caller's tenant."""
    tenant = await service.get_branding(context.require_tenant())
    return BrandingResponse.model_validate(tenant)


@router.put(
    "/tenant/branding",
    response_model=BrandingResponse,
    summary="Update branding",
    description="Partially updates the branding of the admin's tenant.",
)
async def update_branding(
    data: BrandingUpdate,
    admin: AdminSession,
    context: SessionTenantContext,
    service: TenantSvc,
) -> BrandingResponse:
    """Update the branding of the caller's tenant."""
    tenant = await service.update_branding(data, context.require_tenant(), admin)
    return BrandingResponse.model_validate(tenant)


@router.post(
    "/lookup-account",
    response_model=SuccessResponse,
    summary="Find my account",
    description="Looks up the account for an e-mail. Always succeeds.",
)
async def lookup_account(data: AccountLookupRequest, service: TenantSvc) -> SuccessResponse:
    """Look up the login URL for an e-mail address."""
    await service.lookup_account(data.email)
    return SuccessResponse()
