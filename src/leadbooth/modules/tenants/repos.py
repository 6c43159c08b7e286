"""Tenant repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from leadbooth.api.dependencies import DBSession
from leadbooth.modules.tenants.models import Tenant


class TenantRepository:
    """Repository for Tenant database operations.

    Lookups only ever return active, non-deleted tenants.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    def _active(self):
        return select(Tenant).where(
            Tenant.is_active.is_(True),
            Tenant.deleted_at.is_(None),
        )

    async def get_active_by_subdomain(self, subdomain: str) -> Tenant | None:
        """Get the active tenant for a subdomain.

        Args:
            subdomain: Lower-case subdomain

        Returns:
            The first matching tenant, or None
        """
        stmt = self._active().where(Tenant.subdomain == subdomain).order_by(Tenant.id).limit(1)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_active_by_id(self, tenant_id: int) -> Tenant | None:
        """Get an active tenant by ID.

        Args:
            tenant_id: The tenant's ID

        Returns:
            Tenant if found and active, None otherwise
        """
        stmt = self._active().where(Tenant.id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, tenant: Tenant) -> Tenant:
        """Flush pending changes to a tenant and reload it.

        Args:
            tenant: Tenant instance with updated fields

        Returns:
            The updated tenant
        """
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant


# Type alias for dependency injection
TenantRepo = Annotated[TenantRepository, Depends(TenantRepository)]
