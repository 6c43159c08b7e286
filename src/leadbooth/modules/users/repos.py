"""User repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from leadbooth.api.dependencies import DBSession
from leadbooth.core.roles import REP_CODE_ROLES, UserRole
from leadbooth.modules.tenants.models import Tenant
from leadbooth.modules.users.models import User


class UserRepository:
    """Repository for User database operations.

    Handles all database interactions for the User model.
    Queries are scoped to a tenant when a tenant ID is given.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, user: User) -> User:
        """Create a new user.

        Args:
            user: User instance to create

        Returns:
            The created user with ID populated
        """
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: int, tenant_id: int | None = None) -> User | None:
        """Get a user by ID.

        Args:
            user_id: The user's ID
            tenant_id: Optional tenant ID for scoping

        Returns:
            User if found, None otherwise
        """
        stmt = select(User).where(User.id == user_id)
        if tenant_id is not None:
            stmt = stmt.where(User.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str, tenant_id: int | None = None) -> User | None:
        """Get a user by e-mail address.

        Without a tenant the lowest-id match is returned, since the same
        address may exist in several tenants.

        Args:
            email: The user's e-mail
            tenant_id: Optional tenant ID for scoping

        Returns:
            User if found, None otherwise
        """
        stmt = select(User).where(User.email == email.lower())
        if tenant_id is not None:
            stmt = stmt.where(User.tenant_id == tenant_id)
        result = await self.session.execute(stmt.order_by(User.id).limit(1))
        return result.scalars().first()

    async def find_rep_by_code(self, rep_code: str) -> User | None:
        """Find the user holding a rep code.

        Only users whose role is ``rep`` or ``admin`` are considered.

        Args:
            rep_code: The attribution code

        Returns:
            The first matching user, or None
        """
        stmt = (
            select(User)
            .where(
                User.rep_code == rep_code,
                User.role.in_([role.value for role in REP_CODE_ROLES]),
            )
            .order_by(User.id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_rep_code(
        self, rep_code: str, exclude_id: int | None = None
    ) -> User | None:
        """Get any user holding a rep code, regardless of role.

        Args:
            rep_code: The attribution code
            exclude_id: User to leave out, used when a user keeps their own code

        Returns:
            User if found, None otherwise
        """
        stmt = select(User).where(User.rep_code == rep_code)
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalars().first()

    async def list_reps(self, tenant_id: int) -> list[User]:
        """List the reps of a tenant ordered by name.

        Args:
            tenant_id: The tenant's ID

        Returns:
            Users with the ``rep`` role
        """
        stmt = (
            select(User)
            .where(User.tenant_id == tenant_id, User.role == UserRole.REP.value)
            .order_by(User.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_with_tenants(
        self, subdomain: str | None = None
    ) -> list[tuple[User, Tenant]]:
        """List users together with their tenant.

        Args:
            subdomain: Optional tenant subdomain filter

        Returns:
            (user, tenant) pairs ordered by tenant then user name
        """
        stmt = select(User, Tenant).join(Tenant, Tenant.id == User.tenant_id)
        if subdomain:
            stmt = stmt.where(Tenant.subdomain == subdomain.lower())
        stmt = stmt.order_by(Tenant.subdomain, User.name)
        result = await self.session.execute(stmt)
        return [(user, tenant) for user, tenant in result.all()]

    async def find_account(self, email: str) -> tuple[User, Tenant] | None:
        """Find a user and their active tenant by e-mail, across tenants.

        Args:
            email: The e-mail address to look up

        Returns:
            The first (user, tenant) pair, or None
        """
        stmt = (
            select(User, Tenant)
            .join(Tenant, Tenant.id == User.tenant_id)
            .where(
                User.email == email.lower(),
                Tenant.is_active.is_(True),
                Tenant.deleted_at.is_(None),
            )
            .order_by(User.id)
            .limit(1)
        )
        row = (await self.session.execute(stmt)).first()
        if row is None:
            return None
        return row[0], row[1]

    async def delete(self, user: User) -> None:
        """Delete a user."""
        await self.session.delete(user)
        await self.session.flush()

    async def update(self, user: User) -> User:
        """Update a user.

        Args:
            user: User instance with updated fields

        Returns:
            The updated user
        """
        await self.session.flush()
        await self.session.refresh(user)
        return user


# Type alias for dependency injection
UserRepo = Annotated[UserRepository, Depends(UserRepository)]
