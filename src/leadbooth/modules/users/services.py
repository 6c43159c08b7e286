"""User service for rep management and account settings."""

from datetime import UTC, datetime
from typing import Annotated

import structlog
from fastapi import Depends

from leadbooth.core.auth.backend import hash_password, verify_password
from leadbooth.core.auth.schemas import SessionUser
from leadbooth.core.constants import MIN_PASSWORD_LENGTH
from leadbooth.core.errors import BadRequestError, ConflictError, NotFoundError
from leadbooth.core.roles import UserRole
from leadbooth.modules.leads.repos import BadgePhotoRepo
from leadbooth.modules.users.models import User
from leadbooth.modules.users.repos import UserRepo
from leadbooth.modules.users.schemas import RepCreate, RepUpdate, SettingsUpdate


logger = structlog.get_logger()


class UserService:
    """Service for rep lookup, rep management and account settings.

    Handles business logic on top of the user repository. Badge photos are
    consulted only to refuse deleting a rep who has submissions.
    """

    def __init__(self, repo: UserRepo, photos: BadgePhotoRepo) -> None:
        self.repo = repo
        self.photos = photos

    async def find_rep_by_code(self, rep_code: str) -> User:
        """Resolve a rep code to its rep or admin.

        Args:
            rep_code: The attribution code from a form link

        Returns:
            The matching user

        Raises:
            NotFoundError: If no rep or admin holds the code
        """
        user = await self.repo.find_rep_by_code(rep_code)
        if not user:
            raise NotFoundError(
                "Representative not found",
                resource="rep",
                resource_id=rep_code,
            )
        return user

    async def list_reps(self, admin: SessionUser) -> list[User]:
        """List the reps in the admin's tenant."""
        return await self.repo.list_reps(admin.tenant_id)

    async def create_rep(self, data: RepCreate, admin: SessionUser) -> User:
        """Create a rep in the admin's tenant.

        Args:
            data: Rep details
            admin: The admin performing the creation

        Returns:
            The created rep

        Raises:
            ConflictError: If the e-mail exists in the tenant or the rep code is taken
        """
        email = data.email.lower()
        if await self.repo.get_by_email(email, tenant_id=admin.tenant_id):
            raise ConflictError(
                "A user with this email already exists",
                error_code="email_exists",
            )
        if await self.repo.get_by_rep_code(data.rep_code):
            raise ConflictError(
                "Rep code is already in use",
                error_code="rep_code_exists",
            )

        user = User(
            name=data.name,
            email=email,
            password_hash=hash_password(data.password),
            role=UserRole.REP.value,
            rep_code=data.rep_code,
            tenant_id=admin.tenant_id,
        )
        user = await self.repo.create(user)

        logger.info(
            "rep_created",
            rep_id=user.id,
            rep_code=user.rep_code,
            tenant_id=admin.tenant_id,
            admin_email=admin.email,
        )
        return user


    async def _get_rep(self, rep_id: int, admin: SessionUser) -> User:
        user = await self.repo.get_by_id(rep_id, tenant_id=admin.tenant_id)
        if not user or user.role != UserRole.REP.value:
            raise NotFoundError("Rep not found", resource="rep", resource_id=str(rep_id))
        return user

    async def update_rep(self, data: RepUpdate, admin: SessionUser) -> User:
        """Replace a rep's details, and their password when one is sent.

        Args:
            data: New rep details including the rep's ID
            admin: The admin performing the update

        Returns:
            The updated rep

        Raises:
            ConflictError: If another user holds the e-mail in the tenant or the rep code
            NotFoundError: If no rep with the ID exists in the admin's tenant
        """
        user = await self._get_rep(data.id, admin)
        email = data.email.lower()
        holder = await self.repo.get_by_email(email, tenant_id=admin.tenant_id)
        if (holder and holder.id != data.id) or await self.repo.get_by_rep_code(
            data.rep_code, exclude_id=data.id
        ):
            raise ConflictError(
                "Email or rep code already exists",
                error_code="rep_exists",
            )

        user.email = email
        user.name = data.name
        user.rep_code = data.rep_code
        if data.password:
            user.password_hash = hash_password(data.password)
        user.updated_at = datetime.now(UTC)
        user = await self.repo.update(user)

        logger.info(
            "rep_updated",
            rep_id=user.id,
            rep_code=user.rep_code,
            password_changed=bool(data.password),
            admin_email=admin.email,
        )
        return user

    async def delete_rep(self, rep_id: int, admin: SessionUser) -> None:
        """Delete a rep who has no attributed submissions.

        Raises:
            BadRequestError: If leads are attributed to the rep
            NotFoundError: If no rep with the ID exists in the admin's tenant
        """
        user = await self._get_rep(rep_id, admin)
        submissions = await self.photos.count_by_rep(user.id)
        if submissions > 0:
            raise BadRequestError(
                f"Cannot delete rep with {submissions} submissions. "
                "Consider deactivating instead."
            )

        await self.repo.delete(user)

        logger.info("rep_deleted", rep_id=rep_id, admin_email=admin.email)

    async def update_settings(self, data: SettingsUpdate, session: SessionUser) -> User:
        """Change the caller's own name or password.

        A new password requires the current one. A name alone must differ
        from the stored name.

        Args:
            data: Requested changes
            session: The caller's session

        Returns:
            The updated user

        Raises:
            BadRequestError: If the password checks fail or nothing changes
            NotFoundError: If the session's user no longer exists
        """
        user = await self.repo.get_by_id(session.id, tenant_id=session.tenant_id)
        if not user:
            raise NotFoundError("User not found", resource="user", resource_id=str(session.id))

        if data.new_password:
            if not data.current_password:
                raise BadRequestError("Current password is required to set a new password")
            if not verify_password(data.current_password, user.password_hash):
                raise BadRequestError("Current password is incorrect")
            if len(data.new_password) < MIN_PASSWORD_LENGTH:
                raise BadRequestError(
                    f"New password must be at least {MIN_PASSWORD_LENGTH} characters long"
                )
            user.password_hash = hash_password(data.new_password)
            if data.name:
                user.name = data.name
        elif data.name and data.name != user.name:
            user.name = data.name
        else:
            raise BadRequestError("No changes to update")

        user.updated_at = datetime.now(UTC)
        user = await self.repo.update(user)

        logger.info(
            "settings_updated",
            user_id=user.id,
            password_changed=bool(data.new_password),
        )
        return user


# Type alias for dependency injection
UserSvc = Annotated[UserService, Depends(UserService)]
