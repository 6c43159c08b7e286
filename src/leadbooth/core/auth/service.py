"""Authentication service for credential login."""

from datetime import UTC, datetime
from typing import Annotated

import structlog
from fastapi import Depends

from leadbooth.core.auth.backend import (
    create_session_token,
    session_lifetime,
    verify_password,
)
from leadbooth.core.auth.schemas import LoginResponse, SessionUser
from leadbooth.core.errors import UnauthorizedError
from leadbooth.modules.tenants.repos import TenantRepo
from leadbooth.modules.users.repos import UserRepo


logger = structlog.get_logger()

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthService:
    """Service for authentication operations.

    Verifies credentials and issues session tokens.
    """

    def __init__(self, user_repo: UserRepo, tenant_repo: TenantRepo) -> None:
        self.user_repo = user_repo
        self.tenant_repo = tenant_repo

    def _invalid(self, reason: str, email: str) -> UnauthorizedError:
        logger.warning("login_failed", reason=reason, email=email)
        return UnauthorizedError(INVALID_CREDENTIALS_MESSAGE, error_code="invalid_credentials")

    async def login(
        self,
        email: str,
        password: str,
        tenant_subdomain: str | None = None,
    ) -> LoginResponse:
        """Authenticate a user with e-mail and password.

        When the request carries a tenant subdomain, only users of that
        tenant can log in.

        Args:
            email: User's e-mail address
            password: Plain text password
            tenant_subdomain: Subdomain the login page was served from

        Returns:
            Session token and the session identity

        Raises:
            UnauthorizedError: If the credentials are invalid
        """
        email = email.strip().lower()

        tenant_id = None
        if tenant_subdomain:
            tenant = await self.tenant_repo.get_active_by_subdomain(tenant_subdomain)
            if tenant is None:
                raise self._invalid("unknown_tenant", email)
            tenant_id = tenant.id

        user = await self.user_repo.get_by_email(email, tenant_id=tenant_id)
        if user is None or not verify_password(password, user.password_hash):
            raise self._invalid("bad_credentials", email)

        tenant = await self.tenant_repo.get_active_by_id(user.tenant_id)
        if tenant is None:
            raise self._invalid("inactive_tenant", email)

        user.last_login = datetime.now(UTC)
        user.updated_at = user.last_login
        user = await self.user_repo.update(user)

        lifetime = session_lifetime()
        token = create_session_token(
            user_id=user.id,
            tenant_id=user.tenant_id,
            role=user.role,
            email=user.email,
            name=user.name,
            rep_code=user.rep_code,
            tenant_subdomain=tenant.subdomain,
            expires_delta=lifetime,
        )

        logger.info("login_succeeded", user_id=user.id, tenant_id=user.tenant_id, role=user.role)

        return LoginResponse(
            access_token=token,
            expires_in=int(lifetime.total_seconds()),
            user=SessionUser(
                id=user.id,
                email=user.email,
                name=user.name,
                role=user.role,
                tenant_id=user.tenant_id,
                tenant_subdomain=tenant.subdomain,
                rep_code=user.rep_code,
            ),
        )


# Type alias for dependency injection
AuthSvc = Annotated[AuthService, Depends(AuthService)]
