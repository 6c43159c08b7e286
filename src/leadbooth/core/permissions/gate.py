"""Role gate for authenticated and administrative operations.

``authorize`` is evaluated before any gated operation runs. Missing
sessions and insufficient roles both yield ``UnauthorizedError`` (401).

Usage:
    @router.post("/tradeshows/{tradeshow_id}/toggle-active")
    async def toggle_active(tradeshow_id: int, admin: AdminSession):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

import structlog
from fastapi import Depends

from leadbooth.core.auth.dependencies import OptionalSession
from leadbooth.core.auth.schemas import SessionUser
from leadbooth.core.errors import UnauthorizedError
from leadbooth.core.roles import RequiredRole, UserRole


logger = structlog.get_logger()


def authorize(session: SessionUser | None, required: RequiredRole) -> SessionUser:
    """Check a session against the required access level.

    Args:
        session: The caller's session, or None when unauthenticated
        required: The access level the operation demands

    Returns:
        The session when access is allowed

    Raises:
        UnauthorizedError: If there is no session or its role is insufficient
    """
    if session is None:
        logger.warning(
            "authorization_denied",
            reason="no_session",
            required_role=required.value,
        )
        raise UnauthorizedError("Unauthorized", error_code="session_required")

    if required is RequiredRole.ADMIN and session.role != UserRole.ADMIN:
        logger.warning(
            "authorization_denied",
            reason="insufficient_role",
            required_role=required.value,
            user_id=session.id,
            role=session.role,
        )
        raise UnauthorizedError("Unauthorized", error_code="admin_required")

    return session


def require_role(required: RequiredRole) -> Callable[..., Awaitable[SessionUser]]:
    """Build a dependency that gates a route on ``required``.

    Args:
        required: The access level to enforce

    Returns:
        Dependency returning the authorised session
    """

    async def dependency(session: OptionalSession) -> SessionUser:
        return authorize(session, required)

    return dependency


# Type aliases for cleaner dependency injection
AuthenticatedSession = Annotated[
    SessionUser, Depends(require_role(RequiredRole.AUTHENTICATED))
]
AdminSession = Annotated[SessionUser, Depends(require_role(RequiredRole.ADMIN))]
