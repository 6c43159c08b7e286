"""Role-based access control."""

from leadbooth.core.permissions.gate import (
    AdminSession,
    AuthenticatedSession,
    authorize,
    require_role,
)
from leadbooth.core.roles import REP_CODE_ROLES, RequiredRole, UserRole


__all__ = [
    "REP_CODE_ROLES",
    "AdminSession",
    "AuthenticatedSession",
    "RequiredRole",
    "UserRole",
    "authorize",
    "require_role",
]
