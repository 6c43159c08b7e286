"""User roles and the access levels the role gate understands."""

from enum import StrEnum


class UserRole(StrEnum):
    """Closed set of roles a session can carry."""

    ADMIN = "admin"
    REP = "rep"


class RequiredRole(StrEnum):
    """Access level demanded by a gated operation."""

    AUTHENTICATED = "any-authenticated"
    ADMIN = "admin"


# Roles that can be attributed leads through a rep code
REP_CODE_ROLES: tuple[UserRole, ...] = (UserRole.REP, UserRole.ADMIN)
