"""Authentication module for session tokens and password handling."""

from leadbooth.core.auth.backend import (
    create_session_token,
    decode_session_token,
    hash_password,
    verify_password,
)
from leadbooth.core.auth.dependencies import OptionalSession, get_optional_session
from leadbooth.core.auth.middleware import (
    RequestIdMiddleware,
    TenantContextMiddleware,
    extract_subdomain,
)
from leadbooth.core.auth.schemas import SessionUser


__all__ = [
    # Dependencies
    "OptionalSession",
    # Middleware
    "RequestIdMiddleware",
    # Schemas
    "SessionUser",
    "TenantContextMiddleware",
    # Token utilities
    "create_session_token",
    "decode_session_token",
    "extract_subdomain",
    "get_optional_session",
    # Password utilities
    "hash_password",
    "verify_password",
]
