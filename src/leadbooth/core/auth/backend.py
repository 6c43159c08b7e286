"""Authentication backend for session tokens and password handling.

This module provides core authentication utilities including:
- Password hashing with bcrypt
- Session token (JWT) creation and verification
"""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from leadbooth.config import settings
from leadbooth.core.auth.schemas import SessionUser
from leadbooth.core.constants import BCRYPT_ROUNDS, SESSION_JTI_LENGTH


SESSION_TOKEN_TYPE = "session"

# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


# ============================================================
# Password Utilities
# ============================================================


def hash_password(password: str) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hash of the password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify a password against its hash.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Bcrypt hash to verify against; None never matches

    Returns:
        True if password matches, False otherwise
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Malformed hash stored for the user
        return False


# ============================================================
# Session Token Utilities
# ============================================================


def session_lifetime() -> timedelta:
    """Configured session lifetime."""
    return timedelta(days=settings.session_max_age_days)


def create_session_token(
    user_id: int,
    tenant_id: int,
    role: str,
    email: str,
    name: str,
    rep_code: str | None = None,
    tenant_subdomain: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed session token.

    Args:
        user_id: The user's id
        tenant_id: The user's tenant id
        role: The user's role
        email: The user's e-mail
        name: The user's display name
        rep_code: Optional rep attribution code
        tenant_subdomain: Optional tenant subdomain
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT
    """
    now = datetime.now(UTC)
    expire = now + (expires_delta if expires_delta is not None else session_lifetime())

    to_encode: dict[str, Any] = {
        "sub": str(user_id),
        "tenant_id": tenant_id,
        "role": role,
        "email": email,
        "name": name,
        "rep_code": rep_code,
        "tenant_subdomain": tenant_subdomain,
        "exp": expire,
        "iat": now,
        "type": SESSION_TOKEN_TYPE,
        "jti": secrets.token_urlsafe(SESSION_JTI_LENGTH),
    }

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_session_token(token: str) -> SessionUser | None:
    """Decode and validate a session token.

    Args:
        token: The JWT to decode

    Returns:
        SessionUser if valid, None if invalid, expired or of another type
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None

    if payload.get("type") != SESSION_TOKEN_TYPE:
        return None

    user_id = payload.get("sub")
    tenant_id = payload.get("tenant_id")
    role = payload.get("role")
    exp = payload.get("exp")
    if not user_id or tenant_id is None or not role or exp is None:
        return None

    try:
        return SessionUser(
            id=int(user_id),
            tenant_id=int(tenant_id),
            role=role,
            email=payload.get("email") or "",
            name=payload.get("name") or "",
            rep_code=payload.get("rep_code"),
            tenant_subdomain=payload.get("tenant_subdomain"),
            exp=datetime.fromtimestamp(exp, tz=UTC),
        )
    except (TypeError, ValueError):
        return None
