"""Authentication schemas for session handling."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from leadbooth.core.roles import UserRole


class SessionUser(BaseModel):
    """Identity carried by a session token.

    Attributes:
        id: The user's id
        email: The user's e-mail address
        name: Display name
        role: Role name (``admin`` or ``rep``)
        tenant_id: The tenant the user belongs to
        tenant_subdomain: The tenant's subdomain, when known at login
        rep_code: The rep's attribution code, if any
        exp: Session expiration time
    """

    id: int
    email: str
    name: str
    role: str
    tenant_id: int
    tenant_subdomain: str | None = None
    rep_code: str | None = None
    exp: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class LoginRequest(BaseModel):
    """Schema for e-mail/password login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Schema for a successful login.

    Attributes:
        access_token: Signed session token
        token_type: Always "bearer"
        expires_in: Session lifetime in seconds
        user: The session identity
    """

    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: SessionUser


class LogoutResponse(BaseModel):
    """Schema for logout acknowledgement."""

    success: bool = True
