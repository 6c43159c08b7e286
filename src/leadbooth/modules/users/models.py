"""User database models."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from leadbooth.core.constants import (
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    MAX_REP_CODE_LENGTH,
    MAX_ROLE_LENGTH,
)
from leadbooth.core.database.base import Base, IntegerIDMixin, TenantMixin, TimestampMixin
from leadbooth.core.roles import UserRole


class User(Base, IntegerIDMixin, TimestampMixin, TenantMixin):
    """A rep or admin belonging to a tenant.

    ``role`` is stored as a plain string; the application only issues
    ``admin`` and ``rep``, and lookups filter on those values.

    Attributes:
        name: Display name
        email: E-mail address, unique within the tenant
        password_hash: Bcrypt hash of the password
        role: Role name
        rep_code: Globally unique attribution code used in form links
        last_login: Time of the last successful login
    """

    __tablename__ = "users"
    __table_args__ = (
        Index("ix_users_tenant_email", "tenant_id", "email", unique=True),
    )

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    role: Mapped[str] = mapped_column(
        String(MAX_ROLE_LENGTH),
        default=UserRole.REP.value,
        nullable=False,
    )
    rep_code: Mapped[str | None] = mapped_column(
        String(MAX_REP_CODE_LENGTH),
        unique=True,
        nullable=True,
    )
    last_login: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
