"""Tenant database models."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from leadbooth.core.constants import (
    DEFAULT_DARK_COLOR,
    DEFAULT_PRIMARY_COLOR,
    MAX_COLOR_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    MAX_SLUG_LENGTH,
    MAX_SUBDOMAIN_LENGTH,
)
from leadbooth.core.database.base import Base, IntegerIDMixin, TimestampMixin


ACTIVE_TENANT_CLAUSE = "is_active AND deleted_at IS NULL"


class Tenant(Base, IntegerIDMixin, TimestampMixin):
    """A white-labeled customer account reached through its subdomain.

    Attributes:
        name: Display name used as the brand name
        slug: Unique URL-safe identifier
        subdomain: Lower-case subdomain, unique among active tenants
        logo_url: Optional logo shown in the UI
        primary_color: Brand primary color
        dark_color: Brand dark color
        accent_color: Optional accent color
        company_email: Contact e-mail shown to attendees
        company_domain: The customer's own domain
        support_email: Support contact
        is_active: Whether the tenant can be resolved
        deleted_at: Soft-deletion timestamp
    """

    __tablename__ = "tenants"
    __table_args__ = (
        Index(
            "ix_tenants_active_subdomain",
            "subdomain",
            unique=True,
            postgresql_where=text(ACTIVE_TENANT_CLAUSE),
            sqlite_where=text(ACTIVE_TENANT_CLAUSE),
        ),
    )

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    slug: Mapped[str] = mapped_column(
        String(MAX_SLUG_LENGTH),
        unique=True,
        nullable=False,
    )
    subdomain: Mapped[str] = mapped_column(
        String(MAX_SUBDOMAIN_LENGTH),
        nullable=False,
        index=True,
    )
    logo_url: Mapped[str | None] = mapped_column(
        String(1024),
        nullable=True,
    )
    primary_color: Mapped[str] = mapped_column(
        String(MAX_COLOR_LENGTH),
        default=DEFAULT_PRIMARY_COLOR,
        nullable=False,
    )
    dark_color: Mapped[str] = mapped_column(
        String(MAX_COLOR_LENGTH),
        default=DEFAULT_DARK_COLOR,
        nullable=False,
    )
    accent_color: Mapped[str | None] = mapped_column(
        String(MAX_COLOR_LENGTH),
        nullable=True,
    )
    company_email: Mapped[str | None] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=True,
    )
    company_domain: Mapped[str | None] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=True,
    )
    support_email: Mapped[str | None] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=True,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, subdomain={self.subdomain})>"
