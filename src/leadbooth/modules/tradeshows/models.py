"""Tradeshow database models."""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from leadbooth.core.constants import (
    MAX_COUNTRY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_SLUG_LENGTH,
    MAX_TAG_NAME_LENGTH,
)
from leadbooth.core.database.base import Base, IntegerIDMixin, TimestampMixin


class Tradeshow(Base, IntegerIDMixin, TimestampMixin):
    """An event at which leads are captured.

    Tenant ownership follows from ``created_by``: a tradeshow belongs
    to the tenant of the user who created it.

    Attributes:
        name: Display name
        slug: Unique identifier used in public form links
        description: Optional free text
        location: Optional venue
        start_date: First day of the event
        end_date: Last day of the event
        default_country: Country prefilled on the lead form
        is_active: True while active, False once archived
        created_by: The creating user
    """

    __tablename__ = "tradeshows"

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    slug: Mapped[str] = mapped_column(
        String(MAX_SLUG_LENGTH),
        unique=True,
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    location: Mapped[str | None] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=True,
    )
    start_date: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
    )
    end_date: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
    )
    default_country: Mapped[str | None] = mapped_column(
        String(MAX_COUNTRY_LENGTH),
        nullable=True,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )
    created_by: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Tradeshow(id={self.id}, slug={self.slug}, is_active={self.is_active})>"


class TradeshowTag(Base, IntegerIDMixin):
    """A name/value label attached to a tradeshow."""

    __tablename__ = "tradeshow_tags"
    __table_args__ = (
        UniqueConstraint("tradeshow_id", "tag_name", name="uq_tradeshow_tags_name"),
    )

    tradeshow_id: Mapped[int] = mapped_column(
        ForeignKey("tradeshows.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tag_name: Mapped[str] = mapped_column(
        String(MAX_TAG_NAME_LENGTH),
        nullable=False,
    )
    tag_value: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
