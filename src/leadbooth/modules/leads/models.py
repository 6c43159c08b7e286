"""Lead capture database models.

Both tables are append-only: rows are inserted by public endpoints
and never updated or deleted by the application.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, LargeBinary, String, Text, func
from sqlalchemy.orm import Mapped, deferred, mapped_column

from leadbooth.core.constants import (
    MAX_EMAIL_LENGTH,
    MAX_FORM_SOURCE_LENGTH,
    MAX_IPV6_LENGTH,
    MAX_MIME_TYPE_LENGTH,
    MAX_NAME_LENGTH,
)
from leadbooth.core.database.base import Base, IntegerIDMixin, UUIDMixin


class BadgePhoto(Base, IntegerIDMixin):
    """A lead submission: contact details plus the photographed badge.

    ``image_data`` is deferred so that listing submissions never loads
    the image bytes.

    Attributes:
        tradeshow_id: The tradeshow the lead was captured at
        filename: Original upload filename
        mime_type: Upload content type
        file_size: Size of ``image_data`` in bytes
        image_data: The raw image
        contact_email: Attendee e-mail
        contact_name: Attendee name
        uploaded_at: Submission time
        submitted_by_rep: ID of the rep the lead is attributed to
        form_source: Which public form produced the lead
    """

    __tablename__ = "badge_photos"

    tradeshow_id: Mapped[int | None] = mapped_column(
        ForeignKey("tradeshows.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    filename: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    mime_type: Mapped[str] = mapped_column(
        String(MAX_MIME_TYPE_LENGTH),
        nullable=False,
    )
    file_size: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
    image_data: Mapped[bytes] = deferred(
        mapped_column(
            LargeBinary,
            nullable=False,
        )
    )
    contact_email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
    )
    contact_name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
    submitted_by_rep: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    form_source: Mapped[str] = mapped_column(
        String(MAX_FORM_SOURCE_LENGTH),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<BadgePhoto(id={self.id}, form_source={self.form_source})>"


class PageView(Base, UUIDMixin):
    """A view of a public lead form."""

    __tablename__ = "page_views"

    form_source: Mapped[str] = mapped_column(
        String(MAX_FORM_SOURCE_LENGTH),
        nullable=False,
        index=True,
    )
    viewed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    user_agent: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    ip_address: Mapped[str] = mapped_column(
        String(MAX_IPV6_LENGTH),
        nullable=False,
    )
