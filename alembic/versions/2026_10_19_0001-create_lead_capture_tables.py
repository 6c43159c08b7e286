"""create_lead_capture_tables

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 00:00:00.000000

This migration adds:
- tenants with a partial unique index on active subdomains
- users with per-tenant e-mail and global rep code uniqueness
- tradeshows and tradeshow_tags
- badge_photos and page_views
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "tenants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=63), nullable=False),
        sa.Column("subdomain", sa.String(length=63), nullable=False),
        sa.Column("logo_url", sa.String(length=1024), nullable=True),
        sa.Column("primary_color", sa.String(length=20), nullable=False),
        sa.Column("dark_color", sa.String(length=20), nullable=False),
        sa.Column("accent_color", sa.String(length=20), nullable=True),
        sa.Column("company_email", sa.String(length=255), nullable=True),
        sa.Column("company_domain", sa.String(length=255), nullable=True),
        sa.Column("support_email", sa.String(length=255), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index(op.f("ix_tenants_subdomain"), "tenants", ["subdomain"], unique=False)
    op.create_index(
        "ix_tenants_active_subdomain",
        "tenants",
        ["subdomain"],
        unique=True,
        postgresql_where=sa.text("is_active AND deleted_at IS NULL"),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=True),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("rep_code", sa.String(length=50), nullable=True),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        sa.Column("tenant_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("rep_code"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=False)
    op.create_index(op.f("ix_users_tenant_id"), "users", ["tenant_id"], unique=False)
    op.create_index("ix_users_tenant_email", "users", ["tenant_id", "email"], unique=True)

    op.create_table(
        "tradeshows",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=63), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("default_country", sa.String(length=100), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_by", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index(op.f("ix_tradeshows_created_by"), "tradeshows", ["created_by"], unique=False)

    op.create_table(
        "tradeshow_tags",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tradeshow_id", sa.Integer(), nullable=False),
        sa.Column("tag_name", sa.String(length=100), nullable=False),
        sa.Column("tag_value", sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(["tradeshow_id"], ["tradeshows.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tradeshow_id", "tag_name", name="uq_tradeshow_tags_name"),
    )
    op.create_index(
        op.f("ix_tradeshow_tags_tradeshow_id"), "tradeshow_tags", ["tradeshow_id"], unique=False
    )

    op.create_table(
        "badge_photos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tradeshow_id", sa.Integer(), nullable=True),
        sa.Column("filename", sa.String(length=255), nullable=False),
        sa.Column("mime_type", sa.String(length=100), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("image_data", sa.LargeBinary(), nullable=False),
        sa.Column("contact_email", sa.String(length=255), nullable=False),
        sa.Column("contact_name", sa.String(length=255), nullable=False),
        sa.Column(
            "uploaded_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("submitted_by_rep", sa.Integer(), nullable=True),
        sa.Column("form_source", sa.String(length=50), nullable=False),
        sa.ForeignKeyConstraint(["tradeshow_id"], ["tradeshows.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["submitted_by_rep"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_badge_photos_tradeshow_id"), "badge_photos", ["tradeshow_id"])
    op.create_index(op.f("ix_badge_photos_uploaded_at"), "badge_photos", ["uploaded_at"])
    op.create_index(op.f("ix_badge_photos_submitted_by_rep"), "badge_photos", ["submitted_by_rep"])
    op.create_index(op.f("ix_badge_photos_form_source"), "badge_photos", ["form_source"])

    op.create_table(
        "page_views",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("form_source", sa.String(length=50), nullable=False),
        sa.Column(
            "viewed_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("user_agent", sa.Text(), nullable=False),
        sa.Column("ip_address", sa.String(length=45), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_page_views_form_source"), "page_views", ["form_source"])


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_index(op.f("ix_page_views_form_source"), table_name="page_views")
    op.drop_table("page_views")

    op.drop_index(op.f("ix_badge_photos_form_source"), table_name="badge_photos")
    op.drop_index(op.f("ix_badge_photos_submitted_by_rep"), table_name="badge_photos")
    op.drop_index(op.f("ix_badge_photos_uploaded_at"), table_name="badge_photos")
    op.drop_index(op.f("ix_badge_photos_tradeshow_id"), table_name="badge_photos")
    op.drop_table("badge_photos")

    op.drop_index(op.f("ix_tradeshow_tags_tradeshow_id"), table_name="tradeshow_tags")
    op.drop_table("tradeshow_tags")

    op.drop_index(op.f("ix_tradeshows_created_by"), table_name="tradeshows")
    op.drop_table("tradeshows")

    op.drop_index("ix_users_tenant_email", table_name="users")
    op.drop_index(op.f("ix_users_tenant_id"), table_name="users")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")

    op.drop_index("ix_tenants_active_subdomain", table_name="tenants")
    op.drop_index(op.f("ix_tenants_subdomain"), table_name="tenants")
    op.drop_table("tenants")
