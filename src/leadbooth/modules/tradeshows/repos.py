"""Tradeshow repository for database operations."""

from collections import defaultdict
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import and_, func, select

from leadbooth.api.dependencies import DBSession
from leadbooth.modules.leads.models import BadgePhoto
from leadbooth.modules.tradeshows.models import Tradeshow, TradeshowTag
from leadbooth.modules.users.models import User


class TradeshowRepository:
    """Repository for Tradeshow and TradeshowTag database operations.

    Submission counts are always derived from ``badge_photos``.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, tradeshow: Tradeshow, tags: list[TradeshowTag] | None = None) -> Tradeshow:
        """Create a tradeshow together with its tags.

        Args:
            tradeshow: Tradeshow instance to create
            tags: Tags to attach; their tradeshow_id is filled in

        Returns:
            The created tradeshow with ID populated
        """
        self.session.add(tradeshow)
        await self.session.flush()
        for tag in tags or []:
            tag.tradeshow_id = tradeshow.id
            self.session.add(tag)
        await self.session.flush()
        await self.session.refresh(tradeshow)
        return tradeshow

    async def get_by_id(self, tradeshow_id: int) -> Tradeshow | None:
        """Get a tradeshow by ID."""
        result = await self.session.execute(select(Tradeshow).where(Tradeshow.id == tradeshow_id))
        return result.scalar_one_or_none()

    async def get_for_tenant(self, tradeshow_id: int, tenant_id: int) -> Tradeshow | None:
        """Get a tradeshow by ID if it was created within a tenant."""
        stmt = (
            select(Tradeshow)
            .join(User, User.id == Tradeshow.created_by)
            .where(Tradeshow.id == tradeshow_id, User.tenant_id == tenant_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Tradeshow | None:
        """Get a tradeshow by slug."""
        result = await self.session.execute(select(Tradeshow).where(Tradeshow.slug == slug))
        return result.scalar_one_or_none()

    async def get_creator_name(self, tradeshow: Tradeshow) -> str | None:
        """Get the name of the user who created a tradeshow."""
        if tradeshow.created_by is None:
            return None
        result = await self.session.execute(select(User.name).where(User.id == tradeshow.created_by))
        return result.scalar_one_or_none()

    async def count_submissions(self, tradeshow_id: int) -> int:
        """Count the leads captured at a tradeshow."""
        stmt = (
            select(func.count(BadgePhoto.id))
            .where(BadgePhoto.tradeshow_id == tradeshow_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def list_submissions(self, tradeshow_id: int) -> list[dict[str, Any]]:
        """List the leads captured at a tradeshow, newest first.

        The attributed rep's name and code are joined in from ``users``.

        Args:
            tradeshow_id: The tradeshow's ID

        Returns:
            Submission rows as dictionaries
        """
        stmt = (
            select(
                BadgePhoto.id,
                BadgePhoto.contact_email,
                BadgePhoto.contact_name,
                BadgePhoto.uploaded_at,
                User.name.label("rep_name"),
                User.rep_code.label("rep_code"),
            )
            .outerjoin(User, User.id == BadgePhoto.submitted_by_rep)
            .where(BadgePhoto.tradeshow_id == tradeshow_id)
            .order_by(BadgePhoto.uploaded_at.desc(), BadgePhoto.id.desc())
        )
        result = await self.session.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def list_for_tenant(
        self,
        tenant_id: int,
        rep_id: int | None = None,
    ) -> list[tuple[Tradeshow, int]]:
        """List the tradeshows created within a tenant with submission counts.

        Args:
            tenant_id: The tenant's ID
            rep_id: When given, only this user's submissions are counted

        Returns:
            (tradeshow, submission_count) pairs, newest tradeshow first
        """
        join_on = BadgePhoto.tradeshow_id == Tradeshow.id
        if rep_id is not None:
            join_on = and_(join_on, BadgePhoto.submitted_by_rep == rep_id)

        stmt = (
            select(Tradeshow, func.count(BadgePhoto.id))
            .join(User, User.id == Tradeshow.created_by)
            .outerjoin(BadgePhoto, join_on)
            .where(User.tenant_id == tenant_id)
            .group_by(Tradeshow.id)
            .order_by(Tradeshow.created_at.desc(), Tradeshow.id.desc())
        )
        result = await self.session.execute(stmt)
        return [(tradeshow, count) for tradeshow, count in result.all()]

    async def get_tags(self, tradeshow_ids: list[int]) -> dict[int, list[TradeshowTag]]:
        """Get the tags of several tradeshows.

        Args:
            tradeshow_ids: Tradeshow IDs to fetch tags for

        Returns:
            Mapping of tradeshow ID to its tags ordered by name
        """
        tags: dict[int, list[TradeshowTag]] = defaultdict(list)
        if not tradeshow_ids:
            return tags
        stmt = (
            select(TradeshowTag)
            .where(TradeshowTag.tradeshow_id.in_(tradeshow_ids))
            .order_by(TradeshowTag.tag_name)
        )
        result = await self.session.execute(stmt)
        for tag in result.scalars().all():
            tags[tag.tradeshow_id].append(tag)
        return tags

    async def update(self, tradeshow: Tradeshow) -> Tradeshow:
        """Update a tradeshow.

        Args:
            tradeshow: Tradeshow instance with updated fields

        Returns:
            The updated tradeshow
        """
        await self.session.flush()
        await self.session.refresh(tradeshow)
        return tradeshow


# Type alias for dependency injection
TradeshowRepo = Annotated[TradeshowRepository, Depends(TradeshowRepository)]
