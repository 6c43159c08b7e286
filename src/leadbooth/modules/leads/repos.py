"""Lead capture repositories for badge photos and page views."""

from datetime import datetime
from typing import Annotated

from fastapi import Depends
from sqlalchemy import func, select
from sqlalchemy.orm import undefer

from leadbooth.api.dependencies import DBSession
from leadbooth.modules.leads.models import BadgePhoto, PageView


class BadgePhotoRepository:
    """Repository for BadgePhoto database operations.

    Rows are only ever inserted and read.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, photo: BadgePhoto) -> BadgePhoto:
        """Store a lead submission.

        Args:
            photo: BadgePhoto instance to store

        Returns:
            The stored photo with ID populated
        """
        self.session.add(photo)
        await self.session.flush()
        await self.session.refresh(photo, attribute_names=["id", "uploaded_at"])
        return photo

    async def get_with_data(self, photo_id: int) -> BadgePhoto | None:
        """Get a photo including its image bytes.

        Args:
            photo_id: The photo's ID

        Returns:
            BadgePhoto if found, None otherwise
        """
        stmt = (
            select(BadgePhoto)
            .options(undefer(BadgePhoto.image_data))
            .where(BadgePhoto.id == photo_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_by_rep(self, user_id: int) -> int:
        """Count the submissions attributed to a user."""
        stmt = select(func.count(BadgePhoto.id)).where(BadgePhoto.submitted_by_rep == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def submission_stats(self) -> dict[str, tuple[int, datetime | None]]:
        """Count submissions and find the latest one, per form source.

        Returns:
            Mapping of form source to (count, latest uploaded_at)
        """
        stmt = select(
            BadgePhoto.form_source,
            func.count(BadgePhoto.id),
            func.max(BadgePhoto.uploaded_at),
        ).group_by(BadgePhoto.form_source)
        result = await self.session.execute(stmt)
        return {source: (count, latest) for source, count, latest in result.all()}


class PageViewRepository:
    """Repository for PageView database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, view: PageView) -> PageView:
        """Record a page view.

        Args:
            view: PageView instance to record

        Returns:
            The recorded view
        """
        self.session.add(view)
        await self.session.flush()
        return view

    async def count_by_source(self) -> dict[str, int]:
        """Count page views per form source."""
        stmt = select(PageView.form_source, func.count(PageView.id)).group_by(PageView.form_source)
        result = await self.session.execute(stmt)
        return {source: count for source, count in result.all()}


# Type aliases for dependency injection
BadgePhotoRepo = Annotated[BadgePhotoRepository, Depends(BadgePhotoRepository)]
PageViewRepo = Annotated[PageViewRepository, Depends(PageViewRepository)]
