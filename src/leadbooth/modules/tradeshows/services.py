"""Tradeshow service for business logic."""

from datetime import UTC, datetime
from typing import Annotated

import structlog
from fastapi import Depends

from leadbooth.core.auth.schemas import SessionUser
from leadbooth.core.errors import BadRequestError, ConflictError, NotFoundError
from leadbooth.modules.tradeshows.models import Tradeshow, TradeshowTag
from leadbooth.modules.tradeshows.repos import TradeshowRepo
from leadbooth.modules.tradeshows.schemas import (
    SubmissionSummary,
    TagSchema,
    ToggleActiveResponse,
    TradeshowCreate,
    TradeshowDetail,
    TradeshowPublic,
    TradeshowSummary,
    TradeshowUpdate,
)


logger = structlog.get_logger()

ACTIVATED_MESSAGE = "Tradeshow activated"
ARCHIVED_MESSAGE = "Tradeshow archived"


def _not_found(identifier: int | str) -> NotFoundError:
    return NotFoundError(
        "Tradeshow not found",
        resource="tradeshow",
        resource_id=str(identifier),
    )


class TradeshowService:
    """Service for tradeshow reads and admin changes.

    Handles business logic on top of the tradeshow repository.
    """

    def __init__(self, repo: TradeshowRepo) -> None:
        self.repo = repo

    async def get_by_slug(self, slug: str) -> Tradeshow:
        """Get a tradeshow for the public lead form.

        Raises:
            NotFoundError: If no tradeshow has the slug
        """
        tradeshow = await self.repo.get_by_slug(slug)
        if not tradeshow:
            raise _not_found(slug)
        return tradeshow

    async def get_detail(self, tradeshow_id: int) -> TradeshowDetail:
        """Get a tradeshow with its creator, tags and submissions.

        Args:
            tradeshow_id: The tradeshow's ID

        Returns:
            The aggregated tradeshow

        Raises:
            NotFoundError: If the tradeshow doesn't exist
        """
        tradeshow = await self.repo.get_by_id(tradeshow_id)
        if not tradeshow:
            raise _not_found(tradeshow_id)

        tags = await self.repo.get_tags([tradeshow.id])
        submissions = await self.repo.list_submissions(tradeshow.id)

        return TradeshowDetail(
            **TradeshowPublic.model_validate(tradeshow).model_dump(),
            updated_at=tradeshow.updated_at,
            created_by=tradeshow.created_by,
            created_by_name=await self.repo.get_creator_name(tradeshow),
            submission_count=await self.repo.count_submissions(tradeshow.id),
            tags=[TagSchema.model_validate(tag) for tag in tags.get(tradeshow.id, [])],
            submissions=[SubmissionSummary(**row) for row in submissions],
        )

    async def list_for_session(self, session: SessionUser) -> list[TradeshowSummary]:
        """List the tradeshows of the caller's tenant.

        Admins see every submission counted; reps see only their own.

        Args:
            session: The caller's session

        Returns:
            Tradeshows with tags and submission counts, newest first
        """
        rep_id = None if session.is_admin else session.id
        rows = await self.repo.list_for_tenant(session.tenant_id, rep_id=rep_id)
        tags = await self.repo.get_tags([tradeshow.id for tradeshow, _ in rows])

        return [
            TradeshowSummary(
                **TradeshowPublic.model_validate(tradeshow).model_dump(),
                submission_count=count,
                tags=[TagSchema.model_validate(tag) for tag in tags.get(tradeshow.id, [])],
            )
            for tradeshow, count in rows
        ]

    async def create(self, data: TradeshowCreate, admin: SessionUser) -> Tradeshow:
        """Create a tradeshow owned by the admin's tenant.

        Args:
            data: Tradeshow details
            admin: The creating admin

        Returns:
            The created tradeshow

        Raises:
            ConflictError: If the slug is taken
        """
        if await self.repo.get_by_slug(data.slug):
            raise ConflictError(
                "A tradeshow with this slug already exists",
                error_code="slug_exists",
            )

        tradeshow = Tradeshow(
            **data.model_dump(exclude={"tags"}),
            is_active=True,
            created_by=admin.id,
        )
        tags = [TradeshowTag(tag_name=tag.tag_name, tag_value=tag.tag_value) for tag in data.tags]
        tradeshow = await self.repo.create(tradeshow, tags)

        logger.info(
            "tradeshow_created",
            tradeshow_id=tradeshow.id,
            slug=tradeshow.slug,
            admin_id=admin.id,
        )
        return tradeshow

    async def update(
        self, tradeshow_id: int, data: TradeshowUpdate, admin: SessionUser
    ) -> Tradeshow:
        """Apply a partial update to a tradeshow of the admin's tenant.

        Args:
            tradeshow_id: The tradeshow's ID
            data: Fields to change; unset fields are left alone
            admin: The admin performing the update

        Returns:
            The updated tradeshow

        Raises:
            BadRequestError: If nothing was sent or the dates end up reversed
            NotFoundError: If the tradeshow doesn't exist in the admin's tenant
        """
        changes = data.model_dump(exclude_unset=True)
        if not changes:
            raise BadRequestError("No updates provided")

        tradeshow = await self.repo.get_for_tenant(tradeshow_id, admin.tenant_id)
        if not tradeshow:
            raise _not_found(tradeshow_id)

        start_date = changes.get("start_date", tradeshow.start_date)
        end_date = changes.get("end_date", tradeshow.end_date)
        if start_date and end_date and end_date < start_date:
            raise BadRequestError("end_date must not be before start_date")

        for field, value in changes.items():
            setattr(tradeshow, field, value)
        tradeshow.updated_at = datetime.now(UTC)
        tradeshow = await self.repo.update(tradeshow)

        logger.info(
            "tradeshow_updated",
            tradeshow_id=tradeshow.id,
            fields=sorted(changes),
            admin_id=admin.id,
        )
        return tradeshow

    async def toggle_active(self, tradeshow_id: int, admin: SessionUser) -> ToggleActiveResponse:
        """Flip a tradeshow between active and archived.

        The stored flag is read and its negation written back; concurrent
        toggles are not serialised and the last write wins.

        Args:
            tradeshow_id: The tradeshow's ID
            admin: The admin performing the toggle

        Returns:
            The new state and a human-readable message

        Raises:
            NotFoundError: If the tradeshow doesn't exist
        """
        tradeshow = await self.repo.get_by_id(tradeshow_id)
        if not tradeshow:
            raise _not_found(tradeshow_id)

        previous = tradeshow.is_active
        tradeshow.is_active = not previous
        tradeshow.updated_at = datetime.now(UTC)
        tradeshow = await self.repo.update(tradeshow)

        logger.info(
            "tradeshow_status_changed",
            tradeshow_id=tradeshow.id,
            tradeshow_name=tradeshow.name,
            previous_is_active=previous,
            is_active=tradeshow.is_active,
            admin_id=admin.id,
            admin_email=admin.email,
        )

        return ToggleActiveResponse(
            message=ACTIVATED_MESSAGE if tradeshow.is_active else ARCHIVED_MESSAGE,
            is_active=tradeshow.is_active,
        )


# Type alias for dependency injection
TradeshowSvc = Annotated[TradeshowService, Depends(TradeshowService)]
