"""Tradeshow API routes."""

from fastapi import APIRouter, status

from leadbooth.api.dependencies import ResourceId
from leadbooth.core.permissions import AdminSession, AuthenticatedSession
from leadbooth.modules.tenants.schemas import MessageResponse
from leadbooth.modules.tradeshows.schemas import (
    ToggleActiveResponse,
    TradeshowCreate,
    TradeshowDetail,
    TradeshowPublic,
    TradeshowSummary,
    TradeshowUpdate,
)
from leadbooth.modules.tradeshows.services import TradeshowSvc


router = APIRouter(prefix="/tradeshows", tags=["tradeshows"])


@router.get(
    "",
    response_model=list[TradeshowSummary],
    summary="List tradeshows",
    description="Tradeshows of the caller's tenant with tags and submission counts.",
)
async def list_tradeshows(
    session: AuthenticatedSession,
    service: TradeshowSvc,
) -> list[TradeshowSummary]:
    """List tradeshows visible to the caller."""
    return await service.list_for_session(session)


@router.post(
    "",
    response_model=TradeshowPublic,
    status_code=status.HTTP_201_CREATED,
    summary="Create a tradeshow",
)
async def create_tradeshow(
    data: TradeshowCreate,
    admin: AdminSession,
    service: TradeshowSvc,
) -> TradeshowPublic:
    """Create a tradeshow."""
    tradeshow = await service.create(data, admin)
    return TradeshowPublic.model_validate(tradeshow)


@router.get(
    "/by-slug/{slug}",
    response_model=TradeshowPublic,
    summary="Get a tradeshow by slug",
    description="Public lookup used by the lead capture form.",
)
async def get_tradeshow_by_slug(slug: str, service: TradeshowSvc) -> TradeshowPublic:
    """Get a tradeshow by its slug."""
    tradeshow = await service.get_by_slug(slug)
    return TradeshowPublic.model_validate(tradeshow)


@router.get(
    "/{tradeshow_id}",
    response_model=TradeshowDetail,
    summary="Get a tradeshow",
    description="Tradeshow with creator name, tags and submissions, newest first.",
)
async def get_tradeshow(
    tradeshow_id: ResourceId,
    session: AuthenticatedSession,  # noqa: ARG001
    service: TradeshowSvc,
) -> TradeshowDetail:
    """Get a tradeshow with its aggregates."""
    return await service.get_detail(tradeshow_id)


@router.patch(
    "/{tradeshow_id}",
    response_model=MessageResponse,
    summary="Update a tradeshow",
    description="Partial update; only the fields sent are changed.",
)
async def update_tradeshow(
    tradeshow_id: ResourceId,
    data: TradeshowUpdate,
    admin: AdminSession,
    service: TradeshowSvc,
) -> MessageResponse:
    """Update a tradeshow of the caller's tenant."""
    await service.update(tradeshow_id, data, admin)
    return MessageResponse(message="Tradeshow updated successfully")


@router.post(
    "/{tradeshow_id}/toggle-active",
    response_model=ToggleActiveResponse,
    summary="Toggle active/archived",
)
async def toggle_tradeshow_active(
    tradeshow_id: ResourceId,
    admin: AdminSession,
    service: TradeshowSvc,
) -> ToggleActiveResponse:
    """Flip a tradeshow between active and archived."""
    return await service.toggle_active(tradeshow_id, admin)
