"""Lead capture API routes.

Provides endpoints for:
- Submitting a lead with its badge photo
- Serving stored badge photos
- Tracking form views
- Funnel analytics
"""

from typing import Annotated

from fastapi import APIRouter, File, Form, Request, Response, UploadFile, status

from leadbooth.api.dependencies import ResourceId
from leadbooth.core.constants import BADGE_PHOTO_CACHE_CONTROL
from leadbooth.core.logging import get_client_ip
from leadbooth.modules.leads.schemas import (
    AnalyticsResponse,
    LeadSubmittedResponse,
    TrackViewRequest,
)
from leadbooth.modules.leads.services import LeadSvc
from leadbooth.modules.tenants.schemas import SuccessResponse


router = APIRouter(tags=["leads"])


def _content_disposition(filename: str) -> str:
    safe = filename.replace('"', "").replace("\r", "").replace("\n", "")
    return f'inline; filename="{safe}"'


@router.get(
    "/badge-photo/{photo_id}",
    summary="Get a badge photo",
    description="Serves the stored image bytes with long-lived caching.",
    responses={200: {"content": {"image/*": {}}}},
)
async def get_badge_photo(photo_id: ResourceId, service: LeadSvc) -> Response:
    """Serve a stored badge photo."""
    photo = await service.get_badge_photo(photo_id)
    return Response(
        content=photo.image_data,
        media_type=photo.mime_type,
        headers={
            "Content-Disposition": _content_disposition(photo.filename),
            "Cache-Control": BADGE_PHOTO_CACHE_CONTROL,
        },
    )


@router.post(
    "/leads",
    response_model=LeadSubmittedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a lead",
    description="Multipart submission of attendee details and a badge photo.",
)
async def submit_lead(
    service: LeadSvc,
    email: Annotated[str, Form(max_length=255)],
    name: Annotated[str, Form(max_length=255)],
    form_source: Annotated[str, Form(max_length=50)],
    badge_photo: Annotated[UploadFile, File()],
    tradeshow_slug: Annotated[str | None, Form()] = None,
    rep_code: Annotated[str | None, Form()] = None,
) -> LeadSubmittedResponse:
    """Store a lead and its badge photo."""
    image_data = await badge_photo.read()
    photo = await service.submit_lead(
        email=email,
        name=name,
        form_source=form_source,
        filename=badge_photo.filename or "badge",
        mime_type=badge_photo.content_type or "application/octet-stream",
        image_data=image_data,
        tradeshow_slug=tradeshow_slug or None,
        rep_code=rep_code or None,
    )
    return LeadSubmittedResponse(
        photo_id=photo.id,
        photo_url=f"/api/badge-photo/{photo.id}",
    )


@router.post(
    "/track-view",
    response_model=SuccessResponse,
    summary="Track a form view",
)
async def track_view(
    request: Request,
    service: LeadSvc,
    data: TrackViewRequest | None = None,
) -> SuccessResponse:
    """Record a view of a public form."""
    await service.track_view(
        form_source=data.form_source if data else None,
        user_agent=request.headers.get("User-Agent"),
        ip_address=get_client_ip(request),
    )
    return SuccessResponse()


@router.get(
    "/tradeshow-analytics",
    response_model=AnalyticsResponse,
    summary="Funnel analytics",
    description="Submission counts, latest submission and views per form source.",
)
async def tradeshow_analytics(service: LeadSvc) -> AnalyticsResponse:
    """Summarise submissions and views per form source."""
    return await service.analytics()
