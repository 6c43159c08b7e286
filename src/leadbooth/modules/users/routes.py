"""Rep and account settings API routes."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from leadbooth.core.constants import MAX_DB_ID
from leadbooth.core.errors import BadRequestError
from leadbooth.core.permissions import AdminSession, AuthenticatedSession
from leadbooth.modules.tenants.schemas import MessageResponse
from leadbooth.modules.users.schemas import (
    RepCreate,
    RepLookupResponse,
    RepResponse,
    RepUpdate,
    SettingsUpdate,
)
from leadbooth.modules.users.services import UserSvc


router = APIRouter(tags=["reps"])


@router.get(
    "/reps/by-code/{rep_code}",
    response_model=RepLookupResponse,
    summary="Look up a rep by code",
    description="Resolves a rep code from a form link to the rep or admin holding it.",
)
async def get_rep_by_code(rep_code: str, service: UserSvc) -> RepLookupResponse:
    """Get the rep holding a rep code."""
    user = await service.find_rep_by_code(rep_code)
    return RepLookupResponse.model_validate(user)


@router.get(
    "/reps",
    response_model=list[RepResponse],
    summary="List reps",
    description="Lists the reps of the admin's tenant ordered by name.",
)
async def list_reps(admin: AdminSession, service: UserSvc) -> list[RepResponse]:
    """List reps in the caller's tenant."""
    reps = await service.list_reps(admin)
    return [RepResponse.model_validate(rep) for rep in reps]


@router.post(
    "/reps",
    response_model=RepResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a rep",
)
async def create_rep(data: RepCreate, admin: AdminSession, service: UserSvc) -> RepResponse:
    """Create a rep in the caller's tenant."""
    user = await service.create_rep(data, admin)
    return RepResponse.model_validate(user)


@router.put(
    "/reps",
    response_model=RepResponse,
    summary="Update a rep",
    description="Replaces a rep's e-mail, name and code; the password only when sent.",
)
async def update_rep(data: RepUpdate, admin: AdminSession, service: UserSvc) -> RepResponse:
    """Update a rep in the caller's tenant."""
    user = await service.update_rep(data, admin)
    return RepResponse.model_validate(user)


@router.delete(
    "/reps",
    response_model=MessageResponse,
    summary="Delete a rep",
    description="Refused while leads are attributed to the rep.",
)
async def delete_rep(
    admin: AdminSession,
    service: UserSvc,
    rep_id: Annotated[int | None, Query(alias="id", ge=1, le=MAX_DB_ID)] = None,
) -> MessageResponse:
    """Delete a rep in the caller's tenant."""
    if rep_id is None:
        raise BadRequestError("Missing rep ID")
    await service.delete_rep(rep_id, admin)
    return MessageResponse(message="Rep deleted successfully")


@router.put(
    "/settings",
    response_model=MessageResponse,
    tags=["settings"],
    summary="Update account settings",
    description="Changes the caller's name or password.",
)
async def update_settings(
    data: SettingsUpdate,
    session: AuthenticatedSession,
    service: UserSvc,
) -> MessageResponse:
    """Update the caller's own account."""
    await service.update_settings(data, session)
    return MessageResponse(message="Settings updated successfully")
