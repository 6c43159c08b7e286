"""Role-based dashboard redirect."""

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from leadbooth.core.auth.dependencies import OptionalSession
from leadbooth.core.auth.schemas import SessionUser
from leadbooth.core.roles import UserRole


ADMIN_DASHBOARD_PATH = "/dashboard/admin"
REP_DASHBOARD_PATH = "/dashboard/rep"
LOGIN_PATH = "/login"

router = APIRouter(tags=["dashboard"])


def dashboard_destination(session: SessionUser | None) -> str:
    """Pick the dashboard a session lands on.

    Admins go to the admin dashboard, every other authenticated role
    to the rep dashboard, and anonymous callers to the login page.
    """
    if session is None:
        return LOGIN_PATH
    if session.role == UserRole.ADMIN:
        return ADMIN_DASHBOARD_PATH
    return REP_DASHBOARD_PATH


@router.get(
    "/dashboard",
    summary="Dashboard redirect",
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    response_class=RedirectResponse,
)
async def dashboard(session: OptionalSession) -> RedirectResponse:
    """Redirect to the dashboard for the caller's role."""
    return RedirectResponse(
        dashboard_destination(session),
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    )
