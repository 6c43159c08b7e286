"""Authentication API routes.

Provides endpoints for:
- Login with e-mail and password
- Reading the current session
- Logout
"""

from fastapi import APIRouter, Request, Response

from leadbooth.config import settings
from leadbooth.core.auth.schemas import LoginRequest, LoginResponse, LogoutResponse, SessionUser
from leadbooth.core.auth.service import AuthSvc
from leadbooth.core.permissions import AuthenticatedSession


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login with email and password",
    description=(
        "Authenticate and receive a session token. The token is also set as "
        "an HTTP-only cookie. Logins on a tenant subdomain are scoped to that tenant."
    ),
)
async def login(
    data: LoginRequest,
    service: AuthSvc,
    request: Request,
    response: Response,
) -> LoginResponse:
    """Login with e-mail and password."""
    result = await service.login(
        email=data.email,
        password=data.password,
        tenant_subdomain=getattr(request.state, "tenant_subdomain", None),
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=result.access_token,
        max_age=result.expires_in,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return result


@router.get(
    "/session",
    response_model=SessionUser,
    summary="Get current session",
)
async def get_session(session: AuthenticatedSession) -> SessionUser:
    """Get the current session identity."""
    return session


@router.post(
    "/logout",
    response_model=LogoutResponse,
    summary="Logout",
    description="Clears the session cookie. Tokens are self-contained and expire on their own.",
)
async def logout(response: Response) -> LogoutResponse:
    """Logout by clearing the session cookie."""
    response.delete_cookie(settings.session_cookie_name)
    return LogoutResponse()
