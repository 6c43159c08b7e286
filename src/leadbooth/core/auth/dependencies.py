"""FastAPI dependencies for reading the session.

The session token is taken from the ``Authorization: Bearer`` header
or, for browser navigation, from the session cookie. Gating on the
session's role lives in ``leadbooth.core.permissions.gate``.
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.security.utils import get_authorization_scheme_param

from leadbooth.config import settings
from leadbooth.core.auth.backend import decode_session_token
from leadbooth.core.auth.schemas import SessionUser


# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


def extract_session_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = None,
) -> str | None:
    """Return the raw session token from the header or cookie, if any.

    Args:
        request: The incoming request
        credentials: Bearer credentials already parsed by ``bearer_scheme``;
            when omitted the ``Authorization`` header is parsed here

    Returns:
        The bearer token, else the session cookie, else None
    """
    if credentials is None:
        scheme, token = get_authorization_scheme_param(request.headers.get("Authorization"))
        if scheme.lower() == "bearer" and token:
            return token
    elif credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.session_cookie_name)


async def get_optional_session(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> SessionUser | None:
    """Get the current session if one is present and valid, None otherwise.

    Args:
        request: The incoming request
        credentials: Optional bearer token credentials

    Returns:
        SessionUser if authenticated, None otherwise
    """
    token = extract_session_token(request, credentials)
    if not token:
        return None
    return decode_session_token(token)


OptionalSession = Annotated[SessionUser | None, Depends(get_optional_session)]
