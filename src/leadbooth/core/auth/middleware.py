"""Tenant context and request tracing middleware.

This module provides middleware for:
- Detecting the tenant subdomain and session identity of a request
- Request tracing with unique IDs
"""

import uuid
from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from leadbooth.config import settings
from leadbooth.core.auth.backend import decode_session_token
from leadbooth.core.auth.dependencies import extract_session_token


if TYPE_CHECKING:
    from starlette.types import ASGIApp


logger = structlog.get_logger()

TENANT_SUBDOMAIN_HEADER = "X-Tenant-Subdomain"
TENANT_SUBDOMAIN_COOKIE = "tenant_subdomain"
IGNORED_SUBDOMAINS = frozenset({"www"})


def extract_subdomain(host: str | None, main_domain: str | None = None) -> str | None:
    """Extract the tenant subdomain from a Host header value.

    ``acme.localhost:3000`` and ``acme.example.com`` yield ``acme``;
    bare hosts, two-label domains and ``www`` yield None.

    Args:
        host: The Host header, optionally with a port
        main_domain: The deployment's main domain, which never counts as a tenant

    Returns:
        The lower-cased subdomain or None
    """
    if not host:
        return None

    hostname = host.split(":", 1)[0].strip().lower().rstrip(".")
    parts = [part for part in hostname.split(".") if part]
    main_domain = (main_domain or settings.main_domain).lower()

    if "localhost" in parts:
        candidate = parts[0] if len(parts) > 1 and parts[0] != "localhost" else None
    elif hostname == main_domain:
        candidate = None
    elif len(parts) >= 3:
        candidate = parts[0]
    else:
        candidate = None

    if candidate in IGNORED_SUBDOMAINS:
        return None
    return candidate


def detect_request_subdomain(request: Request) -> str | None:
    """Detect the tenant subdomain from header, host, then cookie."""
    explicit = request.headers.get(TENANT_SUBDOMAIN_HEADER)
    if explicit and explicit.strip():
        return explicit.strip().lower()

    from_host = extract_subdomain(request.headers.get("host"))
    if from_host:
        return from_host

    cookie = request.cookies.get(TENANT_SUBDOMAIN_COOKIE)
    if cookie and cookie.strip():
        return cookie.strip().lower()
    return None


class TenantContextMiddleware(BaseHTTPMiddleware):
    """Middleware that attaches tenant and session identifiers to requests.

    Sets ``request.state.tenant_subdomain`` and, when a valid session
    token is present, ``request.state.tenant_id`` and
    ``request.state.user_id``. The same values are bound to the
    structlog context. Authorization is not decided here.

    Attributes:
        exclude_paths: Paths that skip detection
    """

    def __init__(
        self,
        app: "ASGIApp",
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or [
            "/health",
            "/docs",
            "/redoc",
            "/openapi.json",
        ]

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Detect tenant context and continue the chain.

        Args:
            request: The incoming request
            call_next: The next middleware/handler

        Returns:
            The response from the handler
        """
        request.state.tenant_subdomain = None
        request.state.tenant_id = None
        request.state.user_id = None

        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)

        subdomain = detect_request_subdomain(request)
        if subdomain:
            request.state.tenant_subdomain = subdomain
            structlog.contextvars.bind_contextvars(tenant_subdomain=subdomain)

        token = extract_session_token(request)
        session = decode_session_token(token) if token else None
        if session:
            request.state.tenant_id = session.tenant_id
            request.state.user_id = session.id
            structlog.contextvars.bind_contextvars(
                tenant_id=session.tenant_id,
                user_id=session.id,
            )

        return await call_next(request)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware that adds a unique request ID to each request.

    The request ID is added to:
    - request.state.request_id
    - Response header X-Request-ID
    - Structlog context
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process the request and add request ID."""
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars(
                "request_id", "tenant_subdomain", "tenant_id", "user_id"
            )

        response.headers["X-Request-ID"] = request_id
        return response
