"""Request logging middleware.

Logs every HTTP request and its outcome with structlog, along with
the tenant and session context resolved by the earlier middleware.
"""

import time
from typing import Any

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint


logger = structlog.get_logger()

DEFAULT_EXCLUDED_PATHS = ("/health/live", "/health/ready", "/docs", "/redoc", "/openapi.json")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs HTTP requests and responses.

    Completion lines carry the status code, the duration, and the
    request, tenant and user identifiers when known. The log level
    follows the status class (info, warning for 4xx, error for 5xx).
    """

    def __init__(self, app: Any, exclude_paths: list[str] | None = None) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or list(DEFAULT_EXCLUDED_PATHS)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request start and completion around the handler."""
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)

        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        logger.info(
            "request_started",
            method=method,
            path=path,
            query=str(request.url.query) or None,
            client_ip=get_client_ip(request),
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "request_failed",
                method=method,
                path=path,
                duration_ms=_elapsed_ms(start_time),
                error=str(exc),
            )
            raise

        completion: dict[str, Any] = {
            "method": method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": _elapsed_ms(start_time),
        }
        for key in ("request_id", "tenant_subdomain", "tenant_id", "user_id"):
            value = getattr(request.state, key, None)
            if value is not None:
                completion[key] = str(value)

        if response.status_code >= 500:
            logger.error("request_completed", **completion)
        elif response.status_code >= 400:
            logger.warning("request_completed", **completion)
        else:
            logger.info("request_completed", **completion)

        return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


def get_client_ip(request: Request, default: str | None = None) -> str | None:
    """Extract the real client IP from a request.

    Checks X-Forwarded-For (first hop), then X-Real-IP, then the
    socket peer.

    Args:
        request: The incoming request
        default: Value returned when no address is available

    Returns:
        The client IP address or ``default``
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return default
