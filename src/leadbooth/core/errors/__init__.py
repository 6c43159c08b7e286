"""Error handling module with flat JSON error bodies."""

from leadbooth.core.errors.exceptions import (
    AppException,
    BadRequestError,
    ConflictError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
)
from leadbooth.core.errors.handlers import (
    ErrorResponse,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    "BadRequestError",
    "ConflictError",
    # Handlers
    "ErrorResponse",
    "InternalError",
    "NotFoundError",
    "UnauthorizedError",
    "register_exception_handlers",
]
