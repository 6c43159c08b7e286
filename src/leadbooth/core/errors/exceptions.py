"""Domain exceptions for the application.

These exceptions represent business-logic errors and are automatically
converted to flat ``{"error": message}`` JSON responses by the
exception handlers.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message returned to the client
        error_code: Machine-readable error code used in logs
        status_code: HTTP status code for the response
        details: Additional context, logged but never returned
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class BadRequestError(AppException):
    """Raised for missing or malformed client input.

    Example:
        raise BadRequestError("Subdomain parameter is required")
    """

    message = "Bad request"
    error_code = "bad_request"
    status_code = 400


class UnauthorizedError(AppException):
    """Raised when a session is missing or its role is insufficient.

    Both cases share the 401 status.

    Example:
        raise UnauthorizedError("Unauthorized", error_code="admin_required")
    """

    message = "Unauthorized"
    error_code = "unauthorized"
    status_code = 401


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    Example:
        raise NotFoundError("Tradeshow not found", resource="tradeshow", resource_id="7")
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ConflictError(AppException):
    """Raised when there's a conflict with existing data.

    Example:
        raise ConflictError("Email or rep code already exists")
    """

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 409


class InternalError(AppException):
    """Raised when the store fails and the route owns the client message.

    Example:
        raise InternalError("Failed to track view")
    """

    message = "Internal server error"
    error_code = "internal_error"
    status_code = 500
