"""Database layer - session management, base models, and mixins."""

from leadbooth.core.database.base import (
    Base,
    IntegerIDMixin,
    TenantMixin,
    TimestampMixin,
    UUIDMixin,
)
from leadbooth.core.database.session import (
    async_engine,
    async_session_factory,
    build_engine,
    build_session_factory,
    get_db,
)


__all__ = [
    "Base",
    "IntegerIDMixin",
    "TenantMixin",
    "TimestampMixin",
    "UUIDMixin",
    "async_engine",
    "async_session_factory",
    "build_engine",
    "build_session_factory",
    "get_db",
]
