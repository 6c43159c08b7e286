"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from leadbooth.core.constants import MAX_DB_ID
from leadbooth.core.database import get_db


# Type alias for database session dependency
DBSession = Annotated[AsyncSession, Depends(get_db)]

# Integer path id that fits the store's primary key column
ResourceId = Annotated[int, Path(ge=1, le=MAX_DB_ID)]
