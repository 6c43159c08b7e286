"""Shared helpers for CLI commands."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import typer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from leadbooth.config import settings, to_async_url
from leadbooth.core.database import Base, build_engine, build_session_factory
from leadbooth.modules import import_models


DatabaseUrlOption = typer.Option(
    None,
    "--database-url",
    envvar="DATABASE_URL",
    help="Database URL. Defaults to the configured DATABASE_URL.",
)


def resolve_database_url(database_url: str | None) -> str:
    """Pick the async URL for a command run."""
    return to_async_url(database_url or settings.database_url)


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables from the ORM metadata if they are missing."""
    import_models()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def database_session(
    database_url: str | None,
    with_schema: bool = False,
) -> AsyncGenerator[AsyncSession, None]:
    """Open a session on a dedicated engine for one command run.

    The session is committed on success and rolled back on error; the
    engine is disposed either way.

    Args:
        database_url: URL override, or None for the configured URL
        with_schema: Create missing tables before yielding
    """
    import_models()
    engine = build_engine(resolve_database_url(database_url))
    try:
        if with_schema:
            await create_schema(engine)
        session_factory = build_session_factory(engine)
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
    finally:
        await engine.dispose()
