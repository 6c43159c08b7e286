"""Pytest configuration and shared fixtures.

The environment is pinned before any application import so that the
module-level settings and engine point at SQLite.
"""

import os


os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "testing"
os.environ["SECRET_KEY"] = "test-secret-key-with-at-least-32-characters"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from leadbooth.core.auth.backend import create_session_token, hash_password  # noqa: E402
from leadbooth.core.database import Base, build_session_factory, get_db  # noqa: E402
from leadbooth.core.roles import UserRole  # noqa: E402
from leadbooth.main import create_app  # noqa: E402
from leadbooth.modules import import_models  # noqa: E402
from leadbooth.modules.tenants.models import Tenant  # noqa: E402
from leadbooth.modules.tradeshows.models import Tradeshow  # noqa: E402
from leadbooth.modules.users.models import User  # noqa: E402


import_models()

TEST_PASSWORD = "correct-horse-battery"
TEST_PASSWORD_HASH = hash_password(TEST_PASSWORD)


def session_headers(user: User, subdomain: str | None = None) -> dict[str, str]:
    """Build an Authorization header carrying a session for ``user``."""
    token = create_session_token(
        user_id=user.id,
        tenant_id=user.tenant_id,
        role=user.role,
        email=user.email,
        name=user.name,
        rep_code=user.rep_code,
        tenant_subdomain=subdomain,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with every table.

    Yields:
        Engine bound to the database
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session shared by the test body and the application."""
    session_factory = build_session_factory(engine)
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(db: AsyncSession) -> FastAPI:
    """Application whose requests run on the test session."""
    application = create_app()

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db
        await db.flush()

    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client calling the application in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as ac:
        yield ac


@pytest.fixture
async def acme(db: AsyncSession) -> Tenant:
    """Active tenant on the ``acme`` subdomain."""
    tenant = Tenant(
        name="Acme Events",
        slug="acme",
        subdomain="acme",
        primary_color="#E4572E",
        dark_color="#29335C",
        logo_url="https://cdn.acme.example.com/logo.png",
    )
    db.add(tenant)
    await db.flush()
    return tenant


@pytest.fixture
async def globex(db: AsyncSession) -> Tenant:
    """Second active tenant, used for isolation checks."""
    tenant = Tenant(name="Globex", slug="globex", subdomain="globex")
    db.add(tenant)
    await db.flush()
    return tenant


@pytest.fixture
async def admin_user(db: AsyncSession, acme: Tenant) -> User:
    """Admin of the acme tenant."""
    user = User(
        name="Ada Admin",
        email="admin@acme.example.com",
        password_hash=TEST_PASSWORD_HASH,
        role=UserRole.ADMIN.value,
        rep_code="ACME-ADMIN",
        tenant_id=acme.id,
    )
    db.add(user)
    await db.flush()
    return user


@pytest.fixture
async def rep_user(db: AsyncSession, acme: Tenant) -> User:
    """Rep of the acme tenant."""
    user = User(
        name="Riley Rep",
        email="riley@acme.example.com",
        password_hash=TEST_PASSWORD_HASH,
        role=UserRole.REP.value,
        rep_code="ACME-RILEY",
        tenant_id=acme.id,
    )
    db.add(user)
    await db.flush()
    return user


@pytest.fixture
def admin_headers(admin_user: User) -> dict[str, str]:
    return session_headers(admin_user, "acme")


@pytest.fixture
def rep_headers(rep_user: User) -> dict[str, str]:
    return session_headers(rep_user, "acme")


@pytest.fixture
async def tradeshow(db: AsyncSession, admin_user: User) -> Tradeshow:
    """Active tradeshow created by the acme admin."""
    show = Tradeshow(
        name="Spring Expo",
        slug="spring-expo",
        location="Hall A",
        default_country="United States",
        is_active=True,
        created_by=admin_user.id,
    )
    db.add(show)
    await db.flush()
    await db.refresh(show)
    return show
