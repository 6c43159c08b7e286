"""Command: leadbooth seed - Load development data."""

import asyncio
from datetime import date
from typing import Any

import typer
from rich.console import Console
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from leadbooth.commands.utils import DatabaseUrlOption, database_session
from leadbooth.core.auth.backend import hash_password
from leadbooth.core.roles import UserRole
from leadbooth.modules.tenants.models import Tenant
from leadbooth.modules.tradeshows.models import Tradeshow, TradeshowTag
from leadbooth.modules.users.models import User


console = Console()

SCENARIOS = ("default", "demo")
DEFAULT_PASSWORD = "changeme123"

ACME: dict[str, Any] = {
    "tenant": {
        "name": "Acme Events",
        "slug": "acme",
        "subdomain": "acme",
        "primary_color": "#E4572E",
        "dark_color": "#29335C",
        "company_email": "events@acme.example.com",
    },
    "users": [
        {"name": "Ada Admin", "email": "admin@acme.example.com", "role": UserRole.ADMIN, "rep_code": "ACME-ADMIN"},
        {"name": "Riley Rep", "email": "riley@acme.example.com", "role": UserRole.REP, "rep_code": "ACME-RILEY"},
    ],
    "tradeshows": [
        {
            "name": "Spring Expo",
            "slug": "spring-expo",
            "location": "Hall A",
            "start_date": date(2026, 4, 14),
            "end_date": date(2026, 4, 16),
            "default_country": "United States",
            "is_active": True,
            "tags": {"region": "NA", "booth": "A12"},
        },
    ],
}

DEMO_TENANTS: list[dict[str, Any]] = [
    {
        "tenant": {
            "name": "Globex Industries",
            "slug": "globex",
            "subdomain": "globex",
            "primary_color": "#3A86FF",
            "dark_color": "#1B1B3A",
        },
        "users": [
            {"name": "Gus Admin", "email": "admin@globex.example.com", "role": UserRole.ADMIN, "rep_code": None},
            {"name": "Sam Rep", "email": "sam@globex.example.com", "role": UserRole.REP, "rep_code": "GLOBEX-SAM"},
        ],
        "tradeshows": [
            {
                "name": "Industrial Summit",
                "slug": "industrial-summit",
                "location": "Messe Hall 3",
                "start_date": date(2026, 9, 1),
                "end_date": date(2026, 9, 3),
                "default_country": "Germany",
                "is_active": True,
                "tags": {"region": "EU"},
            },
            {
                "name": "Winter Fair",
                "slug": "winter-fair",
                "location": None,
                "start_date": date(2025, 12, 2),
                "end_date": date(2025, 12, 4),
                "default_country": None,
                "is_active": False,
                "tags": {},
            },
        ],
    },
    {
        "tenant": {
            "name": "Initech",
            "slug": "initech",
            "subdomain": "initech",
            "is_active": False,
        },
        "users": [],
        "tradeshows": [],
    },
]


async def _seed_tenant(session: AsyncSession, data: dict[str, Any]) -> list[str]:
    created: list[str] = []

    result = await session.execute(select(Tenant).where(Tenant.slug == data["tenant"]["slug"]))
    tenant = result.scalar_one_or_none()
    if tenant is None:
        tenant = Tenant(**data["tenant"])
        session.add(tenant)
        await session.flush()
        created.append(f"tenant {tenant.subdomain}")

    admin_id = None
    for user_data in data["users"]:
        result = await session.execute(
            select(User).where(User.tenant_id == tenant.id, User.email == user_data["email"])
        )
        user = result.scalar_one_or_none()
        if user is None:
            user = User(
                **{**user_data, "role": user_data["role"].value},
                password_hash=hash_password(DEFAULT_PASSWORD),
                tenant_id=tenant.id,
            )
            session.add(user)
            await session.flush()
            created.append(f"{user.role} {user.email}")
        if user.role == UserRole.ADMIN and admin_id is None:
            admin_id = user.id

    for show_data in data["tradeshows"]:
        result = await session.execute(select(Tradeshow).where(Tradeshow.slug == show_data["slug"]))
        if result.scalar_one_or_none() is not None:
            continue
        tags = show_data["tags"]
        tradeshow = Tradeshow(
            **{key: value for key, value in show_data.items() if key != "tags"},
            created_by=admin_id,
        )
        session.add(tradeshow)
        await session.flush()
        for name, value in tags.items():
            session.add(TradeshowTag(tradeshow_id=tradeshow.id, tag_name=name, tag_value=value))
        created.append(f"tradeshow {tradeshow.slug}")

    return created


async def seed_database(session: AsyncSession, scenario: str = "default") -> list[str]:
    """Load a seed scenario. Existing rows are left untouched.

    Args:
        session: Session to write with
        scenario: ``default`` (one tenant) or ``demo`` (several tenants)

    Returns:
        Descriptions of the rows created

    Raises:
        ValueError: If the scenario is unknown
    """
    if scenario not in SCENARIOS:
        raise ValueError(f"Unknown scenario: {scenario}")

    created = await _seed_tenant(session, ACME)
    if scenario == "demo":
        for data in DEMO_TENANTS:
            created.extend(await _seed_tenant(session, data))
    await session.flush()
    return created


async def _run(scenario: str, database_url: str | None, create_schema: bool) -> list[str]:
    async with database_session(database_url, with_schema=create_schema) as session:
        return await seed_database(session, scenario)


def seed(
    scenario: str = typer.Option(
        "default", "--scenario", "-s", help="Seed scenario to run (default, demo)."
    ),
    create_schema: bool = typer.Option(
        False,
        "--create-schema",
        help="Create missing tables from the models first. Intended for local SQLite.",
    ),
    database_url: str | None = DatabaseUrlOption,
) -> None:
    """Load development data.

    Running a scenario twice is safe; rows that already exist are kept.
    """
    if scenario not in SCENARIOS:
        console.print(f"[red]Error:[/red] Unknown scenario '{scenario}'.")
        console.print(f"Available scenarios: {', '.join(SCENARIOS)}")
        raise typer.Exit(1)

    created = asyncio.run(_run(scenario, database_url, create_schema))

    if not created:
        console.print("[yellow]Nothing to do, seed data already present.[/yellow]")
        return

    for item in created:
        console.print(f"  [green]+[/green] {item}")
    console.print(
        f"\n[bold green]Seeded {len(created)} rows.[/bold green] "
        f"Seeded users log in with password [cyan]{DEFAULT_PASSWORD}[/cyan]."
    )
