"""Commands: leadbooth users / set-password - Inspect and manage accounts."""

import asyncio
from datetime import UTC, datetime

import typer
from rich.console import Console
from rich.table import Table

from leadbooth.commands.utils import DatabaseUrlOption, database_session
from leadbooth.core.auth.backend import hash_password
from leadbooth.core.constants import MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH
from leadbooth.modules.tenants.models import Tenant
from leadbooth.modules.users.models import User
from leadbooth.modules.users.repos import UserRepository


console = Console()


async def _list_users(
    database_url: str | None, tenant: str | None
) -> list[tuple[User, Tenant]]:
    async with database_session(database_url) as session:
        return await UserRepository(session).list_with_tenants(tenant)


def list_users(
    tenant: str | None = typer.Option(
        None, "--tenant", "-t", help="Only show users of this tenant subdomain."
    ),
    database_url: str | None = DatabaseUrlOption,
) -> None:
    """List users with their tenant, role and rep code."""
    rows = asyncio.run(_list_users(database_url, tenant))

    if not rows:
        console.print("[yellow]No users found.[/yellow]")
        return

    table = Table(title="Users", show_header=True)
    table.add_column("Tenant", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Email", no_wrap=True)
    table.add_column("Role", style="green", no_wrap=True)
    table.add_column("Rep code", no_wrap=True)
    table.add_column("Last login", no_wrap=True)

    for user, user_tenant in rows:
        table.add_row(
            user_tenant.subdomain,
            user.name,
            user.email,
            user.role,
            user.rep_code or "",
            user.last_login.strftime("%Y-%m-%d") if user.last_login else "never",
        )

    console.print()
    console.print(table)
    console.print()


async def _set_password(
    database_url: str | None, email: str, tenant: str | None, password: str
) -> bool:
    async with database_session(database_url) as session:
        repo = UserRepository(session)
        tenant_id = None
        if tenant:
            rows = await repo.list_with_tenants(tenant)
            if not rows:
                return False
            tenant_id = rows[0][1].id
        user = await repo.get_by_email(email, tenant_id=tenant_id)
        if user is None:
            return False
        user.password_hash = hash_password(password)
        user.updated_at = datetime.now(UTC)
        await repo.update(user)
        return True


def set_password(
    email: str = typer.Argument(..., help="E-mail of the user."),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="New password. Prompted for when omitted.",
    ),
    tenant: str | None = typer.Option(
        None, "--tenant", "-t", help="Tenant subdomain, when the e-mail exists in several tenants."
    ),
    database_url: str | None = DatabaseUrlOption,
) -> None:
    """Set a user's password."""
    if not MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH:
        console.print(
            f"[red]Error:[/red] Password must be {MIN_PASSWORD_LENGTH}-"
            f"{MAX_PASSWORD_LENGTH} characters."
        )
        raise typer.Exit(1)

    if not asyncio.run(_set_password(database_url, email, tenant, password)):
        console.print(f"[red]Error:[/red] No user with email '{email}'.")
        raise typer.Exit(1)

    console.print(f"[green]Password updated for {email}.[/green]")
