"""Main leadbooth CLI application."""

import typer
from rich.console import Console

from leadbooth import __version__
from leadbooth.commands import seed, serve, users


console = Console()

app = typer.Typer(
    name="leadbooth",
    help="Manage the trade-show lead capture service.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command(name="seed")(seed.seed)
app.command(name="users")(users.list_users)
app.command(name="set-password")(users.set_password)
app.command(name="serve")(serve.serve)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """leadbooth CLI - Seed data, manage accounts and run the server."""
    if version:
        console.print(f"[bold cyan]leadbooth[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
