"""Command: leadbooth serve - Run the HTTP server."""

import typer
import uvicorn


def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind."),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    """Run the API with uvicorn."""
    uvicorn.run("leadbooth.main:app", host=host, port=port, reload=reload)
