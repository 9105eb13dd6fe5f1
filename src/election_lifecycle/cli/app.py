"""Typer CLI root application with serve command."""

import typer

from election_lifecycle.core.config import get_settings
from election_lifecycle.core.logging import setup_logging

app = typer.Typer(name="election-lifecycle", help="Election lifecycle status and insights CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir, component="cli", json_logs=settings.log_json)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "election_lifecycle.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_commands() -> None:
    """Register snapshot evaluation commands."""
    from election_lifecycle.cli.lifecycle_cmd import insights, stats, status

    app.command("status")(status)
    app.command("stats")(stats)
    app.command("insights")(insights)


_register_commands()
