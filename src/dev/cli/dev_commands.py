"""Development environment CLI commands."""

import sys

import typer
from rich.panel import Panel

from .utils import console, get_project_root, run_command

dev_app = typer.Typer(help="Development environment commands")


@dev_app.command(name="start-server")
def start_server(
    host: str = typer.Option("0.0.0.0", help="Host to bind the server to"),
    port: int = typer.Option(8000, help="Port to bind the server to"),
    reload: bool = typer.Option(True, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """Start the FastAPI development server."""
    console.print(
        Panel.fit(
            "[bold green]Starting Library Catalog API[/bold green]",
            border_style="green",
        )
    )

    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "src.app.api.http.app:app",
        "--host",
        host,
        "--port",
        str(port),
        "--log-level",
        log_level,
        "--no-access-log",
    ]
    if reload:
        cmd.extend(["--reload", "--reload-dir", "src"])

    console.print(f"[blue]Running:[/blue] {' '.join(cmd)}")
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    try:
        run_command(cmd, cwd=get_project_root())
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped by user[/yellow]")


@dev_app.command(name="init-db")
def init_db_command(
    drop: bool = typer.Option(False, "--drop", help="Drop existing tables first"),
) -> None:
    """Create the database tables."""
    from src.app.runtime.init_db import init_db

    if drop:
        typer.confirm("This deletes every book in the catalog. Continue?", abort=True)
    init_db(drop=drop)
    console.print("[green]Database tables are ready[/green]")
