"""Shared utilities for CLI commands."""

import subprocess
from pathlib import Path

import typer
from rich.console import Console

# Initialize Rich console for colored output
console = Console()


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent.parent


def run_command(
    command: list[str],
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """Run a shell command, exiting the CLI with status 1 if it fails."""
    try:
        return subprocess.run(
            command,
            cwd=cwd or get_project_root(),
            check=check,
            text=True,
        )
    except subprocess.CalledProcessError as e:
        console.print(f"[red]Command failed: {' '.join(command)}[/red]")
        console.print(f"[red]Exit code: {e.returncode}[/red]")
        raise typer.Exit(1) from e
