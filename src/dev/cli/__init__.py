"""Command-line interface for the library catalog."""

import typer

from .book_commands import book_app
from .dev_commands import dev_app

app = typer.Typer(
    name="library-dev",
    help="Library catalog CLI - manage the development server, database and books",
    rich_markup_mode="rich",
)

app.add_typer(dev_app, name="dev")
app.add_typer(book_app, name="books")

__all__ = ["app"]
