"""Catalog inspection commands."""

import typer
from rich.markup import escape
from rich.table import Table
from sqlalchemy.exc import OperationalError

from src.app.core.services import BookService, DbSessionService
from src.app.entities.service.book import Book, BookRepository

from .utils import console

book_app = typer.Typer(help="Book catalog commands")


def _database_unavailable(error: OperationalError) -> typer.Exit:
    console.print(f"[red]Database query failed: {escape(str(error.orig))}[/red]")
    console.print("[red]Run 'library-dev dev init-db' first[/red]")
    return typer.Exit(1)


def _render(books: list[Book], title: str) -> None:
    if not books:
        console.print("[yellow]No books found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("ISBN", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Author")
    table.add_column("Genre")
    for book in books:
        table.add_row(str(book.id), str(book.isbn), book.name, book.author, book.genre)
    console.print(table)


@book_app.command(name="list")
def list_books(
    author: str | None = typer.Option(None, help="Only books by this author"),
    genre: str | None = typer.Option(None, help="Only books of this genre"),
) -> None:
    """Print the catalog as a table."""
    if author and genre:
        console.print("[red]Use either --author or --genre, not both[/red]")
        raise typer.Exit(1)

    database_service = DbSessionService()
    try:
        with database_service.session_scope() as session:
            service = BookService(BookRepository(session))
            if author:
                books = service.find_by_author(author.upper())
            elif genre:
                books = service.find_by_genre(genre.upper())
            else:
                books = service.find_all_books()
    except OperationalError as e:
        raise _database_unavailable(e) from e
    finally:
        database_service.dispose()

    _render(books, "Library catalog")


@book_app.command(name="show")
def show_book(book_id: int = typer.Argument(..., help="Id of the book")) -> None:
    """Print a single book."""
    database_service = DbSessionService()
    try:
        with database_service.session_scope() as session:
            book = BookService(BookRepository(session)).find_by_id(book_id)
    except OperationalError as e:
        raise _database_unavailable(e) from e
    finally:
        database_service.dispose()

    if book is None:
        console.print(f"[red]Book {book_id} not found[/red]")
        raise typer.Exit(1)
    console.print(str(book))
