"""Domain exceptions raised by the library catalog."""

from typing import Any


class LibraryError(Exception):
    """Base class for errors the API reports with a specific status code."""

    status_code: int = 500

    def __init__(self, detail: str, **context: Any) -> None:
        self.detail = detail
        self.context = context
        super().__init__(detail)


class BookNotFoundError(LibraryError):
    """Raised when a book expected to exist has no row."""

    status_code = 404

    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book with id {book_id} not found", book_id=book_id)
        self.book_id = book_id


class DuplicateIsbnError(LibraryError):
    """Raised when a write would store a second book with the same ISBN."""

    status_code = 409

    def __init__(self, isbn: int) -> None:
        super().__init__(f"A book with ISBN {isbn} already exists", isbn=isbn)
        self.isbn = isbn
