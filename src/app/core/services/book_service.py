"""Business layer for the book catalog."""

from loguru import logger

from src.app.entities.service.book import Book, BookPayload, BookRepository


class BookService:
    """Catalog operations over a BookRepository.

    The service adds no rules of its own: callers are responsible for
    normalising lookup values before passing them in.
    """

    def __init__(self, repository: BookRepository) -> None:
        self._repository = repository

    def create_book(self, payload: BookPayload) -> Book:
        return self._repository.save(Book(**payload.model_dump()))

    def find_all_books(self) -> list[Book]:
        return self._repository.find_all()

    def find_by_id(self, book_id: int) -> Book | None:
        return self._repository.find_by_id(book_id)

    def find_by_isbn(self, isbn: int) -> Book | None:
        return self._repository.find_by_isbn(isbn)

    def find_by_name(self, name: str) -> Book | None:
        return self._repository.find_by_name(name)

    def find_by_author(self, author: str) -> list[Book]:
        return self._repository.find_by_author(author)

    def find_by_genre(self, genre: str) -> list[Book]:
        return self._repository.find_by_genre(genre)

    def update_book(self, book_id: int, payload: BookPayload) -> Book | None:
        """Overwrite every attribute but the id. Returns None when absent."""
        book = self._repository.find_by_id(book_id)
        if book is None:
            logger.debug("Update skipped, book {} does not exist", book_id)
            return None
        return self._repository.save(book.model_copy(update=payload.model_dump()))

    def delete_book(self, book_id: int) -> bool:
        return self._repository.delete_by_id(book_id)
