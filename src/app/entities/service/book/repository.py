"""Book repository for data access operations."""

from collections.abc import Sequence

from loguru import logger
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from src.app.core.exceptions import BookNotFoundError, DuplicateIsbnError

from .entity import Book
from .table import BookTable


class BookRepository:
    """Data-access layer for books.

    Every write commits its own transaction. Text lookups compare against the
    upper-cased stored value, so callers may pass names in any case.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, book: Book) -> Book:
        """Insert `book` when it has no id, otherwise overwrite its row."""
        if book.id is None:
            row = BookTable(**book.model_dump(exclude={"id"}))
            event = "book.created"
        else:
            row = self._session.get(BookTable, book.id)
            if row is None:
                raise BookNotFoundError(book.id)
            row.isbn = book.isbn
            row.name = book.name
            row.author = book.author
            row.genre = book.genre
            event = "book.updated"

        self._session.add(row)
        try:
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            logger.warning("Rejected write of duplicate ISBN {}", book.isbn)
            raise DuplicateIsbnError(book.isbn) from e

        self._session.refresh(row)
        logger.bind(book_id=row.id, isbn=row.isbn).info(event)
        return self._to_entity(row)

    def find_by_id(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return self._to_entity(row)

    def find_all(self) -> list[Book]:
        statement = select(BookTable).order_by(col(BookTable.id))
        return self._to_entities(self._session.exec(statement).all())

    def find_by_isbn(self, isbn: int) -> Book | None:
        statement = select(BookTable).where(BookTable.isbn == isbn)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def find_by_name(self, name: str) -> Book | None:
        statement = (
            select(BookTable)
            .where(func.upper(BookTable.name) == name.upper())
            .order_by(col(BookTable.id))
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def find_by_author(self, author: str) -> list[Book]:
        statement = (
            select(BookTable)
            .where(func.upper(BookTable.author) == author.upper())
            .order_by(col(BookTable.id))
        )
        return self._to_entities(self._session.exec(statement).all())

    def find_by_genre(self, genre: str) -> list[Book]:
        statement = (
            select(BookTable)
            .where(func.upper(BookTable.genre) == genre.upper())
            .order_by(col(BookTable.id))
        )
        return self._to_entities(self._session.exec(statement).all())

    def delete_by_id(self, book_id: int) -> bool:
        """Delete the book if present. Returns whether a row was removed."""
        row = self._session.get(BookTable, book_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.commit()
        logger.bind(book_id=book_id).info("book.deleted")
        return True

    @staticmethod
    def _to_entity(row: BookTable) -> Book:
        return Book.model_validate(row, from_attributes=True)

    @classmethod
    def _to_entities(cls, rows: Sequence[BookTable]) -> list[Book]:
        return [cls._to_entity(row) for row in rows]
