"""Entity package: Book."""

from .entity import MAX_BIGINT, Book, BookPayload
from .repository import BookRepository
from .table import BookTable

__all__ = ["MAX_BIGINT", "Book", "BookPayload", "BookRepository", "BookTable"]
