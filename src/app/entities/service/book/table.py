"""Book database table model."""

import sqlalchemy as sa
from sqlmodel import Field

from src.app.entities.core._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    This represents how the Book entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "book"

    # 13-digit ISBNs overflow a 32-bit INTEGER on most backends
    isbn: int = Field(sa_column=sa.Column(sa.BigInteger, unique=True, nullable=False))
    name: str
    author: str
    genre: str
