"""Entity: Book."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from src.app.entities.core._base import Entity

# Upper bound of a signed 64-bit BIGINT column
MAX_BIGINT = 2**63 - 1

Isbn = Annotated[int, Field(ge=0, le=MAX_BIGINT)]

_BLANK_MESSAGES = {
    "name": "Provide the book name.",
    "author": "Provide the book author.",
    "genre": "Provide the book genre.",
}


class BookFields(BaseModel):
    isbn: Isbn = Field(description="International Standard Book Number")
    name: str = Field(description="Title of the book")
    author: str = Field(description="Author of the book")
    genre: str = Field(description="Literary genre")


class Book(BookFields, Entity):
    """Book entity representing a catalog item.

    The identifier is left unset until the book is first persisted.
    """

    def __str__(self) -> str:
        return (
            f"ID: {self.id}\n"
            f"ISBN: {self.isbn}\n"
            f"Name: {self.name}\n"
            f"Author: {self.author}\n"
            f"Genre: {self.genre}"
        )


class BookPayload(BookFields):
    """Request body accepted when creating or updating a book.

    Text fields are trimmed and must not be blank. Any `id` sent by the
    client is ignored.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "isbn": 9780451524935,
                "name": "1984",
                "author": "George Orwell",
                "genre": "Dystopian",
            }
        },
    )

    @field_validator("name", "author", "genre")
    @classmethod
    def not_blank(cls, value: str, info: ValidationInfo) -> str:
        value = value.strip()
        if not value:
            raise ValueError(_BLANK_MESSAGES[info.field_name])
        return value
