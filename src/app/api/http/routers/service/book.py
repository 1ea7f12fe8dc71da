"""Book API router with CRUD operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from src.app.api.http.deps import get_book_service
from src.app.core.services import BookService
from src.app.entities.service.book import MAX_BIGINT, Book, BookPayload

router = APIRouter(prefix="/library/books", tags=["books"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Book not found"}}

# Path values must fit a signed 64-bit BIGINT column
BookId = Annotated[int, Path(ge=-MAX_BIGINT - 1, le=MAX_BIGINT)]
IsbnParam = Annotated[int, Path(ge=0, le=MAX_BIGINT)]


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.post("/create", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    payload: BookPayload,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Create a new book. The store assigns its id."""
    return service.create_book(payload)


@router.get("", response_model=list[Book])
def list_books(service: BookService = Depends(get_book_service)) -> list[Book]:
    """List all books."""
    return service.find_all_books()


@router.get("/id/{book_id}", response_model=Book, responses=NOT_FOUND)
def get_book(
    book_id: BookId,
    service: BookService = Depends(get_book_service),
) -> Book | Response:
    """Get a book by id."""
    book = service.find_by_id(book_id)
    if book is None:
        return _not_found()
    return book


@router.get("/isbn/{isbn}", response_model=Book, responses=NOT_FOUND)
def get_book_by_isbn(
    isbn: IsbnParam,
    service: BookService = Depends(get_book_service),
) -> Book | Response:
    """Get a book by ISBN."""
    book = service.find_by_isbn(isbn)
    if book is None:
        return _not_found()
    return book


@router.get("/name/{name}", response_model=Book, responses=NOT_FOUND)
def get_book_by_name(
    name: str,
    service: BookService = Depends(get_book_service),
) -> Book | Response:
    """Get a book by its exact name, ignoring case."""
    book = service.find_by_name(name.upper())
    if book is None:
        return _not_found()
    return book


@router.get("/author/{author}", response_model=list[Book])
def list_books_by_author(
    author: str,
    service: BookService = Depends(get_book_service),
) -> list[Book]:
    """List the books of an author. Empty when the author has none."""
    return service.find_by_author(author.upper())


@router.get("/genre/{genre}", response_model=list[Book])
def list_books_by_genre(
    genre: str,
    service: BookService = Depends(get_book_service),
) -> list[Book]:
    """List the books of a genre. Empty when the genre has none."""
    return service.find_by_genre(genre.upper())


@router.put("/update/{book_id}", response_model=Book, responses=NOT_FOUND)
def update_book(
    book_id: BookId,
    payload: BookPayload,
    service: BookService = Depends(get_book_service),
) -> Book | Response:
    """Overwrite isbn, name, author and genre of an existing book."""
    book = service.update_book(book_id, payload)
    if book is None:
        return _not_found()
    return book


@router.delete("/delete/{book_id}", responses=NOT_FOUND)
def delete_book(
    book_id: BookId,
    service: BookService = Depends(get_book_service),
) -> Response:
    """Delete a book by id."""
    if service.find_by_id(book_id) is None:
        return _not_found()
    service.delete_book(book_id)
    return Response(status_code=status.HTTP_200_OK)
