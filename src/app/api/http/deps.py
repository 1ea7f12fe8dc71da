"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.app.api.http.app_data import ApplicationDependencies
from src.app.core.services import BookService
from src.app.entities.service.book import BookRepository


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a request-scoped database session."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_book_repository(session: Session = Depends(get_db_session)) -> BookRepository:
    return BookRepository(session)


def get_book_service(
    repository: BookRepository = Depends(get_book_repository),
) -> BookService:
    """Wire the book service to a repository bound to this request's session."""
    return BookService(repository)
