"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.book_manager.api.http.app_data import ApplicationDependencies
from src.book_manager.core.services import DbSessionService
from src.book_manager.entities.book import BookRepository


def get_database_service(request: Request) -> DbSessionService:
    """Get the shared database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Borrow a session from the shared engine for the duration of a request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_book_repository(db: Session = Depends(get_db_session)) -> BookRepository:
    """Get a book repository bound to the request's session."""
    return BookRepository(db)
