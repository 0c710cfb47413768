from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from src.book_manager.core.services import DbManageService, DbSessionService
from src.book_manager.entities.book import Book, BookCreate, BookRepository

SAMPLE_BOOK = {
    "title": "test title",
    "author": "test author",
    "publisher": "test publisher",
    "date": "1/1/2019",
    "rating": 3,
    "status": "CheckedOut",
}


@pytest.fixture
def sample_book() -> dict:
    return dict(SAMPLE_BOOK)


@pytest.fixture
def engine() -> Generator[Engine]:
    """Create a fresh in-memory database with the books table for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from src.book_manager.entities.book import BookTable  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a database session on the per-test engine."""
    with Session(engine) as session:
        try:
            yield session
        finally:
            session.rollback()


@pytest.fixture
def book_repository(session: Session) -> BookRepository:
    return BookRepository(session)


@pytest.fixture
def database_service(engine: Engine) -> DbSessionService:
    return DbSessionService(engine)


@pytest.fixture
def manage_service(engine: Engine) -> DbManageService:
    return DbManageService(engine)


@pytest.fixture
def add_books(database_service: DbSessionService) -> Callable[[int], list[Book]]:
    """Insert ``count`` distinct books through a short-lived session and return them."""

    def _add_books(count: int = 1) -> list[Book]:
        with database_service.session_scope() as session:
            repository = BookRepository(session)
            return [
                repository.create(
                    BookCreate(
                        title=f"Book {i}",
                        author=f"Author {i}",
                        publisher=f"Publisher {i}",
                        date=f"{i + 1}/1/2000",
                        rating=(i + 1) * 10,
                        status="Available",
                    )
                )
                for i in range(max(count, 1))
            ]

    return _add_books
