"""Data-access layer for books."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.book_manager.core.exceptions import BookNotFoundError, StorageError

from .entity import Book, BookCreate
from .table import BookTable


class BookRepository:
    """Data-access layer for books.

    Every operation issues a single statement against the ``books`` table.
    "No rows" on lookup is reported as ``None``; every other database
    failure is rolled back and re-raised as ``StorageError``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @contextmanager
    def _storage_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self._session.rollback()
            reason = str(getattr(exc, "orig", None) or exc)
            logger.error("Book {} failed: {}", action, reason)
            raise StorageError(reason) from exc

    def get(self, book_id: int) -> Book | None:
        with self._storage_errors("fetch"):
            row = self._session.exec(
                select(BookTable).where(BookTable.id == book_id)
            ).first()
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def create(self, data: BookCreate) -> Book:
        """Insert a new row; the database assigns the id."""
        row = BookTable(**data.model_dump())
        with self._storage_errors("create"):
            self._session.add(row)
            self._session.flush()
            book = Book.model_validate(row, from_attributes=True)
            self._session.commit()
        logger.info("Created book {}", book.id)
        return book

    def update(self, book: Book) -> Book:
        """Overwrite every column of the row matching ``book.id``.

        Raises:
            BookNotFoundError: no row has that id.
        """
        statement = (
            update(BookTable)
            .where(BookTable.id == book.id)
            .values(**book.model_dump(exclude={"id"}))
        )
        with self._storage_errors("update"):
            result = self._session.connection().execute(statement)
            if result.rowcount == 0:
                self._session.rollback()
                raise BookNotFoundError()
            self._session.commit()
        logger.info("Updated book {}", book.id)
        return book

    def delete(self, book_id: int) -> bool:
        """Remove the row matching ``book_id``; returns whether one existed."""
        statement = delete(BookTable).where(BookTable.id == book_id)
        with self._storage_errors("delete"):
            result = self._session.connection().execute(statement)
            self._session.commit()
        deleted = result.rowcount > 0
        if not deleted:
            logger.debug("Delete of book {} matched no rows", book_id)
        return deleted

    def list(self, offset: int = 0, limit: int | None = None) -> list[Book]:
        """Return books ordered by id, skipping ``offset`` rows and capped at ``limit``."""
        statement = select(BookTable).order_by(BookTable.id).offset(offset)
        if limit is not None:
            statement = statement.limit(limit)
        with self._storage_errors("list"):
            rows = self._session.exec(statement).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]
