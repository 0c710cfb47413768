"""Schema creation and table maintenance for the books database."""

from loguru import logger
from sqlalchemy import delete, text
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from src.book_manager.entities.book import BookTable


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables that do not exist yet."""
        SQLModel.metadata.create_all(self._engine, tables=[BookTable.__table__])
        logger.info("Database initialized with tables.")

    def clear_books(self, reset_sequence: bool = False) -> int:
        """Delete every book and return how many rows were removed.

        With ``reset_sequence`` the id numbering restarts at 1; otherwise new
        books keep receiving ids above every id handed out before.
        """
        with self._engine.begin() as connection:
            result = connection.execute(delete(BookTable))
            if reset_sequence:
                self._reset_sequence(connection)
        logger.info(
            "Removed {} books (sequence reset: {})", result.rowcount, reset_sequence
        )
        return result.rowcount

    def _reset_sequence(self, connection) -> None:
        dialect = connection.dialect.name
        table = BookTable.__tablename__
        if dialect == "postgresql":
            connection.execute(text(f"ALTER SEQUENCE {table}_id_seq RESTART WITH 1"))
        elif dialect == "sqlite":
            connection.execute(
                text("DELETE FROM sqlite_sequence WHERE name = :name"),
                {"name": table},
            )
        else:
            raise NotImplementedError(f"Sequence reset is not supported on {dialect}")
