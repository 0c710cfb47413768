"""Book database table model."""

from sqlmodel import Field, SQLModel


class BookTable(SQLModel, table=True):
    """Database persistence model for books.

    This represents how the Book entity is stored in the database.
    AUTOINCREMENT keeps SQLite from reusing ids of deleted rows, matching
    the sequence-backed SERIAL column on PostgreSQL.
    """

    __tablename__ = "books"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    title: str
    author: str
    publisher: str
    date: str
    rating: int = Field(default=0, sa_column_kwargs={"server_default": "0"})
    status: str
