"""Entity package: Book."""

from .entity import SQL_INT_MAX, SQL_INT_MIN, Book, BookCreate, BookUpdate
from .repository import BookRepository
from .table import BookTable

__all__ = [
    "Book",
    "BookCreate",
    "BookUpdate",
    "BookRepository",
    "BookTable",
    "SQL_INT_MAX",
    "SQL_INT_MIN",
]
