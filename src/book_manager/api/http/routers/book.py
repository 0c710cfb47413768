"""Book API router with CRUD operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from loguru import logger

from src.book_manager.api.http.deps import get_book_repository
from src.book_manager.core.exceptions import BadRequestError, BookNotFoundError
from src.book_manager.entities.book import (
    Book,
    BookCreate,
    BookRepository,
    BookUpdate,
    SQL_INT_MAX,
    SQL_INT_MIN,
)
from src.book_manager.runtime.context import get_config

router = APIRouter(tags=["books"])

# Ids outside the column range can never match a row and would overflow the driver
BookId = Annotated[
    int, Path(ge=SQL_INT_MIN, le=SQL_INT_MAX, description="Book identifier")
]


@router.get("/books", response_model=list[Book])
def list_books(
    start: int = Query(
        0, ge=0, le=SQL_INT_MAX, description="Number of books to skip"
    ),
    count: int | None = Query(None, ge=1, description="Maximum number of books"),
    repository: BookRepository = Depends(get_book_repository),
) -> list[Book]:
    """List books ordered by id; every book when ``count`` is omitted."""
    max_page_size = get_config().api.max_page_size
    if count is not None and count > max_page_size:
        raise BadRequestError(f"count must not exceed {max_page_size}")
    return repository.list(offset=start, limit=count)


@router.get("/book/{book_id}", response_model=Book)
def get_book(
    book_id: BookId,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Get a book by ID."""
    book = repository.get(book_id)
    if book is None:
        raise BookNotFoundError()
    return book


@router.post("/book", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    payload: BookCreate,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Create a new book; the id is assigned by the database."""
    return repository.create(payload)


@router.put("/book/{book_id}", response_model=Book)
def update_book(
    book_id: BookId,
    patch: BookUpdate,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Update a book with the fields present in the body.

    Omitted fields keep their stored values; the merged record replaces the row.
    """
    current = repository.get(book_id)
    if current is None:
        raise BookNotFoundError()
    return repository.update(current.merge(patch))


@router.delete("/book/{book_id}")
def delete_book(
    book_id: BookId,
    repository: BookRepository = Depends(get_book_repository),
) -> dict[str, str]:
    """Delete a book. Succeeds whether or not the book existed."""
    if not repository.delete(book_id):
        logger.info("Book {} did not exist; nothing deleted", book_id)
    return {"result": "success"}
