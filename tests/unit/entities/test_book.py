"""Tests for the Book entity, its request schemas and its table model."""

import pytest
from pydantic import ValidationError

from src.book_manager.entities.book import (
    SQL_INT_MAX,
    SQL_INT_MIN,
    Book,
    BookCreate,
    BookTable,
    BookUpdate,
)


@pytest.fixture
def stored_book() -> Book:
    return Book(
        id=1,
        title="Dune",
        author="Frank Herbert",
        publisher="Chilton",
        date="1/8/1965",
        rating=5,
        status="CheckedOut",
    )


class TestBookEntity:
    """Test Book domain entity."""

    def test_rating_defaults_to_zero(self):
        book = Book(
            id=1, title="t", author="a", publisher="p", date="d", status="s"
        )

        assert book.rating == 0

    def test_serializes_with_fixed_field_names(self, stored_book):
        assert stored_book.model_dump() == {
            "id": 1,
            "title": "Dune",
            "author": "Frank Herbert",
            "publisher": "Chilton",
            "date": "1/8/1965",
            "rating": 5,
            "status": "CheckedOut",
        }

    def test_built_from_table_row(self):
        row = BookTable(
            id=3,
            title="Emma",
            author="Jane Austen",
            publisher="John Murray",
            date="12/23/1815",
            status="Available",
        )

        book = Book.model_validate(row, from_attributes=True)

        assert book.id == 3
        assert book.title == "Emma"
        assert book.rating == 0


class TestBookMerge:
    """Overlaying a partial update onto a stored record."""

    def test_merge_overlays_supplied_fields(self, stored_book):
        merged = stored_book.merge(BookUpdate(title="Dune Messiah", rating=4))

        assert merged.title == "Dune Messiah"
        assert merged.rating == 4
        assert merged.author == stored_book.author
        assert merged.publisher == stored_book.publisher
        assert merged.date == stored_book.date
        assert merged.status == stored_book.status
        assert merged.id == stored_book.id

    def test_merge_ignores_null_fields(self, stored_book):
        merged = stored_book.merge(BookUpdate(title=None, status="Returned"))

        assert merged.title == "Dune"
        assert merged.status == "Returned"

    def test_merge_with_empty_patch_is_identity(self, stored_book):
        assert stored_book.merge(BookUpdate()) == stored_book

    def test_merge_does_not_modify_original(self, stored_book):
        stored_book.merge(BookUpdate(title="Changed"))

        assert stored_book.title == "Dune"

    def test_rating_zero_is_applied(self, stored_book):
        merged = stored_book.merge(BookUpdate(rating=0))

        assert merged.rating == 0


class TestBookCreate:
    """Validation at the request boundary for new books."""

    def test_requires_text_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            BookCreate(title="Only a title")

        missing = {error["loc"][0] for error in exc_info.value.errors()}
        assert missing == {"author", "publisher", "date", "status"}

    def test_ignores_id_and_unknown_keys(self):
        payload = BookCreate.model_validate(
            {
                "id": 99,
                "title": "t",
                "author": "a",
                "publisher": "p",
                "date": "d",
                "status": "s",
                "price": 11.22,
            }
        )

        assert "id" not in payload.model_dump()
        assert "price" not in payload.model_dump()
        assert payload.rating == 0

    def test_rejects_non_integer_rating(self):
        with pytest.raises(ValidationError):
            BookCreate(
                title="t", author="a", publisher="p", date="d", status="s", rating="high"
            )

    def test_rating_must_fit_a_64_bit_column(self):
        fields = dict(title="t", author="a", publisher="p", date="d", status="s")

        assert BookCreate(**fields, rating=SQL_INT_MAX).rating == SQL_INT_MAX
        assert BookCreate(**fields, rating=SQL_INT_MIN).rating == SQL_INT_MIN
        with pytest.raises(ValidationError):
            BookCreate(**fields, rating=SQL_INT_MAX + 1)
        with pytest.raises(ValidationError):
            BookCreate(**fields, rating=SQL_INT_MIN - 1)


class TestBookUpdate:
    def test_tracks_only_supplied_fields(self):
        patch = BookUpdate.model_validate({"title": "New", "price": 1})

        assert patch.model_dump(exclude_unset=True) == {"title": "New"}

    def test_rejects_out_of_range_rating(self):
        with pytest.raises(ValidationError):
            BookUpdate(rating=SQL_INT_MAX + 1)


class TestBookTable:
    def test_table_definition(self):
        table = BookTable.__table__

        assert table.name == "books"
        assert table.c.id.primary_key
        for column in ("title", "author", "publisher", "date", "status", "rating"):
            assert table.c[column].nullable is False
        assert table.c.rating.server_default.arg == "0"
