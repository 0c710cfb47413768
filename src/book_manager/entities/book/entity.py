"""Entity: Book."""

from pydantic import BaseModel, ConfigDict, Field

# Range of the 64-bit INTEGER columns the books table is stored in
SQL_INT_MIN = -(2**63)
SQL_INT_MAX = 2**63 - 1


class Book(BaseModel):
    """Book entity: one row of the ``books`` table as the API exposes it.

    The id is assigned by the database on insert; every other field is
    stored as-is, with ``rating`` defaulting to 0.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Server-assigned identifier")
    title: str = Field(description="Title")
    author: str = Field(description="Author")
    publisher: str = Field(description="Publisher")
    date: str = Field(description="Publication date, free-form")
    rating: int = Field(default=0, description="Rating")
    status: str = Field(description="Status label, e.g. 'CheckedOut'")

    def merge(self, patch: "BookUpdate") -> "Book":
        """Return a copy with every field the patch provides overlaid on this record.

        Fields the patch leaves out, or sends as null, keep their stored value,
        so the result always carries a value for every column.
        """
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        return self.model_copy(update=changes)


class BookCreate(BaseModel):
    """Payload accepted by ``POST /book``.

    Unknown keys, including any client-supplied id, are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    title: str
    author: str
    publisher: str
    date: str
    rating: int = Field(default=0, ge=SQL_INT_MIN, le=SQL_INT_MAX)
    status: str


class BookUpdate(BaseModel):
    """Partial payload accepted by ``PUT /book/{id}``."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    author: str | None = None
    publisher: str | None = None
    date: str | None = None
    rating: int | None = Field(default=None, ge=SQL_INT_MIN, le=SQL_INT_MAX)
    status: str | None = None
