"""Error taxonomy shared by the data access layer and the HTTP handlers."""


class BookManagerError(Exception):
    """Base class for errors raised by this application."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BookNotFoundError(BookManagerError):
    """The requested id has no matching row."""

    status_code = 404

    def __init__(self, message: str = "Book not found") -> None:
        super().__init__(message)


class BadRequestError(BookManagerError):
    """Malformed JSON body, path identifier or query parameter."""

    status_code = 400


class StorageError(BookManagerError):
    """Any storage-layer failure other than "no rows"."""

    status_code = 500
