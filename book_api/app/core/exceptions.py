"""
Exceptions raised by the book endpoints.

``BookAPIError`` subclasses carry an HTTP status code and a fixed
plain-text message.  ``book_api_error_handler`` is registered on the
application and renders them as ``text/plain`` responses, which is the
format clients of this API expect for every error.

``BookStoreError`` is not a ``BookAPIError``: it marks a
persistence failure nobody classified, and is left for the framework
to turn into a 500.
"""

from fastapi import Request
from fastapi.responses import PlainTextResponse


class BookAPIError(Exception):
    """Base class for errors answered with a plain-text body."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BookNotFoundError(BookAPIError):
    """No book matches the requested id."""

    status_code = 404

    def __init__(self, book_id: object) -> None:
        self.book_id = book_id
        super().__init__(f"Book with id {book_id} was not found")


class BookAlreadyExistsError(BookAPIError):
    """A book with the same ``bookId`` is already stored."""

    def __init__(self) -> None:
        super().__init__("The book already exists")


class InvalidBookDetailsError(BookAPIError):
    """The submitted book failed validation."""

    def __init__(self) -> None:
        super().__init__("Invalid book details")


class BookStoreError(Exception):
    """Unclassified failure reported by the book store."""


async def book_api_error_handler(request: Request, exc: BookAPIError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)
