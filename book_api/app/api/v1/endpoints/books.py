"""
Book endpoints for API v1.

These routes expose CRUD operations over books.  Successful reads and
creates answer with JSON; every error, and the confirmation of a
delete, is plain text:

* ``GET /books/{id}`` and ``DELETE /books/{id}`` answer 404 with
  ``Book with id <id> was not found`` when nothing matches.  ``<id>``
  is echoed exactly as it appeared in the path; ids that are not
  integers can never match and are treated the same way.
* ``POST /books`` answers 400 with ``The book already exists`` or
  ``Invalid book details`` depending on how the store rejected the
  book.  Any other store failure is not handled here and surfaces as
  a server error.
* ``PUT``/``PATCH /books/{id}`` always answer 204; updating a book
  that does not exist is a no-op.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import PlainTextResponse

from book_api.app.api.deps import get_book_service
from book_api.app.core.exceptions import (
    BookAlreadyExistsError,
    BookNotFoundError,
    BookStoreError,
    InvalidBookDetailsError,
)
from book_api.app.schemas.book import BOOK_ID_MAX, BOOK_ID_MIN, BookRead, BookUpdateResult
from book_api.app.services.book_service import BookService
from book_api.app.services.book_store import InsertOutcome

router = APIRouter()


def parse_book_id(raw: str) -> Optional[int]:
    """Coerce a path id to an integer, or ``None`` if it cannot be a book id.

    Any numeric form with an integral value is accepted (``1``,
    ``1.0``, ``1e3``).  Digit separators, fractions and values outside
    the 64-bit range of the ``bookId`` column are rejected.
    """
    text = raw.strip()
    if "_" in text:
        return None
    try:
        book_id = int(text)
    except ValueError:
        try:
            value = float(text)
        except ValueError:
            return None
        if not value.is_integer():
            return None
        book_id = int(value)
    if not BOOK_ID_MIN <= book_id <= BOOK_ID_MAX:
        return None
    return book_id


@router.get("", response_model=List[BookRead])
async def get_books(service: BookService = Depends(get_book_service)) -> List[BookRead]:
    """Return all books."""
    return await service.list_books()


@router.get("/{book_id}", response_model=BookRead)
async def get_book(book_id: str, service: BookService = Depends(get_book_service)) -> BookRead:
    """Retrieve a single book by its id."""
    parsed_id = parse_book_id(book_id)
    book = await service.get_book(parsed_id) if parsed_id is not None else None
    if book is None:
        raise BookNotFoundError(book_id)
    return book


@router.post("", response_model=BookRead, status_code=status.HTTP_201_CREATED)
async def save_book(
    payload: Any = Body(None),
    service: BookService = Depends(get_book_service),
) -> BookRead:
    """Create a new book.

    The payload is handed to the store unvalidated; the store decides
    whether it is a valid book and reports why not.
    """
    result = await service.save_book(payload)
    if result.outcome is InsertOutcome.CREATED:
        return result.book
    if result.outcome is InsertOutcome.DUPLICATE_KEY:
        raise BookAlreadyExistsError()
    if result.outcome is InsertOutcome.INVALID:
        raise InvalidBookDetailsError()
    raise BookStoreError(result.detail or f"unhandled insert outcome {result.outcome.value}")


@router.api_route(
    "/{book_id}",
    methods=["PUT", "PATCH"],
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
)
async def update_book(
    book_id: str,
    payload: Any = Body(None),
    service: BookService = Depends(get_book_service),
) -> BookUpdateResult:
    """Update some or all fields of a book.

    The update result is returned, but a 204 response never carries a
    body, so clients receive only the status.
    """
    parsed_id = parse_book_id(book_id)
    affected = await service.update_book(parsed_id, payload) if parsed_id is not None else 0
    return BookUpdateResult(affected_rows=affected)


@router.delete("/{book_id}", response_class=PlainTextResponse)
async def delete_book(book_id: str, service: BookService = Depends(get_book_service)) -> str:
    """Delete a book by its id."""
    parsed_id = parse_book_id(book_id)
    deleted = await service.delete_book(parsed_id) if parsed_id is not None else 0
    if deleted == 0:
        raise BookNotFoundError(book_id)
    return f"Book with id {book_id} has been successfully deleted"
