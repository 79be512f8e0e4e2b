"""
Persistence for books.

``BookStore`` performs create/read/update/delete against the
``books`` table through an async SQLAlchemy session factory that is
passed in at construction.  Each operation opens its own session and
commits or rolls back before returning, so a store instance can be
shared freely between concurrent requests.

``insert`` does not raise on the failures callers are expected to
handle.  It returns an ``InsertResult`` tagged with an
``InsertOutcome``: ``CREATED``, ``DUPLICATE_KEY`` (the ``bookId`` is
taken), ``INVALID`` (required fields missing or of the wrong type) or
``OTHER`` for any database failure nobody classified.  The remaining
operations raise ``BookStoreError`` when the database fails.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from book_api.app.core.exceptions import BookStoreError
from book_api.app.models import Book
from book_api.app.schemas.book import BookCreate, BookRead, BookUpdate

logger = logging.getLogger(__name__)


class InsertOutcome(str, enum.Enum):
    CREATED = "created"
    DUPLICATE_KEY = "duplicate_key"
    INVALID = "invalid"
    OTHER = "other"


@dataclass(frozen=True)
class InsertResult:
    outcome: InsertOutcome
    book: Optional[BookRead] = None
    detail: Optional[str] = None


class BookStore:
    """Book records stored through SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def list_all(self) -> List[BookRead]:
        """Return every stored book ordered by ``bookId``."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(Book).order_by(Book.book_id))
                return [self._to_book_read(book) for book in result.scalars().all()]
        except SQLAlchemyError as exc:
            logger.exception("Failed to list books")
            raise BookStoreError(str(exc)) from exc

    async def find_by_id(self, book_id: int) -> Optional[BookRead]:
        try:
            async with self._session_factory() as session:
                book = await session.get(Book, book_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to load book %s", book_id)
            raise BookStoreError(str(exc)) from exc
        if book is None:
            return None
        return self._to_book_read(book)

    async def insert(self, data: Any) -> InsertResult:
        """Validate ``data`` and store it as a new book."""
        try:
            candidate = BookCreate.model_validate(data)
        except ValidationError as exc:
            logger.info("Rejected book details: %d validation error(s)", exc.error_count())
            return InsertResult(InsertOutcome.INVALID, detail=str(exc))

        book = Book(
            book_id=candidate.book_id,
            title=candidate.title,
            author=candidate.author,
            description=candidate.description,
        )
        async with self._session_factory() as session:
            session.add(book)
            try:
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                logger.info("Book %s already exists", candidate.book_id)
                return InsertResult(InsertOutcome.DUPLICATE_KEY, detail=str(exc.orig))
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception("Failed to insert book %s", candidate.book_id)
                return InsertResult(InsertOutcome.OTHER, detail=str(exc))

        logger.info("Created book %s", book.book_id)
        return InsertResult(InsertOutcome.CREATED, book=self._to_book_read(book))

    async def update_by_id(self, book_id: int, data: Any) -> int:
        """Apply the fields in ``data`` to a stored book.

        Returns the number of rows changed: 0 when no book has this id
        or when ``data`` holds nothing to update.
        """
        if not isinstance(data, Mapping):
            return 0
        try:
            changes = BookUpdate.model_validate(data).model_dump(exclude_unset=True)
        except ValidationError as exc:
            logger.exception("Rejected update for book %s", book_id)
            raise BookStoreError(str(exc)) from exc
        if not changes:
            return 0

        async with self._session_factory() as session:
            try:
                result = await session.execute(
                    update(Book).where(Book.book_id == book_id).values(**changes)
                )
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception("Failed to update book %s", book_id)
                raise BookStoreError(str(exc)) from exc
        if result.rowcount:
            logger.info("Updated book %s", book_id)
        return result.rowcount

    async def delete_by_id(self, book_id: int) -> int:
        """Delete a book and return the number of rows removed (0 or 1)."""
        async with self._session_factory() as session:
            try:
                result = await session.execute(delete(Book).where(Book.book_id == book_id))
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception("Failed to delete book %s", book_id)
                raise BookStoreError(str(exc)) from exc
        if result.rowcount:
            logger.info("Deleted book %s", book_id)
        return result.rowcount

    @staticmethod
    def _to_book_read(book: Book) -> BookRead:
        return BookRead(
            book_id=book.book_id,
            title=book.title,
            author=book.author,
            description=book.description,
        )
