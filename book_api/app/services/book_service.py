"""
Service layer for books.

``BookService`` is the seam between the endpoints and persistence:
one method per CRUD verb, each awaiting the matching ``BookStore``
operation and returning its result unchanged.  Failures propagate to
the caller as they are; classifying them is the endpoints' job.
"""

from typing import Any, List, Optional

from book_api.app.schemas.book import BookRead
from book_api.app.services.book_store import BookStore, InsertResult


class BookService:
    """Service class for managing books."""

    def __init__(self, store: BookStore) -> None:
        self.store = store

    async def list_books(self) -> List[BookRead]:
        return await self.store.list_all()

    async def get_book(self, book_id: int) -> Optional[BookRead]:
        return await self.store.find_by_id(book_id)

    async def save_book(self, data: Any) -> InsertResult:
        return await self.store.insert(data)

    async def update_book(self, book_id: int, data: Any) -> int:
        return await self.store.update_by_id(book_id, data)

    async def delete_book(self, book_id: int) -> int:
        return await self.store.delete_by_id(book_id)
