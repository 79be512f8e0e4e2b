from typing import Any, Dict, Iterable, List, Optional

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from book_api.app.core.config import Settings
from book_api.app.core.db import create_engine, create_session_factory, init_db
from book_api.app.core.seed import DUMMY_BOOKS
from book_api.app.main import create_app
from book_api.app.schemas.book import BookRead
from book_api.app.services.book_store import BookStore, InsertOutcome, InsertResult


def make_settings(**overrides: Any) -> Settings:
    values: Dict[str, Any] = {"env": "test", "seed_data": False, "log_level": "WARNING"}
    values.update(overrides)
    return Settings(**values)


class FakeBookService:
    """In-memory stand-in for ``BookService`` that records its calls."""

    def __init__(self, books: Optional[Iterable[BookRead]] = None) -> None:
        self.books: Dict[int, BookRead] = {book.book_id: book for book in books or []}
        self.insert_result: Optional[InsertResult] = None
        self.calls: List[tuple] = []

    async def list_books(self) -> List[BookRead]:
        self.calls.append(("list",))
        return list(self.books.values())

    async def get_book(self, book_id: int) -> Optional[BookRead]:
        self.calls.append(("get", book_id))
        return self.books.get(book_id)

    async def save_book(self, data: Any) -> InsertResult:
        self.calls.append(("save", data))
        if self.insert_result is not None:
            return self.insert_result
        book = BookRead.model_validate(data)
        self.books[book.book_id] = book
        return InsertResult(InsertOutcome.CREATED, book=book)

    async def update_book(self, book_id: int, data: Any) -> int:
        self.calls.append(("update", book_id, data))
        return 1 if book_id in self.books else 0

    async def delete_book(self, book_id: int) -> int:
        self.calls.append(("delete", book_id))
        return 1 if self.books.pop(book_id, None) is not None else 0


@pytest.fixture
def dummy_books() -> List[BookRead]:
    return [BookRead.model_validate(data) for data in DUMMY_BOOKS]


@pytest.fixture
def fake_service() -> FakeBookService:
    return FakeBookService()


@pytest.fixture
def client(fake_service):
    """Client for an app whose persistence is replaced by ``fake_service``."""
    app = create_app(make_settings(), service=fake_service)
    return TestClient(app)


@pytest.fixture
def db_client():
    """Client for an app backed by an empty in-memory SQLite database."""
    app = create_app(make_settings())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client():
    """Client for an app whose database holds the fixture books."""
    app = create_app(make_settings(seed_data=True))
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def store():
    engine = create_engine("sqlite+aiosqlite://")
    await init_db(engine)
    try:
        yield BookStore(create_session_factory(engine))
    finally:
        await engine.dispose()
