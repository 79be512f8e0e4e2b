"""
Fixture data for the ``test`` environment.

``populate_dummy_data`` loads a couple of well-known books so a freshly
started service has something to serve.  Books that are already
present are left untouched.
"""

import logging
from typing import Any, Dict, List

from book_api.app.services.book_store import BookStore, InsertOutcome

logger = logging.getLogger(__name__)


DUMMY_BOOKS: List[Dict[str, Any]] = [
    {
        "bookId": 1,
        "title": "The Hobbit",
        "author": "J. R. R. Tolkien",
        "description": "Someone finds a nice piece of jewellery while on holiday.",
    },
    {
        "bookId": 2,
        "title": "The Shop Before Life",
        "author": "Neil Hughes",
        "description": (
            "Before being born, each person must visit the magical Shop Before Life, "
            "where they choose what kind of person they will become down on Earth..."
        ),
    },
]


async def populate_dummy_data(store: BookStore) -> int:
    """Insert the fixture books and return how many were created."""
    created = 0
    for data in DUMMY_BOOKS:
        result = await store.insert(data)
        if result.outcome is InsertOutcome.CREATED:
            created += 1
        elif result.outcome is not InsertOutcome.DUPLICATE_KEY:
            logger.warning("Could not seed book %s: %s", data["bookId"], result.detail)
    logger.info("Seeded %d book(s)", created)
    return created
