"""
Database integration.

This module builds the async SQLAlchemy engine and session factory
from ``Settings`` and creates the schema on application start
(``init_db``).  Nothing here is global: the application factory owns
the engine and hands the session factory to the book store, so tests
can build as many isolated databases as they need.

An in-memory SQLite database only lives as long as its connection, so
for that case the engine is pinned to a single shared connection.
"""

import logging
from typing import Union

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from .config import Settings
from ..models import Base

logger = logging.getLogger(__name__)


def is_memory_database(url: URL) -> bool:
    """Return ``True`` for SQLite URLs that point at an in-memory database."""
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_engine(db_url: Union[URL, str], echo: bool = False) -> AsyncEngine:
    url = make_url(db_url)
    if is_memory_database(url):
        return create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(url, echo=echo)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    url = settings.database_url
    logger.info("Using database %s", url.render_as_string(hide_password=True))
    return create_engine(url)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    """Create any missing tables.

    Schema changes are not migrated; existing tables are left as they
    are.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
