"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service can start with no configuration at all: in that case it runs
in the ``test`` environment against an in-memory SQLite database that
is seeded with a couple of fixture books.

Connection parameters for a real database are only consulted outside
the ``test`` environment.
"""

import os
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import URL


_TRUTHY = {"1", "true", "yes"}

# Async drivers for the dialect names accepted in ``DB_DIALECT``.
# Unknown dialects are passed to SQLAlchemy unchanged, so a fully
# qualified ``dialect+driver`` name also works.
ASYNC_DRIVERS = {
    "sqlite": "sqlite+aiosqlite",
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
    "mysql": "mysql+aiomysql",
}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Book API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # Name of the running environment.  ``test`` forces an in-memory
    # database regardless of the ``DB_*`` variables below.
    env: str = os.getenv("APP_ENV", "test")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    db_name: str = os.getenv("DB_NAME", ":memory:")
    db_username: str = os.getenv("DB_USERNAME", "")
    db_password: str = os.getenv("DB_PASSWORD", "")
    db_host: str = os.getenv("DB_HOST", "")
    db_port: str = os.getenv("DB_PORT", "")
    db_dialect: str = os.getenv("DB_DIALECT", "sqlite")
    db_echo: bool = os.getenv("DB_ECHO", "false").lower() in _TRUTHY

    # Load the fixture books at startup.  Defaults to on for the
    # ``test`` environment only.
    seed_data: bool = os.getenv(
        "SEED_DATA", "true" if os.getenv("APP_ENV", "test") == "test" else "false"
    ).lower() in _TRUTHY

    @property
    def database_url(self) -> URL:
        """SQLAlchemy URL for the configured database."""
        if self.env == "test":
            return URL.create("sqlite+aiosqlite")

        dialect = self.db_dialect.lower()
        drivername = ASYNC_DRIVERS.get(dialect, dialect)
        if drivername.startswith("sqlite"):
            database = None if self.db_name == ":memory:" else self.db_name
            return URL.create(drivername, database=database)

        return URL.create(
            drivername,
            username=self.db_username or None,
            password=self.db_password or None,
            host=self.db_host or None,
            port=int(self.db_port) if self.db_port else None,
            database=self.db_name or None,
        )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
