"""Entry point for the Book API.

Starts the FastAPI application with Uvicorn.  Host, port and the rest
of the configuration are read from environment variables (see
``book_api.app.core.config``); with nothing set the service listens on
port 3000 in the ``test`` environment with an in-memory database.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from book_api.app.core.config import settings
from book_api.app.core.logging_config import setup_logging

logger = logging.getLogger("book_api")


async def main() -> None:
    """Serve the API until interrupted."""
    setup_logging(settings.log_level, settings.log_file, sql_echo=settings.db_echo)
    logger.info("Starting Book API in %s environment on port %s", settings.env, settings.port)
    config = Config(
        app="book_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
