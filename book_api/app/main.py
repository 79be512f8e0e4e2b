"""
Main entrypoint for the Book API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn book_api.app.main:app --reload

The database is opened in the application lifespan: tables are
created, fixture books are loaded when ``Settings.seed_data`` is set,
and the resulting ``BookService`` is stored on ``app.state`` where the
endpoints pick it up.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import create_engine_from_settings, create_session_factory, init_db
from .core.exceptions import BookAPIError, book_api_error_handler
from .core.logging_config import setup_logging
from .core.seed import populate_dummy_data
from .services.book_service import BookService
from .services.book_store import BookStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[BookService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    service : Optional[BookService]
        A ready-made book service.  When given, no database is opened
        and the service is used as is, which lets tests substitute the
        persistence layer.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file, sql_echo=settings.db_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if service is not None:
            yield
            return

        engine = create_engine_from_settings(settings)
        try:
            await init_db(engine)
            store = BookStore(create_session_factory(engine))
            if settings.seed_data:
                await populate_dummy_data(store)
            app.state.book_service = BookService(store)
            yield
        finally:
            await engine.dispose()

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    if service is not None:
        app.state.book_service = service

    app.add_exception_handler(BookAPIError, book_api_error_handler)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    logger.info("Running in %s environment", settings.env)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
