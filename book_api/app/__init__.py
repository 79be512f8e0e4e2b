"""
Application package initializer.

The API is split into ``core`` (configuration, logging, database
bootstrap, errors), ``models`` (SQLAlchemy tables), ``schemas``
(pydantic payloads), ``services`` (store and service layer) and
``api`` (versioned routers).
"""

from .main import app, create_app  # noqa: F401
