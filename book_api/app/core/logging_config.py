"""
Logging setup for the Book API.

Log records go to stderr, and to ``logfile`` when one is
configured.  SQL statements are logged through the ``sqlalchemy.engine``
logger instead of the engine's own ``echo`` handler, so they share the
format and destinations of everything else.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SQL_LOGGER = "sqlalchemy.engine"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, sql_echo: bool = False) -> None:
    """Attach the service's handlers to the root logger.

    Does nothing if the root logger already has handlers, e.g. when a
    test runner or a second ``create_app`` call got there first.
    Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # INFO on this logger makes SQLAlchemy emit every statement.
    logging.getLogger(SQL_LOGGER).setLevel(logging.INFO if sql_echo else logging.WARNING)
