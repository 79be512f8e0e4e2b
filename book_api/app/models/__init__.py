"""
SQLAlchemy models.

Models describe how records are stored; the API representation of the
same data lives in ``schemas``.
"""

from .book import Base, Book

__all__ = ["Base", "Book"]
