"""
SQLAlchemy model for the ``books`` table.

The primary key is the caller-supplied ``bookId``; the database never
generates identifiers.
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Book(Base):
    __tablename__ = "books"

    book_id: Mapped[int] = mapped_column("bookId", Integer, primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"Book(book_id={self.book_id!r}, title={self.title!r})"
