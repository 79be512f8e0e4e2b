"""
Pydantic schemas for books.

Clients exchange books as JSON objects with camelCase keys
(``bookId``).  The schemas use snake_case attribute names and accept
either spelling on input.  ``BookCreate`` and ``BookUpdate`` are used
by the store to validate payloads; the endpoints themselves accept raw
JSON so that validation failures can be reported in this API's own
error format rather than FastAPI's.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Range of the 64-bit INTEGER column that stores ``bookId``.
BOOK_ID_MIN = -(2**63)
BOOK_ID_MAX = 2**63 - 1


class BookCreate(BaseModel):
    """Schema for creating a new book."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    book_id: int = Field(
        ...,
        alias="bookId",
        ge=BOOK_ID_MIN,
        le=BOOK_ID_MAX,
        description="Caller-supplied unique identifier",
    )
    title: str = Field(..., description="Title of the book")
    author: str = Field(..., description="Author of the book")
    description: Optional[str] = Field(None, description="Free-text description")


class BookUpdate(BaseModel):
    """Schema for updating an existing book.

    All fields are optional; only provided values will be updated.
    The identifier cannot be changed and is ignored if present.
    """

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None


class BookRead(BaseModel):
    """Schema for reading a book."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    book_id: int = Field(..., alias="bookId")
    title: str
    author: str
    description: Optional[str] = None


class BookUpdateResult(BaseModel):
    """Outcome of an update: how many stored books were changed."""

    model_config = ConfigDict(populate_by_name=True)

    affected_rows: int = Field(..., alias="affectedRows")
