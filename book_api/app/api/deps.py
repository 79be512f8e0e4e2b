"""FastAPI dependency implementations."""

from fastapi import Request

from book_api.app.services.book_service import BookService


def get_book_service(request: Request) -> BookService:
    """Get the book service the application was started with."""
    return request.app.state.book_service
