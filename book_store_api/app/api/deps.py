"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from ..services.book_service import BookStore


def get_book_store(request: Request) -> BookStore:
    """Return the book store owned by the running application."""
    return request.app.state.book_store
