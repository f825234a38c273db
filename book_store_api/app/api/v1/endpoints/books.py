"""
Book endpoints for API v1.

These routes expose the in-memory book collection: listing with
filters, sorting and pagination, search, a random recommendation,
aggregate statistics and the usual create/update/delete operations.

Routes with fixed sub-paths (``/search``, ``/recommend``, ``/stats``,
``/reset``) are declared before the ``/{book_id}`` routes so that
they are not captured as ids.  Ids are taken as raw strings and
parsed by the store; an id that is not a number is simply not found.

Handlers are coroutines without awaits, so each request is handled
to completion on the event loop before the next one starts.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from book_store_api.app.api.deps import get_book_store
from book_store_api.app.schemas.book import (
    BookActionResult,
    BookCreate,
    BookPage,
    BookRead,
    BookStats,
    BookStatusUpdate,
    BookUpdate,
    MessageResponse,
)
from book_store_api.app.services.book_service import BookStore

router = APIRouter()


@router.get("", response_model=BookPage)
async def list_books(
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    favorite: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    store: BookStore = Depends(get_book_store),
) -> BookPage:
    """List books.

    - **favorite**: ``true`` keeps only favourites.
    - **status**: ``unread``, ``reading`` or ``completed`` (case insensitive).
    - **sortBy**: ``title`` or ``author``.
    - **page**, **limit**: pagination; ``limit`` defaults to all results.
    """
    return store.list_books(
        favorite=favorite,
        status=status_filter,
        sort_by=sort_by,
        page=page,
        limit=limit,
    )


@router.get("/search", response_model=List[BookRead])
async def search_books(
    query: Optional[str] = Query(None),
    store: BookStore = Depends(get_book_store),
) -> List[BookRead]:
    """Find books whose title or author contains ``query``."""
    return store.search_books(query)


@router.get("/recommend", response_model=BookRead)
async def recommend_book(store: BookStore = Depends(get_book_store)) -> BookRead:
    """Return a random book, or 404 when the store is empty."""
    return store.recommend_book()


@router.get("/stats", response_model=BookStats)
async def book_stats(store: BookStore = Depends(get_book_store)) -> BookStats:
    return store.stats()


@router.get("/{book_id}", response_model=BookRead)
async def get_book(book_id: str, store: BookStore = Depends(get_book_store)) -> BookRead:
    return store.get_book(book_id)


@router.post("", response_model=BookRead, status_code=status.HTTP_201_CREATED)
async def create_book(
    payload: Optional[BookCreate] = None,
    store: BookStore = Depends(get_book_store),
) -> BookRead:
    """Create a book.

    ``title`` and ``author`` are required; ``status`` defaults to
    ``unread`` and ``isFavorite`` to ``false``.
    """
    return store.create_book(payload)


@router.put("/{book_id}", response_model=BookRead)
async def update_book(
    book_id: str,
    payload: Optional[BookUpdate] = None,
    store: BookStore = Depends(get_book_store),
) -> BookRead:
    """Update a book.

    Only the fields present in the body are changed; the others keep
    their current values.
    """
    return store.update_book(book_id, payload)


@router.patch("/{book_id}/favorite", response_model=BookActionResult)
async def toggle_favorite(book_id: str, store: BookStore = Depends(get_book_store)) -> BookActionResult:
    book = store.toggle_favorite(book_id)
    return BookActionResult(message="Favorite status toggled.", book=book)


@router.patch("/{book_id}/status", response_model=BookActionResult)
async def update_status(
    book_id: str,
    payload: Optional[BookStatusUpdate] = None,
    store: BookStore = Depends(get_book_store),
) -> BookActionResult:
    """Set the reading status (``unread``, ``reading`` or ``completed``)."""
    book = store.update_status(book_id, payload.status if payload else None)
    return BookActionResult(message="Status updated.", book=book)


@router.delete("/reset", response_model=MessageResponse)
async def reset_books(store: BookStore = Depends(get_book_store)) -> MessageResponse:
    """Remove every book from the store."""
    store.reset()
    return MessageResponse(message="Book list cleared.")


@router.delete("/{book_id}", response_model=BookRead)
async def delete_book(book_id: str, store: BookStore = Depends(get_book_store)) -> BookRead:
    return store.delete_book(book_id)
