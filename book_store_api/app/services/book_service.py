"""
Business logic for books.

``BookStore`` owns an ordered, in-memory list of :class:`BookRead`
records and implements every query and mutation exposed by the
``/books`` endpoints.  One store is created per application instance
and lives for the lifetime of the process; nothing is persisted.

Errors are reported by raising :class:`ValidationError` (400) or
:class:`NotFoundError` (404) from ``core.errors``.  Records are
mutated in place, so the objects returned by the store reflect later
updates until they are deleted.
"""

from __future__ import annotations

import logging
import random
import unicodedata
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from ..core.errors import NotFoundError, ValidationError
from ..core.parsing import parse_int, parse_positive_int
from ..schemas.book import (
    BookCreate,
    BookPage,
    BookRead,
    BookStats,
    BookStatus,
    BookUpdate,
)

logger = logging.getLogger(__name__)

BOOK_NOT_FOUND = "Book not found."
SORTABLE_FIELDS = ("title", "author")

SEED_BOOKS: Tuple[Dict[str, Any], ...] = (
    {"title": "1984", "author": "George Orwell", "is_favorite": False, "status": BookStatus.UNREAD.value},
    {"title": "The Alchemist", "author": "Paulo Coelho", "is_favorite": True, "status": BookStatus.COMPLETED.value},
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _char_rank(ch: str) -> Tuple[int, str]:
    # Spaces, punctuation and symbols, then digits, then letters.
    if ch.isalpha():
        return 2, ch
    if ch.isdigit():
        return 1, ch
    return 0, ch


def collation_key(value: str) -> Tuple[Tuple[Tuple[int, str], ...], str, str]:
    """Sort key approximating a locale-aware string comparison.

    Strings compare first without accents or case, then with accents,
    and finally lowercase before uppercase.  Non-alphanumeric
    characters rank before digits, and digits before letters.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    primary = tuple(_char_rank(ch) for ch in base.casefold())
    return primary, value.casefold(), value.swapcase()


class BookStore:
    """In-memory collection of books.

    Parameters
    ----------
    seed : bool
        Populate the store with the two sample books on creation.
    rng : Optional[random.Random]
        Random source used by :meth:`recommend_book`.  Tests pass a
        seeded instance; a fresh ``random.Random`` is used otherwise.
    """

    def __init__(self, seed: bool = True, rng: Optional[random.Random] = None) -> None:
        self._books: List[BookRead] = []
        self._rng = rng or random.Random()
        if seed:
            for data in SEED_BOOKS:
                self._books.append(BookRead(id=self._next_id(), created_at=_utcnow(), **data))

    def __len__(self) -> int:
        return len(self._books)

    def _next_id(self) -> int:
        # Derived from the current maximum, so the id of a deleted
        # highest record is handed out again.
        return max((book.id for book in self._books), default=0) + 1

    def _find(self, book_id: Any) -> BookRead:
        parsed = parse_int(book_id) if isinstance(book_id, str) else book_id
        if parsed is not None:
            for book in self._books:
                if book.id == parsed:
                    return book
        raise NotFoundError(BOOK_NOT_FOUND)

    # -- queries -----------------------------------------------------------

    def list_books(
        self,
        favorite: Optional[str] = None,
        status: Optional[str] = None,
        sort_by: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> BookPage:
        """Return one page of books after filtering and sorting.

        - ``favorite``: only the exact string ``"true"`` filters to favourites.
        - ``status``: keeps books whose status equals ``status.lower()``.
        - ``sort_by``: ``title`` or ``author``; other values keep insertion order.
        - ``page`` / ``limit``: leniently parsed; ``limit`` defaults to the
          whole filtered set.

        ``total`` counts the filtered set before pagination.
        """
        result = list(self._books)
        if favorite == "true":
            result = [b for b in result if b.is_favorite]
        if status:
            wanted = status.lower()
            result = [b for b in result if b.status == wanted]
        if sort_by in SORTABLE_FIELDS:
            result.sort(key=lambda b: collation_key(getattr(b, sort_by)))

        page_num = parse_positive_int(page, 1)
        limit_num = parse_positive_int(limit, len(result))
        start = (page_num - 1) * limit_num
        return BookPage(
            total=len(result),
            page=page_num,
            limit=limit_num,
            data=result[start:start + limit_num],
        )

    def get_book(self, book_id: Any) -> BookRead:
        return self._find(book_id)

    def search_books(self, query: Optional[str]) -> List[BookRead]:
        """Case-insensitive substring search over title and author."""
        if not query:
            logger.warning("Search rejected: empty query")
            raise ValidationError("Query required.")
        needle = query.lower()
        return [
            b for b in self._books
            if needle in b.title.lower() or needle in b.author.lower()
        ]

    def recommend_book(self) -> BookRead:
        if not self._books:
            raise NotFoundError("No books available.")
        return self._rng.choice(self._books)

    def stats(self) -> BookStats:
        counts = {value: 0 for value in BookStatus.values()}
        favorites = 0
        for book in self._books:
            if book.is_favorite:
                favorites += 1
            if book.status in counts:
                counts[book.status] += 1
        return BookStats(
            total=len(self._books),
            favorites=favorites,
            completed=counts[BookStatus.COMPLETED.value],
            reading=counts[BookStatus.READING.value],
            unread=counts[BookStatus.UNREAD.value],
        )

    # -- mutations ---------------------------------------------------------

    def create_book(self, data: Optional[BookCreate]) -> BookRead:
        """Append a new book and return it.

        ``title`` and ``author`` must be non-empty.  ``status`` is stored
        as given (defaulting to ``unread``); it is not checked against
        :class:`BookStatus` here.
        """
        if data is None or not data.title or not data.author:
            logger.warning("Create rejected: title and author required")
            raise ValidationError("Title and author required.")
        book = BookRead(
            id=self._next_id(),
            title=data.title,
            author=data.author,
            created_at=_utcnow(),
            is_favorite=data.is_favorite if data.is_favorite is not None else False,
            status=data.status if data.status is not None else BookStatus.UNREAD.value,
        )
        self._books.append(book)
        logger.info("Created book %s (%r by %r)", book.id, book.title, book.author)
        return book

    def update_book(self, book_id: Any, data: Optional[BookUpdate]) -> BookRead:
        """Overwrite the supplied fields of a book.

        Omitted or empty fields keep their current values, so this
        behaves as a partial update even though it is exposed via PUT.
        """
        book = self._find(book_id)
        if data is not None:
            if data.title:
                book.title = data.title
            if data.author:
                book.author = data.author
            if data.is_favorite is not None:
                book.is_favorite = data.is_favorite
            if data.status:
                book.status = data.status
        logger.info("Updated book %s", book.id)
        return book

    def toggle_favorite(self, book_id: Any) -> BookRead:
        book = self._find(book_id)
        book.is_favorite = not book.is_favorite
        logger.info("Book %s favourite set to %s", book.id, book.is_favorite)
        return book

    def update_status(self, book_id: Any, status: Any) -> BookRead:
        """Set the reading status of a book.

        The status is validated before the book is looked up, so an
        invalid status is reported even for an unknown id.
        """
        valid = BookStatus.values()
        if status not in valid:
            logger.warning("Status update rejected for book %s: %r", book_id, status)
            raise ValidationError(f"Status must be one of: {', '.join(valid)}")
        book = self._find(book_id)
        book.status = status
        logger.info("Book %s status set to %s", book.id, status)
        return book

    def delete_book(self, book_id: Any) -> BookRead:
        book = self._find(book_id)
        self._books.remove(book)
        logger.info("Deleted book %s", book.id)
        return book

    def reset(self) -> None:
        """Remove every book.  The sample books are not restored."""
        count = len(self._books)
        self._books = []
        logger.info("Cleared %d books", count)
