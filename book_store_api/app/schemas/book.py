"""
Pydantic models for book data.

``BookRead`` is the representation returned by every endpoint that
yields a book.  Request bodies (``BookCreate``, ``BookUpdate`` and
``BookStatusUpdate``) keep every field optional: presence checks are
done by the service layer so that missing values produce the
service's own 400 messages rather than generic schema errors.

Attributes are snake_case in Python and camelCase on the wire
(``isFavorite``, ``createdAt``).
"""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class BookStatus(str, Enum):
    UNREAD = "unread"
    READING = "reading"
    COMPLETED = "completed"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


def _bool_or_none(value: Any) -> Optional[bool]:
    # Only genuine JSON booleans are applied; anything else is ignored.
    return value if isinstance(value, bool) else None


class BookRead(CamelModel):
    """Schema for reading a book from the API."""

    id: int
    title: str
    author: str
    created_at: datetime
    is_favorite: bool = False
    # Not an enum here: create and full update store the status verbatim.
    status: Optional[str] = BookStatus.UNREAD.value


class BookCreate(CamelModel):
    """Schema for creating a book.

    ``title`` and ``author`` are required but declared optional so the
    service can answer with a single, readable error message.
    """

    title: Optional[str] = Field(None, examples=["Dune"])
    author: Optional[str] = Field(None, examples=["Frank Herbert"])
    status: Optional[str] = Field(None, examples=["unread"])
    is_favorite: Optional[bool] = Field(None, examples=[False])

    @field_validator("is_favorite", mode="before")
    @classmethod
    def ignore_non_boolean_favorite(cls, value: Any) -> Optional[bool]:
        return _bool_or_none(value)


class BookUpdate(CamelModel):
    """Schema for the full update of a book.

    All fields are optional; only provided, non-empty values replace
    the stored ones.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    is_favorite: Optional[bool] = None
    status: Optional[str] = None

    @field_validator("is_favorite", mode="before")
    @classmethod
    def ignore_non_boolean_favorite(cls, value: Any) -> Optional[bool]:
        return _bool_or_none(value)


class BookStatusUpdate(BaseModel):
    """Schema for the dedicated status update.

    ``status`` is checked against :class:`BookStatus` by the service,
    so any JSON value is accepted here.
    """

    status: Optional[Any] = Field(None, examples=["reading"])


class BookPage(BaseModel):
    """One page of a filtered, sorted book listing."""

    total: int
    page: int
    limit: int
    data: List[BookRead]


class BookStats(BaseModel):
    total: int
    favorites: int
    completed: int
    reading: int
    unread: int


class BookActionResult(BaseModel):
    message: str
    book: BookRead


class MessageResponse(BaseModel):
    message: str
