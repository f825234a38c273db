"""
Error types raised by the service layer and their HTTP translation.

Services raise :class:`ValidationError` or :class:`NotFoundError`;
``register_exception_handlers`` turns them into JSON responses of
the form ``{"error": "<message>"}`` with the matching status code.
Request body problems detected by FastAPI itself (malformed JSON,
wrongly typed fields) are reported with the same shape and a 400.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class BookStoreError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BookStoreError):
    """A required field is missing or a value is outside its allowed set."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(BookStoreError):
    """The requested book does not exist (or the store is empty)."""

    status_code = status.HTTP_404_NOT_FOUND


def _describe_request_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "Invalid input")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request."


async def book_store_error_handler(request: Request, exc: BookStoreError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_request_error(exc)
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to ``app``."""
    app.add_exception_handler(BookStoreError, book_store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
