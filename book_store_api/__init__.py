"""
Top-level package for the Book Store API.

All functionality lives in submodules under ``app``; import
``book_store_api.app.main`` to obtain the ASGI application.
"""

__all__ = []
