"""
Main entrypoint for the Book Store API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn book_store_api.app.main:app --reload

Each application owns its own :class:`BookStore`, kept on
``app.state.book_store``; the store is seeded with two sample books.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.book_service import BookStore


def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[BookStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.
    store : Optional[BookStore]
        Pre-built store, mainly for tests.  A seeded store is created
        when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or default_settings
    setup_logging(cfg.log_level, cfg.log_file)

    app = FastAPI(title=cfg.project_name, version=cfg.api_version)
    app.state.settings = cfg
    app.state.book_store = store if store is not None else BookStore()

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=cfg.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
