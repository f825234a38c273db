"""Launch the Book Store API under uvicorn.

Host, port and log level come from ``book_store_api.app.core.config``
(``HOST``, ``PORT``, ``LOG_LEVEL`` or a ``.env`` file).  The port
defaults to ``3000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from book_store_api.app.core.config import settings
from book_store_api.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting Book API on http://localhost:%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
