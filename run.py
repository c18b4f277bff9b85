"""Entry point for the Posts API.

Starts the Posts API under Uvicorn.  The store is in memory, so every
launch begins again from the sample post.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8080``); see
``posts_api.app.core.config`` for the remaining settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from posts_api.app.core.config import settings
from posts_api.app.main import app


async def main() -> None:
    """Start the API server and run until interrupted."""
    logging.getLogger(__name__).info("Server starting on %s:%s", settings.host, settings.port)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
