"""Entry point for the Movies CRUD API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``).  If the port cannot be bound Uvicorn exits
and so does this script.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from movies_crud_api.app.core.config import settings
from movies_crud_api.app.core.logging_config import resolve_level
from movies_crud_api.app.main import app


def build_config() -> Config:
    """Build the Uvicorn configuration from the application settings.

    The log level is passed as a number so an unknown ``LOG_LEVEL``
    falls back to ``INFO`` here too.
    """
    return Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=resolve_level(settings.log_level),
    )


async def main() -> None:
    """Serve the API until interrupted."""
    logging.getLogger("movies_crud_api.run").info("Starting server at port %d", settings.port)
    server = Server(build_config())
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
