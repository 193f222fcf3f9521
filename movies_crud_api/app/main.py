"""
Main entrypoint for the Movies CRUD API.

This module assembles the FastAPI application, sets up logging,
creates the movie store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn or
another ASGI server, e.g.::

    uvicorn movies_crud_api.app.main:app --port 8000

or use ``run.py`` in the project root.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.movie_service import MovieStore


def create_app(store: Optional[MovieStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[MovieStore]
        Store to serve.  If omitted a new one is created and, when
        ``settings.seed_demo_data`` is enabled, filled with the demo
        movies.  A store passed in is used as is.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the store can
    # log while it is being seeded.
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    if store is None:
        store = MovieStore()
        if settings.seed_demo_data:
            store.seed_demo_data()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("%s ready with %d movies", settings.project_name, len(store))
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan,
        # "/movies/" is not an alias of "/movies".
        redirect_slashes=False,
    )
    app.state.movie_store = store

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
