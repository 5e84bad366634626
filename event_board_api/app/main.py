"""
Main entrypoint for the Event Board API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory store and notification bus and includes the
versioned routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``::

    uvicorn event_board_api.app.main:app --port 4000
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .core.pubsub import PubSub
from .core.store import InMemoryStore
from .api.v1.router import router as v1_router


def create_app(
    store: Optional[InMemoryStore] = None,
    bus: Optional[PubSub] = None,
    seed_file: Optional[str] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[InMemoryStore]
        Store to serve.  A new empty store is created when omitted.
    bus : Optional[PubSub]
        Notification bus shared by mutations and subscriptions.  A new
        bus is created when omitted.
    seed_file : Optional[str]
        JSON file loaded into the store on startup.  Defaults to
        ``settings.seed_file``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    seed_path = seed_file or settings.seed_file

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Seed data is loaded once per process start; the dataset is
        # discarded on shutdown.
        logger = logging.getLogger(__name__)
        if seed_path:
            app.state.store.load_seed(seed_path)
        logger.info("%s %s ready with %s", settings.project_name, settings.api_version, app.state.store.counts())
        yield
        logger.info("Shutting down, dropping %s", app.state.store.counts())

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else InMemoryStore()
    app.state.bus = bus if bus is not None else PubSub()

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
