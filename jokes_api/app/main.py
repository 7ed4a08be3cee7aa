"""
Main entrypoint for the Jokes API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory joke store and includes the versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn jokes_api.app.main:app --reload

Interactive API documentation is served at ``/api-docs``.
"""

import copy
import logging
from contextlib import asynccontextmanager
from typing import Iterable, Mapping, Optional

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .data.seed import SEED_JOKES
from .services.joke_service import JokeStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    jokes: Optional[Iterable[Mapping]] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment‑derived
        module settings.
    jokes : Optional[Iterable[Mapping]]
        Initial records for the store; defaults to the built‑in seed
        list.  The records are copied, never shared.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with its own
        ``JokeStore`` on ``app.state.joke_store``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not settings.master_key:
            logger.warning("MASTER_KEY is not set; all mutating requests will be forbidden")
        logger.info("Successfully started server on port %s.", settings.port)
        yield
        logger.info("Jokes API shutting down")

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description="API documentation for the Jokes API",
        servers=[{"url": settings.server_url}],
        openapi_tags=[{"name": "Jokes", "description": "Joke management endpoints"}],
        docs_url="/api-docs",
        openapi_url="/api-docs/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )

    seed = SEED_JOKES if jokes is None else jokes
    app.state.joke_store = JokeStore(copy.deepcopy(list(seed)), master_key=settings.master_key)
    app.state.settings = settings

    register_error_handlers(app)
    # Mounted at the root: public paths are /jokes and /jokes/{id}.
    app.include_router(v1_router)

    return app


app = create_app()
