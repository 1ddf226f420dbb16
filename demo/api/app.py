"""FastAPI application factory.

Lifespan
--------
Nothing is opened on startup; the lifespan only logs when the app comes up
and goes down so deploy logs show the service's lifecycle.

Routers
-------
A single router is mounted at the root:

    /    — the static Hello World page

The interactive docs and OpenAPI schema are switched off so that every
other path falls through to the default 404.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from demo.config import settings
from demo.pages import HOME_PAGE

from demo.api.routers import home as home_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup and shutdown."""
    logger.info(
        "%s ready, home page is %d bytes",
        app.title,
        len(HOME_PAGE.encode("utf-8")),
    )
    try:
        yield
    finally:
        logger.info("%s shutting down", app.title)


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title=settings.app_name,
        description="Single-page deployment check: GET / returns a static HTML page.",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.include_router(home_router.router, tags=["home"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn demo.api.app:app
app = create_app()
