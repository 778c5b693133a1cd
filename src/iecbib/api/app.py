"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from iecbib.api.routes import health_router, references_router
from iecbib.client import IecbibClient
from iecbib.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Opens the library client on startup and closes it on shutdown.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    logger.info(f"Initializing IEC webstore client for {settings.catalog_url}...")
    app.state.iecbib_client = IecbibClient(settings)
    await app.state.iecbib_client.open()

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    await app.state.iecbib_client.close()
    logger.info("Application shutdown complete")


def create_app(
    *,
    title: str = "iecbib API",
    description: str = "IEC standard reference resolution API",
    version: str = "0.1.0",
    cors_origins: list[str] | None = None,
    debug: bool | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version
        cors_origins: List of allowed CORS origins
        debug: Return tracebacks on server errors (defaults to ``settings.debug``)

    Returns:
        Configured FastAPI application
    """
    if debug is None:
        debug = get_settings().debug

    app = FastAPI(
        title=title,
        debug=debug,
        description=description,
        version=version,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    if cors_origins is None:
        cors_origins = ["http://localhost:3000"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(references_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()


def main() -> None:
    """Serve the API with uvicorn (``pip install iecbib[server]``)."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "iecbib.api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )
