"""FastAPI application factory.

Serves riding analysis to the presentation layer. The service is stateless:
clients post the observations they already hold and get back scores, advice,
the best riding window and best/worst days. Nothing is fetched or stored.

`create_app()` builds the app with CORS configured from settings; `run()`
serves it with uvicorn on the configured host and port (the
`moto-forecast-api` console script). API docs are only mounted when
`MOTO_FORECAST_DEBUG` is set.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moto_forecast.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()

    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    yield

    logger.info("Shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Motorcycle riding confidence, advice and ride windows",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    from moto_forecast.api.routes import riding

    app.include_router(riding.router, prefix="/api/riding", tags=["Riding"])

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": settings.app_version}

    return app


def run() -> None:
    """Serve the API with uvicorn using configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
