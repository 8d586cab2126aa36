"""
Main FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geoconvert import __version__
from geoconvert.api.conversion import router as conversion_router
from geoconvert.api.error_handlers import register_error_handlers
from geoconvert.api.middleware import RequestCorrelationMiddleware
from geoconvert.core.config import settings
from geoconvert.core.crs.registry import get_registry
from geoconvert.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Lifespan context manager for FastAPI application.

    Startup configures logging and loads the EPSG database so the first
    request does not pay for it.
    """
    setup_logging(
        log_file=settings.log_file,
        json_logs=(settings.environment == "production"),
        enable_console=True,
    )
    logger.info(f"Starting geoconvert API v{__version__} in {settings.environment} mode")

    get_registry().load_once()

    yield

    logger.info("Shutting down geoconvert API")


app = FastAPI(
    title="geoconvert API",
    description="GeoJSON/WKT conversion and EPSG re-projection",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestCorrelationMiddleware)

register_error_handlers(app)

app.include_router(conversion_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root() -> dict[str, str]:
    """
    Root endpoint returning API information.

    Returns:
        dict[str, str]: API information including name and version.
    """
    return {
        "name": "geoconvert API",
        "version": __version__,
        "description": "GeoJSON/WKT conversion and EPSG re-projection",
    }


@app.get("/health")
async def health_check() -> dict[str, str]:
    """
    Health check endpoint.

    Returns:
        dict[str, str]: Health status and number of supported EPSG codes.
    """
    return {"status": "healthy", "epsg_codes": str(get_registry().count())}
