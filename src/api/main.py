"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.v1 import router as v1_router
from src.config.logging import configure_logging
from src.config.settings import get_settings
from src.domain.exceptions import SettingNotFound, UpstreamError

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "HoloPort onboarding relay API v1 - ZeroTier registration and failure emails",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Configures logging on startup
    - Creates the shared outbound HTTP client on startup
    - Closes the HTTP client on shutdown
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Starting application...")

    http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)

    # Store client in app state for dependency injection
    app.state.http_client = http_client

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await http_client.aclose()
    logger.info("HTTP client closed")


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    """Downstream provider could not be reached or answered unreadably."""
    logger.error("Upstream unavailable on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "Upstream service unavailable"},
    )


async def setting_not_found_handler(request: Request, exc: SettingNotFound) -> JSONResponse:
    """A required setting is missing; the key is logged, never returned."""
    logger.error("Missing setting %s while serving %s", exc.key, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Service misconfigured"},
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions to HTTP responses."""
    app.add_exception_handler(UpstreamError, upstream_error_handler)
    app.add_exception_handler(SettingNotFound, setting_not_found_handler)


app = FastAPI(
    title="holo-auth-relay",
    description="HoloPort onboarding relay - Registers devices on ZeroTier and emails failures",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

install_exception_handlers(app)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """
    Health check endpoint.

    Returns 200 OK while the application is serving requests.
    """
    return {"status": "healthy"}
