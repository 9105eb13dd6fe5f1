"""FastAPI application factory.

Creates the FastAPI app with lifespan logging setup, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from election_lifecycle.core.config import get_settings
from election_lifecycle.core.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Configure logging on startup."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir, component="api", json_logs=settings.log_json)
    logger.info("Election lifecycle API starting ({})", settings.environment)
    yield
    logger.info("Election lifecycle API stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Election Lifecycle API",
        description="Derived election lifecycle status, per-status stats, and election comparison insights",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    from election_lifecycle.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router(settings))

    return app
