"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from election_lifecycle.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from election_lifecycle.api.v1.health import health_router
    from election_lifecycle.api.v1.lifecycle import lifecycle_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(health_router)
    root_router.include_router(lifecycle_router)
    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register middleware on the FastAPI app.

    CORS is only enabled when origins are explicitly configured.
    """
    origins = settings.cors_origin_list
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=False,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )
