"""Root API router with the configured prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from showcase_api.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware, setup_cors
from showcase_api.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from showcase_api.api.v1.awards import admin_awards_router, awards_router
    from showcase_api.api.v1.dashboard import dashboard_router
    from showcase_api.api.v1.principles import admin_principles_router, principles_router
    from showcase_api.api.v1.team import admin_team_router, team_router

    root_router = APIRouter(prefix=settings.api_prefix)
    root_router.include_router(principles_router)
    root_router.include_router(team_router)
    root_router.include_router(awards_router)
    root_router.include_router(dashboard_router)
    root_router.include_router(admin_principles_router)
    root_router.include_router(admin_team_router)
    root_router.include_router(admin_awards_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
