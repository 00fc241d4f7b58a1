"""Admin dashboard endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from showcase_api.core.dependencies import get_async_session, require_ability
from showcase_api.core.policy import Ability
from showcase_api.schemas.dashboard import DashboardResponse
from showcase_api.services.dashboard_service import get_dashboard

dashboard_router = APIRouter(
    prefix="/admin/dashboard",
    tags=["admin-dashboard"],
)


@dashboard_router.get(
    "",
    dependencies=[Depends(require_ability(Ability.VIEW_ANY, "dashboard"))],
)
async def get_dashboard_endpoint(
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> DashboardResponse:
    """Counters and the latest records for principles, team and awards."""
    try:
        return await get_dashboard(session)
    except Exception as e:
        logger.error(f"Unexpected error building dashboard: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error building dashboard.",
        ) from e
