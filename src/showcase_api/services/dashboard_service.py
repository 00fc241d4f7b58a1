"""Dashboard service -- stat counters and latest records for the admin home page."""

from datetime import UTC, datetime, timedelta

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase_api.models import Award, Principle, Team
from showcase_api.schemas.award import AwardAdminResponse
from showcase_api.schemas.dashboard import (
    AwardDashboardStats,
    DashboardResponse,
    PrincipleDashboardStats,
    TeamDashboardStats,
)
from showcase_api.schemas.principle import PrincipleAdminResponse
from showcase_api.schemas.team import TeamMemberAdminResponse
from showcase_api.services.content_service import count

LATEST_LIMIT = 5
RECENT_DAYS = 30


async def principle_stats(session: AsyncSession) -> PrincipleDashboardStats:
    total = await count(session, Principle, Principle.not_deleted())
    active = await count(session, Principle, Principle.not_deleted(), Principle.active())
    trashed = await count(session, Principle, Principle.deleted_at.is_not(None))
    return PrincipleDashboardStats(total=total, active=active, inactive=total - active, trashed=trashed)


async def team_stats(session: AsyncSession, *, now: datetime | None = None) -> TeamDashboardStats:
    """Team counters; ``recently_added`` covers the last 30 days."""
    now = now or datetime.now(UTC)
    total = await count(session, Team)
    active = await count(session, Team, Team.active())
    recent = await count(session, Team, Team.created_at >= now - timedelta(days=RECENT_DAYS))
    return TeamDashboardStats(total=total, active=active, inactive=total - active, recently_added=recent)


async def award_stats(session: AsyncSession) -> AwardDashboardStats:
    return AwardDashboardStats(
        total=await count(session, Award),
        active=await count(session, Award, Award.active()),
        featured=await count(session, Award, Award.featured_only()),
    )


async def get_dashboard(session: AsyncSession) -> DashboardResponse:
    """Assemble every dashboard widget in one response.

    Dashboard figures are read straight from the database so editors always
    see their latest changes.
    """
    principles = await session.execute(
        select(Principle)
        .where(Principle.not_deleted())
        .order_by(Principle.created_at.desc(), Principle.id.desc())
        .limit(LATEST_LIMIT)
    )
    team = await session.execute(
        select(Team).order_by(Team.created_at.desc(), Team.id.desc()).limit(LATEST_LIMIT)
    )
    awards = await session.execute(
        select(Award).order_by(Award.created_at.desc(), Award.id.desc()).limit(LATEST_LIMIT)
    )

    dashboard = DashboardResponse(
        principles=await principle_stats(session),
        team=await team_stats(session),
        awards=await award_stats(session),
        latest_principles=[PrincipleAdminResponse.model_validate(p) for p in principles.scalars().all()],
        latest_team=[TeamMemberAdminResponse.model_validate(m) for m in team.scalars().all()],
        latest_awards=[AwardAdminResponse.model_validate(a) for a in awards.scalars().all()],
    )
    logger.debug("Built admin dashboard")
    return dashboard
