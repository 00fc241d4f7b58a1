"""Pydantic v2 schemas for the admin dashboard widgets."""

from pydantic import BaseModel

from showcase_api.schemas.award import AwardAdminResponse
from showcase_api.schemas.principle import PrincipleAdminResponse
from showcase_api.schemas.team import TeamMemberAdminResponse


class PrincipleDashboardStats(BaseModel):
    total: int
    active: int
    inactive: int
    trashed: int


class TeamDashboardStats(BaseModel):
    total: int
    active: int
    inactive: int
    recently_added: int


class AwardDashboardStats(BaseModel):
    total: int
    active: int
    featured: int


class DashboardResponse(BaseModel):
    """Stat counters and the latest records for each content type."""

    principles: PrincipleDashboardStats
    team: TeamDashboardStats
    awards: AwardDashboardStats
    latest_principles: list[PrincipleAdminResponse]
    latest_team: list[TeamMemberAdminResponse]
    latest_awards: list[AwardAdminResponse]
