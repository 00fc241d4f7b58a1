"""Pydantic v2 schemas for team member endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from showcase_api.schemas.common import PaginationMeta


class TeamMemberPublic(BaseModel):
    """Team member as served to the website."""

    id: int
    name: str
    position: str
    location: str | None = None
    image: str | None = None
    sort_order: int


class TeamMemberDetailPublic(TeamMemberPublic):
    """Single team member, with timestamps."""

    created_at: datetime
    updated_at: datetime


class TeamStats(BaseModel):
    """Team counts; percentage_active is rounded to two decimals."""

    total: int
    active: int
    inactive: int
    percentage_active: float


class TeamMemberAdminResponse(BaseModel):
    """Full team member record for the admin surface."""

    model_config = {"from_attributes": True}

    id: int
    name: str
    position: str
    location: str | None = None
    image: str
    is_active: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime


class PaginatedTeamResponse(BaseModel):
    """Paginated list of team members."""

    items: list[TeamMemberAdminResponse]
    pagination: PaginationMeta


class TeamMemberCreateRequest(BaseModel):
    """Request body for adding a team member."""

    name: str = Field(min_length=1, max_length=255)
    position: str = Field(min_length=1, max_length=255)
    location: str | None = Field(default=None, max_length=255)
    image: str = Field(min_length=1, max_length=255)
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)


class TeamMemberUpdateRequest(BaseModel):
    """Request body for updating a team member.

    All fields optional -- only provided fields are updated.
    """

    name: str | None = Field(default=None, min_length=1, max_length=255)
    position: str | None = Field(default=None, min_length=1, max_length=255)
    location: str | None = Field(default=None, max_length=255)
    image: str | None = Field(default=None, min_length=1, max_length=255)
    is_active: bool | None = None
    sort_order: int | None = Field(default=None, ge=0)
