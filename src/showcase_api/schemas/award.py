"""Pydantic v2 schemas for award endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from showcase_api.schemas.common import PaginationMeta


class AwardPublic(BaseModel):
    """Award as served to the website."""

    id: int
    title: str
    location: str
    featured: bool


class AwardAdminResponse(BaseModel):
    """Full award record for the admin surface."""

    model_config = {"from_attributes": True}

    id: int
    title: str
    location: str
    featured: bool
    is_active: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime


class PaginatedAwardResponse(BaseModel):
    """Paginated list of awards."""

    items: list[AwardAdminResponse]
    pagination: PaginationMeta


class AwardCreateRequest(BaseModel):
    """Request body for creating an award.

    ``sort_order`` defaults to one past the current maximum when omitted.
    """

    title: str = Field(min_length=1, max_length=255)
    location: str = Field(min_length=1, max_length=255)
    featured: bool = False
    is_active: bool = True
    sort_order: int | None = Field(default=None, ge=0)


class AwardUpdateRequest(BaseModel):
    """Request body for updating an award.

    All fields optional -- only provided fields are updated.
    """

    title: str | None = Field(default=None, min_length=1, max_length=255)
    location: str | None = Field(default=None, min_length=1, max_length=255)
    featured: bool | None = None
    is_active: bool | None = None
    sort_order: int | None = Field(default=None, ge=0)
