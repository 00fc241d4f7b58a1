"""Pydantic v2 schemas for principle endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from showcase_api.schemas.common import PaginationMeta

# ---------------------------------------------------------------------------
# Public schemas
# ---------------------------------------------------------------------------


class PrinciplePublic(BaseModel):
    """Principle as served to the website, with asset URLs expanded."""

    id: int
    title: str
    subtitle: str | None = None
    description: str
    icon: str | None = None
    image: str | None = None
    sort_order: int


class PrincipleStats(BaseModel):
    """Counts over non-deleted principles."""

    total: int
    active: int
    inactive: int


# ---------------------------------------------------------------------------
# Admin schemas
# ---------------------------------------------------------------------------


class PrincipleAdminResponse(BaseModel):
    """Full principle record for the admin surface."""

    model_config = {"from_attributes": True}

    id: int
    title: str
    subtitle: str | None = None
    description: str
    icon: str | None = None
    image: str | None = None
    sort_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


class PaginatedPrincipleResponse(BaseModel):
    """Paginated list of principles."""

    items: list[PrincipleAdminResponse]
    pagination: PaginationMeta


class PrincipleCreateRequest(BaseModel):
    """Request body for creating a principle.

    ``sort_order`` defaults to one past the current maximum when omitted.
    """

    title: str = Field(min_length=1, max_length=255)
    subtitle: str | None = Field(default=None, max_length=255)
    description: str = Field(min_length=1, max_length=1000)
    icon: str | None = Field(default=None, max_length=255)
    image: str | None = Field(default=None, max_length=255)
    sort_order: int | None = Field(default=None, ge=0)
    is_active: bool = True


class PrincipleUpdateRequest(BaseModel):
    """Request body for updating a principle.

    All fields optional -- only provided fields are updated.
    """

    title: str | None = Field(default=None, min_length=1, max_length=255)
    subtitle: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, min_length=1, max_length=1000)
    icon: str | None = Field(default=None, max_length=255)
    image: str | None = Field(default=None, max_length=255)
    sort_order: int | None = Field(default=None, ge=0)
    is_active: bool | None = None
