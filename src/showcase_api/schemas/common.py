"""Common Pydantic v2 schemas shared across the API.

Provides pagination, bulk-action, reorder, and error response schemas.
"""

from pydantic import BaseModel, Field, field_validator


class PaginationMeta(BaseModel):
    """Pagination metadata included in paginated responses."""

    total: int = Field(description="Total number of items")
    page: int = Field(description="Current page number")
    page_size: int = Field(description="Items per page")
    total_pages: int = Field(description="Total number of pages")


class BulkIdsRequest(BaseModel):
    """Selection of record IDs for a bulk action."""

    ids: list[int] = Field(min_length=1, description="IDs of the selected records")


class BulkActionResponse(BaseModel):
    """Outcome of a bulk action: the number of records actually changed."""

    affected: int


class ReorderRequest(BaseModel):
    """New display sequence for a page of records, first ID shown first."""

    ids: list[int] = Field(min_length=1, description="Record IDs in their new display order")

    @field_validator("ids")
    @classmethod
    def validate_unique(cls, v: list[int]) -> list[int]:
        if len(set(v)) != len(v):
            msg = "ids must not contain duplicates"
            raise ValueError(msg)
        return v


class ErrorResponse(BaseModel):
    """Failure envelope returned by the public endpoints."""

    success: bool = False
    message: str = Field(description="Human-readable error message")
    error: str | None = Field(default=None, description="Error detail (exception text only in debug mode)")
