"""Award API endpoints: public website reads and admin management."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from showcase_api.api.responses import failure_response, success_response, value_error_status
from showcase_api.core.cache import get_cache
from showcase_api.core.config import Settings, get_settings
from showcase_api.core.dependencies import get_async_session, require_ability
from showcase_api.core.policy import Ability
from showcase_api.lib.cache import CacheBackend
from showcase_api.schemas.award import (
    AwardAdminResponse,
    AwardCreateRequest,
    AwardUpdateRequest,
    PaginatedAwardResponse,
)
from showcase_api.schemas.common import BulkActionResponse, BulkIdsRequest, ReorderRequest
from showcase_api.services import award_service

awards_router = APIRouter(
    prefix="/awards",
    tags=["awards"],
)

admin_awards_router = APIRouter(
    prefix="/admin/awards",
    tags=["admin-awards"],
)

_RESOURCE = "awards"


# ---------------------------------------------------------------------------
# Public endpoints
# ---------------------------------------------------------------------------


@awards_router.get("")
async def list_public_awards(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """List active awards, lowest sort_order first, newest first on ties."""
    try:
        awards = await award_service.list_active(session, cache, settings)
    except Exception as e:
        logger.error(f"Failed to fetch awards: {e}")
        return failure_response("Failed to fetch awards", e, settings)
    return success_response(awards)


@awards_router.get("/featured")
async def list_public_featured_awards(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """List awards that are both active and featured."""
    try:
        awards = await award_service.list_featured(session, cache, settings)
    except Exception as e:
        logger.error(f"Failed to fetch featured awards: {e}")
        return failure_response("Failed to fetch featured awards", e, settings)
    return success_response(awards)


# ---------------------------------------------------------------------------
# Admin endpoints
# ---------------------------------------------------------------------------


@admin_awards_router.get(
    "",
    dependencies=[Depends(require_ability(Ability.VIEW_ANY, _RESOURCE))],
)
async def list_admin_awards(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    is_active: Annotated[bool | None, Query(description="Filter by active flag")] = None,
    featured: Annotated[bool | None, Query(description="Filter by featured flag")] = None,
    search: Annotated[str | None, Query(description="Match title or location (partial)")] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=100)] = 20,
) -> PaginatedAwardResponse:
    """List awards, active and inactive, with filters."""
    try:
        awards, meta = await award_service.list_awards(
            session,
            is_active=is_active,
            featured=featured,
            search=search,
            page=page,
            page_size=page_size,
        )
    except Exception as e:
        logger.error(f"Unexpected error listing awards: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing awards.",
        ) from e
    return PaginatedAwardResponse(
        items=[AwardAdminResponse.model_validate(a) for a in awards],
        pagination=meta,
    )


@admin_awards_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_ability(Ability.CREATE, _RESOURCE))],
)
async def create_award_endpoint(
    body: AwardCreateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> AwardAdminResponse:
    """Create an award; appended last unless ``sort_order`` is given."""
    try:
        award = await award_service.create_award(session, cache, **body.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error creating award: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error creating award.",
        ) from e
    return AwardAdminResponse.model_validate(award)


@admin_awards_router.put(
    "/order",
    dependencies=[Depends(require_ability(Ability.REORDER, _RESOURCE))],
)
async def reorder_awards_endpoint(
    body: ReorderRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> list[AwardAdminResponse]:
    try:
        awards = await award_service.reorder_awards(session, cache, body.ids)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error reordering awards: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error reordering awards.",
        ) from e
    return [AwardAdminResponse.model_validate(a) for a in awards]


@admin_awards_router.post(
    "/bulk/activate",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def bulk_activate_awards(
    body: BulkIdsRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> BulkActionResponse:
    try:
        affected = await award_service.set_active_many(session, cache, body.ids, value=True)
    except Exception as e:
        logger.error(f"Unexpected error bulk-activating awards: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error bulk-activating awards.",
        ) from e
    return BulkActionResponse(affected=affected)


@admin_awards_router.post(
    "/bulk/deactivate",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def bulk_deactivate_awards(
    body: BulkIdsRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> BulkActionResponse:
    try:
        affected = await award_service.set_active_many(session, cache, body.ids, value=False)
    except Exception as e:
        logger.error(f"Unexpected error bulk-deactivating awards: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error bulk-deactivating awards.",
        ) from e
    return BulkActionResponse(affected=affected)


@admin_awards_router.post(
    "/bulk/delete",
    dependencies=[Depends(require_ability(Ability.DELETE, _RESOURCE))],
)
async def bulk_delete_awards(
    body: BulkIdsRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> BulkActionResponse:
    try:
        affected = await award_service.delete_many(session, cache, body.ids)
    except Exception as e:
        logger.error(f"Unexpected error bulk-deleting awards: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error bulk-deleting awards.",
        ) from e
    return BulkActionResponse(affected=affected)


# ---------------------------------------------------------------------------
# Parameterized admin routes (/{award_id} paths AFTER fixed-prefix routes)
# ---------------------------------------------------------------------------


@admin_awards_router.get(
    "/{award_id}",
    dependencies=[Depends(require_ability(Ability.VIEW, _RESOURCE))],
)
async def get_admin_award(
    award_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> AwardAdminResponse:
    try:
        award = await award_service.get_award(session, award_id)
    except Exception as e:
        logger.error(f"Unexpected error fetching award {award_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error fetching award.",
        ) from e
    if award is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Award not found")
    return AwardAdminResponse.model_validate(award)


@admin_awards_router.patch(
    "/{award_id}",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def update_award_endpoint(
    award_id: int,
    body: AwardUpdateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> AwardAdminResponse:
    """Update an award. Only provided fields are updated."""
    try:
        award = await award_service.update_award(session, cache, award_id, data=body.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=value_error_status(str(e)), detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error updating award {award_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error updating award.",
        ) from e
    return AwardAdminResponse.model_validate(award)


@admin_awards_router.delete(
    "/{award_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_ability(Ability.DELETE, _RESOURCE))],
)
async def delete_award_endpoint(
    award_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> None:
    try:
        await award_service.delete_award(session, cache, award_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error deleting award {award_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error deleting award.",
        ) from e


@admin_awards_router.post(
    "/{award_id}/toggle-active",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def toggle_award_active(
    award_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> AwardAdminResponse:
    try:
        award = await award_service.toggle_active(session, cache, award_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error toggling award {award_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error toggling award.",
        ) from e
    return AwardAdminResponse.model_validate(award)


@admin_awards_router.post(
    "/{award_id}/toggle-featured",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def toggle_award_featured(
    award_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> AwardAdminResponse:
    try:
        award = await award_service.toggle_featured(session, cache, award_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error toggling featured flag on award {award_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error toggling featured flag on award.",
        ) from e
    return AwardAdminResponse.model_validate(award)
