"""Principle API endpoints: public website reads and admin management."""

from datetime import UTC, datetime
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from showcase_api.api.responses import (
    failure_response,
    not_found_response,
    success_response,
    value_error_status,
)
from showcase_api.core.cache import get_cache
from showcase_api.core.config import Settings, get_settings
from showcase_api.core.dependencies import get_async_session, require_ability
from showcase_api.core.policy import Ability
from showcase_api.lib.cache import CacheBackend
from showcase_api.schemas.common import BulkActionResponse, BulkIdsRequest, ReorderRequest
from showcase_api.schemas.principle import (
    PaginatedPrincipleResponse,
    PrincipleAdminResponse,
    PrincipleCreateRequest,
    PrincipleUpdateRequest,
)
from showcase_api.services import principle_service

principles_router = APIRouter(
    prefix="/principles",
    tags=["principles"],
)

admin_principles_router = APIRouter(
    prefix="/admin/principles",
    tags=["admin-principles"],
)

_RESOURCE = "principles"


# ---------------------------------------------------------------------------
# Public endpoints (fixed paths before /{principle_id})
# ---------------------------------------------------------------------------


@principles_router.get("")
async def list_public_principles(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """List active principles in display order."""
    try:
        principles = await principle_service.list_active(session, cache, settings)
    except Exception as e:
        logger.error(f"Failed to retrieve principles: {e}")
        return failure_response("Failed to retrieve principles", e, settings)
    return success_response(
        principles,
        message="Principles retrieved successfully",
        meta={"total": len(principles), "timestamp": datetime.now(UTC).isoformat()},
    )


@principles_router.get("/stats/overview")
async def get_public_principle_stats(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """Counts of active and inactive principles."""
    try:
        stats = await principle_service.get_stats(session, cache, settings)
    except Exception as e:
        logger.error(f"Failed to retrieve principle statistics: {e}")
        return failure_response("Failed to retrieve statistics", e, settings)
    return success_response(stats, message="Statistics retrieved successfully")


@principles_router.get("/{principle_id}")
async def get_public_principle(
    principle_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """Get one active principle."""
    try:
        principle = await principle_service.get_active(session, cache, settings, principle_id)
    except Exception as e:
        logger.error(f"Failed to retrieve principle {principle_id}: {e}")
        return failure_response("Failed to retrieve principle", e, settings)
    if principle is None:
        return not_found_response("Principle not found or inactive")
    return success_response(principle, message="Principle retrieved successfully")


# ---------------------------------------------------------------------------
# Admin endpoints
# ---------------------------------------------------------------------------


@admin_principles_router.get(
    "",
    dependencies=[Depends(require_ability(Ability.VIEW_ANY, _RESOURCE))],
)
async def list_admin_principles(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    is_active: Annotated[bool | None, Query(description="Filter by active flag")] = None,
    trashed: Annotated[Literal["without", "with", "only"], Query(description="Soft-deleted rows")] = "without",
    search: Annotated[str | None, Query(description="Match title or subtitle (partial)")] = None,
    direction: Annotated[Literal["asc", "desc"], Query(description="sort_order direction")] = "asc",
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=100)] = 20,
) -> PaginatedPrincipleResponse:
    """List principles, active and inactive, with filters."""
    try:
        principles, meta = await principle_service.list_principles(
            session,
            is_active=is_active,
            trashed=trashed,
            search=search,
            direction=direction,
            page=page,
            page_size=page_size,
        )
    except Exception as e:
        logger.error(f"Unexpected error listing principles: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing principles.",
        ) from e
    return PaginatedPrincipleResponse(
        items=[PrincipleAdminResponse.model_validate(p) for p in principles],
        pagination=meta,
    )


@admin_principles_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_ability(Ability.CREATE, _RESOURCE))],
)
async def create_principle_endpoint(
    body: PrincipleCreateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> PrincipleAdminResponse:
    """Create a principle; appended last unless ``sort_order`` is given."""
    try:
        principle = await principle_service.create_principle(session, cache, **body.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error creating principle: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error creating principle.",
        ) from e
    return PrincipleAdminResponse.model_validate(principle)


@admin_principles_router.put(
    "/order",
    dependencies=[Depends(require_ability(Ability.REORDER, _RESOURCE))],
)
async def reorder_principles_endpoint(
    body: ReorderRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> list[PrincipleAdminResponse]:
    """Save a new display order for the given principles."""
    try:
        principles = await principle_service.reorder_principles(session, cache, body.ids)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error reordering principles: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error reordering principles.",
        ) from e
    return [PrincipleAdminResponse.model_validate(p) for p in principles]


@admin_principles_router.post(
    "/bulk/activate",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def bulk_activate_principles(
    body: BulkIdsRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> BulkActionResponse:
    try:
        affected = await principle_service.set_active_many(session, cache, body.ids, value=True)
    except Exception as e:
        logger.error(f"Unexpected error bulk-activating principles: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error bulk-activating principles.",
        ) from e
    return BulkActionResponse(affected=affected)


@admin_principles_router.post(
    "/bulk/deactivate",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def bulk_deactivate_principles(
    body: BulkIdsRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> BulkActionResponse:
    try:
        affected = await principle_service.set_active_many(session, cache, body.ids, value=False)
    except Exception as e:
        logger.error(f"Unexpected error bulk-deactivating principles: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error bulk-deactivating principles.",
        ) from e
    return BulkActionResponse(affected=affected)


@admin_principles_router.post(
    "/bulk/delete",
    dependencies=[Depends(require_ability(Ability.DELETE, _RESOURCE))],
)
async def bulk_delete_principles(
    body: BulkIdsRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> BulkActionResponse:
    """Move the selected principles to the trash."""
    try:
        affected = await principle_service.delete_many(session, cache, body.ids)
    except Exception as e:
        logger.error(f"Unexpected error bulk-deleting principles: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error bulk-deleting principles.",
        ) from e
    return BulkActionResponse(affected=affected)


@admin_principles_router.post(
    "/bulk/restore",
    dependencies=[Depends(require_ability(Ability.RESTORE, _RESOURCE))],
)
async def bulk_restore_principles(
    body: BulkIdsRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> BulkActionResponse:
    try:
        affected = await principle_service.restore_many(session, cache, body.ids)
    except Exception as e:
        logger.error(f"Unexpected error bulk-restoring principles: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error bulk-restoring principles.",
        ) from e
    return BulkActionResponse(affected=affected)


@admin_principles_router.post(
    "/bulk/force-delete",
    dependencies=[Depends(require_ability(Ability.FORCE_DELETE, _RESOURCE))],
)
async def bulk_force_delete_principles(
    body: BulkIdsRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> BulkActionResponse:
    """Permanently remove the selected trashed principles."""
    try:
        affected = await principle_service.force_delete_many(session, cache, body.ids)
    except Exception as e:
        logger.error(f"Unexpected error bulk force-deleting principles: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error bulk force-deleting principles.",
        ) from e
    return BulkActionResponse(affected=affected)


# ---------------------------------------------------------------------------
# Parameterized admin routes (/{principle_id} paths AFTER fixed-prefix routes)
# ---------------------------------------------------------------------------


@admin_principles_router.get(
    "/{principle_id}",
    dependencies=[Depends(require_ability(Ability.VIEW, _RESOURCE))],
)
async def get_admin_principle(
    principle_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> PrincipleAdminResponse:
    """Get any principle, including inactive and trashed ones."""
    try:
        principle = await principle_service.get_principle(session, principle_id, with_trashed=True)
    except Exception as e:
        logger.error(f"Unexpected error fetching principle {principle_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error fetching principle.",
        ) from e
    if principle is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Principle not found")
    return PrincipleAdminResponse.model_validate(principle)


@admin_principles_router.patch(
    "/{principle_id}",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def update_principle_endpoint(
    principle_id: int,
    body: PrincipleUpdateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> PrincipleAdminResponse:
    """Update a principle. Only provided fields are updated."""
    try:
        principle = await principle_service.update_principle(
            session, cache, principle_id, data=body.model_dump(exclude_unset=True)
        )
    except ValueError as e:
        raise HTTPException(status_code=value_error_status(str(e)), detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error updating principle {principle_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error updating principle.",
        ) from e
    return PrincipleAdminResponse.model_validate(principle)


@admin_principles_router.delete(
    "/{principle_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_ability(Ability.DELETE, _RESOURCE))],
)
async def delete_principle_endpoint(
    principle_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> None:
    """Move a principle to the trash."""
    try:
        await principle_service.delete_principle(session, cache, principle_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error deleting principle {principle_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error deleting principle.",
        ) from e


@admin_principles_router.post(
    "/{principle_id}/toggle-active",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def toggle_principle_active(
    principle_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> PrincipleAdminResponse:
    try:
        principle = await principle_service.toggle_active(session, cache, principle_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error toggling principle {principle_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error toggling principle.",
        ) from e
    return PrincipleAdminResponse.model_validate(principle)


@admin_principles_router.post(
    "/{principle_id}/restore",
    dependencies=[Depends(require_ability(Ability.RESTORE, _RESOURCE))],
)
async def restore_principle_endpoint(
    principle_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> PrincipleAdminResponse:
    """Bring a trashed principle back."""
    try:
        principle = await principle_service.restore_principle(session, cache, principle_id)
    except ValueError as e:
        raise HTTPException(status_code=value_error_status(str(e)), detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error restoring principle {principle_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error restoring principle.",
        ) from e
    return PrincipleAdminResponse.model_validate(principle)


@admin_principles_router.delete(
    "/{principle_id}/force",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_ability(Ability.FORCE_DELETE, _RESOURCE))],
)
async def force_delete_principle_endpoint(
    principle_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> None:
    """Permanently remove a trashed principle."""
    try:
        await principle_service.force_delete_principle(session, cache, principle_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error force-deleting principle {principle_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error force-deleting principle.",
        ) from e
    logger.info(f"Principle {principle_id} permanently removed via admin")
