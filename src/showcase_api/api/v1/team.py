"""Team API endpoints: public website reads and admin management."""

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
from showcase_api.schemas.team import (
    PaginatedTeamResponse,
    TeamMemberAdminResponse,
    TeamMemberCreateRequest,
    TeamMemberUpdateRequest,
)
from showcase_api.services import team_service

team_router = APIRouter(
    prefix="/team",
    tags=["team"],
)

admin_team_router = APIRouter(
    prefix="/admin/team",
    tags=["admin-team"],
)

_RESOURCE = "team"


# ---------------------------------------------------------------------------
# Public endpoints
# ---------------------------------------------------------------------------


@team_router.get("")
async def list_public_team(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """List active team members in display order."""
    try:
        members = await team_service.list_active(session, cache, settings)
    except Exception as e:
        logger.error(f"Failed to retrieve team members: {e}")
        return failure_response("Failed to retrieve team members", e, settings)
    return success_response(members, message="Team members retrieved successfully", count=len(members))


@team_router.get("/stats/overview")
async def get_public_team_stats(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    try:
        stats = await team_service.get_stats(session, cache, settings)
    except Exception as e:
        logger.error(f"Failed to retrieve team statistics: {e}")
        return failure_response("Failed to retrieve team statistics", e, settings)
    return success_response(stats, message="Team statistics retrieved successfully")


@team_router.get("/{member_id}")
async def get_public_team_member(
    member_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """Get one active team member with timestamps."""
    try:
        member = await team_service.get_active(session, settings, member_id)
    except Exception as e:
        logger.error(f"Failed to retrieve team member {member_id}: {e}")
        return failure_response("Failed to retrieve team member", e, settings)
    if member is None:
        return not_found_response(
            "Team member not found or is inactive",
            error="The requested team member does not exist or is not currently active",
        )
    return success_response(member, message="Team member retrieved successfully")


# ---------------------------------------------------------------------------
# Admin endpoints
# ---------------------------------------------------------------------------


@admin_team_router.get(
    "",
    dependencies=[Depends(require_ability(Ability.VIEW_ANY, _RESOURCE))],
)
async def list_admin_team(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    is_active: Annotated[bool | None, Query(description="Filter by active flag")] = None,
    search: Annotated[str | None, Query(description="Match name, position or location (partial)")] = None,
    direction: Annotated[Literal["asc", "desc"], Query(description="sort_order direction")] = "asc",
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=100)] = 20,
) -> PaginatedTeamResponse:
    """List team members, active and inactive, with filters."""
    try:
        members, meta = await team_service.list_members(
            session,
            is_active=is_active,
            search=search,
            direction=direction,
            page=page,
            page_size=page_size,
        )
    except Exception as e:
        logger.error(f"Unexpected error listing team members: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing team members.",
        ) from e
    return PaginatedTeamResponse(
        items=[TeamMemberAdminResponse.model_validate(m) for m in members],
        pagination=meta,
    )


@admin_team_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_ability(Ability.CREATE, _RESOURCE))],
)
async def create_team_member_endpoint(
    body: TeamMemberCreateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> TeamMemberAdminResponse:
    try:
        member = await team_service.create_member(session, cache, **body.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error creating team member: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error creating team member.",
        ) from e
    return TeamMemberAdminResponse.model_validate(member)


@admin_team_router.put(
    "/order",
    dependencies=[Depends(require_ability(Ability.REORDER, _RESOURCE))],
)
async def reorder_team_endpoint(
    body: ReorderRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> list[TeamMemberAdminResponse]:
    """Save a new display order for the given team members."""
    try:
        members = await team_service.reorder_members(session, cache, body.ids)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error reordering team members: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error reordering team members.",
        ) from e
    return [TeamMemberAdminResponse.model_validate(m) for m in members]


@admin_team_router.post(
    "/bulk/activate",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def bulk_activate_team(
    body: BulkIdsRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> BulkActionResponse:
    try:
        affected = await team_service.set_active_many(session, cache, body.ids, value=True)
    except Exception as e:
        logger.error(f"Unexpected error bulk-activating team members: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error bulk-activating team members.",
        ) from e
    return BulkActionResponse(affected=affected)


@admin_team_router.post(
    "/bulk/deactivate",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def bulk_deactivate_team(
    body: BulkIdsRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> BulkActionResponse:
    try:
        affected = await team_service.set_active_many(session, cache, body.ids, value=False)
    except Exception as e:
        logger.error(f"Unexpected error bulk-deactivating team members: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error bulk-deactivating team members.",
        ) from e
    return BulkActionResponse(affected=affected)


@admin_team_router.post(
    "/bulk/delete",
    dependencies=[Depends(require_ability(Ability.DELETE, _RESOURCE))],
)
async def bulk_delete_team(
    body: BulkIdsRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> BulkActionResponse:
    try:
        affected = await team_service.delete_many(session, cache, body.ids)
    except Exception as e:
        logger.error(f"Unexpected error bulk-deleting team members: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error bulk-deleting team members.",
        ) from e
    return BulkActionResponse(affected=affected)


# ---------------------------------------------------------------------------
# Parameterized admin routes (/{member_id} paths AFTER fixed-prefix routes)
# ---------------------------------------------------------------------------


@admin_team_router.get(
    "/{member_id}",
    dependencies=[Depends(require_ability(Ability.VIEW, _RESOURCE))],
)
async def get_admin_team_member(
    member_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> TeamMemberAdminResponse:
    try:
        member = await team_service.get_member(session, member_id)
    except Exception as e:
        logger.error(f"Unexpected error fetching team member {member_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error fetching team member.",
        ) from e
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team member not found")
    return TeamMemberAdminResponse.model_validate(member)


@admin_team_router.patch(
    "/{member_id}",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def update_team_member_endpoint(
    member_id: int,
    body: TeamMemberUpdateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> TeamMemberAdminResponse:
    """Update a team member. Only provided fields are updated."""
    try:
        member = await team_service.update_member(
            session, cache, member_id, data=body.model_dump(exclude_unset=True)
        )
    except ValueError as e:
        raise HTTPException(status_code=value_error_status(str(e)), detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error updating team member {member_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error updating team member.",
        ) from e
    return TeamMemberAdminResponse.model_validate(member)


@admin_team_router.delete(
    "/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_ability(Ability.DELETE, _RESOURCE))],
)
async def delete_team_member_endpoint(
    member_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> None:
    try:
        await team_service.delete_member(session, cache, member_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error deleting team member {member_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error deleting team member.",
        ) from e


@admin_team_router.post(
    "/{member_id}/toggle-active",
    dependencies=[Depends(require_ability(Ability.UPDATE, _RESOURCE))],
)
async def toggle_team_member_active(
    member_id: int,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cache: Annotated[CacheBackend, Depends(get_cache)],
) -> TeamMemberAdminResponse:
    try:
        member = await team_service.toggle_active(session, cache, member_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error toggling team member {member_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error toggling team member.",
        ) from e
    return TeamMemberAdminResponse.model_validate(member)
