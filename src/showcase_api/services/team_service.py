"""Team service -- cached public reads and admin writes for team members."""

from collections.abc import Sequence
from typing import Any, Literal

from loguru import logger
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase_api.core.config import Settings
from showcase_api.lib.cache import CacheBackend
from showcase_api.lib.media import asset_url
from showcase_api.models.team import Team
from showcase_api.schemas.common import PaginationMeta
from showcase_api.schemas.team import TeamMemberDetailPublic, TeamMemberPublic, TeamStats
from showcase_api.services import content_service

ACTIVE_KEY = "team.active"
STATS_KEY = "team.stats"

_UPDATABLE_FIELDS: frozenset[str] = frozenset({"name", "position", "location", "image", "is_active", "sort_order"})
_NULLABLE_FIELDS: frozenset[str] = frozenset({"location"})


def to_public(member: Team, base_url: str) -> dict[str, Any]:
    """Project a team member into its JSON-ready list shape."""
    return TeamMemberPublic(
        id=member.id,
        name=member.name,
        position=member.position,
        location=member.location,
        image=asset_url(member.image, base_url),
        sort_order=member.sort_order,
    ).model_dump(mode="json")


def to_public_detail(member: Team, base_url: str) -> dict[str, Any]:
    """Project a team member into its single-record shape (with timestamps)."""
    return TeamMemberDetailPublic(
        id=member.id,
        name=member.name,
        position=member.position,
        location=member.location,
        image=asset_url(member.image, base_url),
        sort_order=member.sort_order,
        created_at=member.created_at,
        updated_at=member.updated_at,
    ).model_dump(mode="json")


async def invalidate(cache: CacheBackend) -> None:
    """Evict the cached team list and statistics."""
    await cache.delete(ACTIVE_KEY, STATS_KEY)


def percentage_active(total: int, active: int) -> float:
    """Share of active members as a percentage rounded to 2 decimals (0 for an empty team)."""
    if total == 0:
        return 0
    return round(active / total * 100, 2)


# ---------------------------------------------------------------------------
# Public reads
# ---------------------------------------------------------------------------


async def list_active(session: AsyncSession, cache: CacheBackend, settings: Settings) -> list[dict[str, Any]]:
    """Return active team members in display order, served from cache when live."""

    async def compute() -> list[dict[str, Any]]:
        result = await session.execute(select(Team).where(Team.active()).order_by(*Team.ordering()))
        return [to_public(m, settings.asset_base_url) for m in result.scalars().all()]

    return await cache.remember(ACTIVE_KEY, settings.cache_list_ttl, compute)


async def get_active(session: AsyncSession, settings: Settings, member_id: int) -> dict[str, Any] | None:
    """Return one active team member, or None if missing or inactive.

    Single members are read straight from the database.
    """
    result = await session.execute(select(Team).where(Team.id == member_id, Team.active()))
    member = result.scalar_one_or_none()
    if member is None:
        return None
    return to_public_detail(member, settings.asset_base_url)


async def get_stats(session: AsyncSession, cache: CacheBackend, settings: Settings) -> dict[str, Any]:
    """Return total/active/inactive counts and the active percentage."""

    async def compute() -> dict[str, Any]:
        total = await content_service.count(session, Team)
        active = await content_service.count(session, Team, Team.active())
        return TeamStats(
            total=total,
            active=active,
            inactive=total - active,
            percentage_active=percentage_active(total, active),
        ).model_dump()

    return await cache.remember(STATS_KEY, settings.cache_stats_ttl, compute)


# ---------------------------------------------------------------------------
# Admin reads
# ---------------------------------------------------------------------------


async def list_members(
    session: AsyncSession,
    *,
    is_active: bool | None = None,
    search: str | None = None,
    direction: Literal["asc", "desc"] = "asc",
    page: int = 1,
    page_size: int = 20,
) -> tuple[list[Team], PaginationMeta]:
    """List team members for the admin table.

    Args:
        session: Database session.
        is_active: Filter by active flag (None for all).
        search: Case-insensitive substring match on name, position, or location.
        direction: sort_order direction.
        page: Page number (1-based).
        page_size: Items per page.
    """
    criteria = []
    if is_active is not None:
        criteria.append(Team.is_active.is_(is_active))
    if search:
        pattern = f"%{search}%"
        criteria.append(
            or_(Team.name.ilike(pattern), Team.position.ilike(pattern), Team.location.ilike(pattern))
        )

    query = select(Team).where(*criteria).order_by(*Team.ordering(direction))
    count_query = select(func.count(Team.id)).where(*criteria)
    members, meta = await content_service.paginate(session, query, count_query, page=page, page_size=page_size)
    logger.info(f"Listed {len(members)} team members (total={meta.total}, page={page})")
    return members, meta


async def get_member(session: AsyncSession, member_id: int) -> Team | None:
    """Get a team member by ID regardless of active flag."""
    result = await session.execute(select(Team).where(Team.id == member_id))
    return result.scalar_one_or_none()


async def _require(session: AsyncSession, member_id: int) -> Team:
    member = await get_member(session, member_id)
    if member is None:
        msg = f"Team member {member_id} not found"
        raise ValueError(msg)
    return member


# ---------------------------------------------------------------------------
# Admin writes
# ---------------------------------------------------------------------------


async def create_member(
    session: AsyncSession,
    cache: CacheBackend,
    *,
    name: str,
    position: str,
    image: str,
    location: str | None = None,
    is_active: bool = True,
    sort_order: int = 0,
) -> Team:
    """Add a team member.

    Raises:
        ValueError: If a member with the same name already exists.
    """
    member = Team(
        name=name,
        position=position,
        location=location,
        image=image,
        is_active=is_active,
        sort_order=sort_order,
    )
    session.add(member)
    await content_service.commit_or_conflict(session, f"Team member '{name}' already exists")
    await session.refresh(member)
    await invalidate(cache)
    logger.info(f"Created team member {member.id} ({name})")
    return member


async def update_member(
    session: AsyncSession,
    cache: CacheBackend,
    member_id: int,
    *,
    data: dict[str, Any],
) -> Team:
    """Update a team member with the given fields.

    Raises:
        ValueError: If the member is not found or the name is taken.
    """
    member = await _require(session, member_id)
    content_service.apply_changes(member, data, _UPDATABLE_FIELDS, _NULLABLE_FIELDS)
    await content_service.commit_or_conflict(session, "Update would create a duplicate team member name")
    await session.refresh(member)
    await invalidate(cache)
    logger.info(f"Updated team member {member.id}")
    return member


async def toggle_active(session: AsyncSession, cache: CacheBackend, member_id: int) -> Team:
    """Flip a team member between active and inactive."""
    member = await _require(session, member_id)
    member.is_active = not member.is_active
    await session.commit()
    await invalidate(cache)
    logger.info(f"Team member {member.id} is now {'active' if member.is_active else 'inactive'}")
    return member


async def delete_member(session: AsyncSession, cache: CacheBackend, member_id: int) -> None:
    """Permanently remove a team member."""
    member = await _require(session, member_id)
    await session.delete(member)
    await session.commit()
    await invalidate(cache)
    logger.info(f"Deleted team member {member_id}")


async def reorder_members(session: AsyncSession, cache: CacheBackend, ids: Sequence[int]) -> list[Team]:
    """Persist a drag-and-drop ordering of team members in one commit."""
    members = await content_service.reorder_records(session, Team, ids)
    await session.commit()
    await invalidate(cache)
    logger.info(f"Reordered {len(members)} team members")
    return members


async def set_active_many(session: AsyncSession, cache: CacheBackend, ids: Sequence[int], *, value: bool) -> int:
    """Activate or deactivate the selected team members.

    Returns:
        Number of members updated.
    """
    members = await content_service.fetch_by_ids(session, Team, ids)
    for member in members:
        member.is_active = value
    await session.commit()
    await invalidate(cache)
    logger.info(f"Set is_active={value} on {len(members)} team members")
    return len(members)


async def delete_many(session: AsyncSession, cache: CacheBackend, ids: Sequence[int]) -> int:
    """Permanently remove the selected team members."""
    members = await content_service.fetch_by_ids(session, Team, ids)
    for member in members:
        await session.delete(member)
    await session.commit()
    await invalidate(cache)
    logger.info(f"Deleted {len(members)} team members")
    return len(members)
