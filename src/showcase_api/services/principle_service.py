"""Principle service -- cached public reads and admin writes with soft delete.

Every write evicts the list and stats keys once its commit succeeds.  The
single-record key (``principles.{id}``) is left to expire by TTL.
"""

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any, Literal

from loguru import logger
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase_api.core.config import Settings
from showcase_api.lib.cache import CacheBackend
from showcase_api.lib.media import asset_url
from showcase_api.models.principle import Principle
from showcase_api.schemas.common import PaginationMeta
from showcase_api.schemas.principle import PrinciplePublic, PrincipleStats
from showcase_api.services import content_service

ACTIVE_KEY = "principles.active"
STATS_KEY = "principles.stats"

_UPDATABLE_FIELDS: frozenset[str] = frozenset(
    {"title", "subtitle", "description", "icon", "image", "sort_order", "is_active"}
)
_NULLABLE_FIELDS: frozenset[str] = frozenset({"subtitle", "icon", "image"})

TrashedFilter = Literal["without", "with", "only"]


def detail_key(principle_id: int) -> str:
    return f"principles.{principle_id}"


def to_public(principle: Principle, base_url: str) -> dict[str, Any]:
    """Project a principle into its JSON-ready public shape."""
    return PrinciplePublic(
        id=principle.id,
        title=principle.title,
        subtitle=principle.subtitle,
        description=principle.description,
        icon=asset_url(principle.icon, base_url),
        image=asset_url(principle.image, base_url),
        sort_order=principle.sort_order,
    ).model_dump(mode="json")


async def invalidate(cache: CacheBackend) -> None:
    """Evict the cached principle list and statistics."""
    await cache.delete(ACTIVE_KEY, STATS_KEY)


# ---------------------------------------------------------------------------
# Public reads (cache-aside)
# ---------------------------------------------------------------------------


async def list_active(
    session: AsyncSession,
    cache: CacheBackend,
    settings: Settings,
) -> list[dict[str, Any]]:
    """Return active principles in display order, served from cache when live."""

    async def compute() -> list[dict[str, Any]]:
        result = await session.execute(
            select(Principle)
            .where(Principle.not_deleted(), Principle.active())
            .order_by(*Principle.ordering())
        )
        return [to_public(p, settings.asset_base_url) for p in result.scalars().all()]

    return await cache.remember(ACTIVE_KEY, settings.cache_list_ttl, compute)


async def get_active(
    session: AsyncSession,
    cache: CacheBackend,
    settings: Settings,
    principle_id: int,
) -> dict[str, Any] | None:
    """Return one active principle, or None if missing, inactive, or trashed.

    A None result is not cached.
    """

    async def compute() -> dict[str, Any] | None:
        result = await session.execute(
            select(Principle).where(
                Principle.id == principle_id,
                Principle.not_deleted(),
                Principle.active(),
            )
        )
        principle = result.scalar_one_or_none()
        if principle is None:
            return None
        return to_public(principle, settings.asset_base_url)

    return await cache.remember(detail_key(principle_id), settings.cache_list_ttl, compute)


async def get_stats(session: AsyncSession, cache: CacheBackend, settings: Settings) -> dict[str, int]:
    """Return total/active/inactive counts over non-deleted principles."""

    async def compute() -> dict[str, int]:
        return PrincipleStats(
            total=await content_service.count(session, Principle, Principle.not_deleted()),
            active=await content_service.count(session, Principle, Principle.not_deleted(), Principle.active()),
            inactive=await content_service.count(session, Principle, Principle.not_deleted(), Principle.inactive()),
        ).model_dump()

    return await cache.remember(STATS_KEY, settings.cache_stats_ttl, compute)


# ---------------------------------------------------------------------------
# Admin reads
# ---------------------------------------------------------------------------


def _trashed_criteria(trashed: TrashedFilter) -> list:
    if trashed == "only":
        return [Principle.deleted_at.is_not(None)]
    if trashed == "with":
        return []
    return [Principle.not_deleted()]


async def list_principles(
    session: AsyncSession,
    *,
    is_active: bool | None = None,
    trashed: TrashedFilter = "without",
    search: str | None = None,
    direction: Literal["asc", "desc"] = "asc",
    page: int = 1,
    page_size: int = 20,
) -> tuple[list[Principle], PaginationMeta]:
    """List principles for the admin table.

    Args:
        session: Database session.
        is_active: Filter by active flag (None for all).
        trashed: Whether to exclude, include, or only show soft-deleted rows.
        search: Case-insensitive substring match on title or subtitle.
        direction: sort_order direction.
        page: Page number (1-based).
        page_size: Items per page.

    Returns:
        Tuple of (principles, pagination metadata).
    """
    criteria = _trashed_criteria(trashed)
    if is_active is not None:
        criteria.append(Principle.is_active.is_(is_active))
    if search:
        pattern = f"%{search}%"
        criteria.append(or_(Principle.title.ilike(pattern), Principle.subtitle.ilike(pattern)))

    query = select(Principle).where(*criteria).order_by(*Principle.ordering(direction))
    count_query = select(func.count(Principle.id)).where(*criteria)
    principles, meta = await content_service.paginate(
        session, query, count_query, page=page, page_size=page_size
    )
    logger.info(f"Listed {len(principles)} principles (total={meta.total}, page={page})")
    return principles, meta


async def get_principle(
    session: AsyncSession,
    principle_id: int,
    *,
    with_trashed: bool = False,
) -> Principle | None:
    """Get a principle by ID regardless of active flag.

    Args:
        session: Database session.
        principle_id: The principle ID.
        with_trashed: Also return soft-deleted principles.
    """
    query = select(Principle).where(Principle.id == principle_id)
    if not with_trashed:
        query = query.where(Principle.not_deleted())
    result = await session.execute(query)
    return result.scalar_one_or_none()


async def _require(session: AsyncSession, principle_id: int, *, with_trashed: bool = False) -> Principle:
    principle = await get_principle(session, principle_id, with_trashed=with_trashed)
    if principle is None:
        msg = f"Principle {principle_id} not found"
        raise ValueError(msg)
    return principle


# ---------------------------------------------------------------------------
# Admin writes
# ---------------------------------------------------------------------------


async def create_principle(
    session: AsyncSession,
    cache: CacheBackend,
    *,
    title: str,
    description: str,
    subtitle: str | None = None,
    icon: str | None = None,
    image: str | None = None,
    sort_order: int | None = None,
    is_active: bool = True,
) -> Principle:
    """Create a principle.

    When ``sort_order`` is omitted the principle is placed after the
    current last one.

    Raises:
        ValueError: If a principle with the same title already exists.
    """
    if sort_order is None:
        sort_order = await content_service.next_sort_order(session, Principle, Principle.not_deleted())

    principle = Principle(
        title=title,
        subtitle=subtitle,
        description=description,
        icon=icon,
        image=image,
        sort_order=sort_order,
        is_active=is_active,
    )
    session.add(principle)
    await content_service.commit_or_conflict(session, f"Principle '{title}' already exists")
    await session.refresh(principle)
    await invalidate(cache)
    logger.info(f"Created principle {principle.id} ({title})")
    return principle


async def update_principle(
    session: AsyncSession,
    cache: CacheBackend,
    principle_id: int,
    *,
    data: dict[str, Any],
) -> Principle:
    """Update a principle with the given fields.

    Raises:
        ValueError: If the principle is not found or the title is taken.
    """
    principle = await _require(session, principle_id)
    content_service.apply_changes(principle, data, _UPDATABLE_FIELDS, _NULLABLE_FIELDS)
    await content_service.commit_or_conflict(session, "Update would create a duplicate principle title")
    await session.refresh(principle)
    await invalidate(cache)
    logger.info(f"Updated principle {principle.id}")
    return principle


async def toggle_active(session: AsyncSession, cache: CacheBackend, principle_id: int) -> Principle:
    """Flip a principle between active and inactive."""
    principle = await _require(session, principle_id)
    principle.is_active = not principle.is_active
    await session.commit()
    await invalidate(cache)
    logger.info(f"Principle {principle.id} is now {'active' if principle.is_active else 'inactive'}")
    return principle


async def delete_principle(session: AsyncSession, cache: CacheBackend, principle_id: int) -> None:
    """Soft-delete a principle."""
    principle = await _require(session, principle_id)
    principle.deleted_at = datetime.now(UTC)
    await session.commit()
    await invalidate(cache)
    logger.info(f"Soft-deleted principle {principle.id}")


async def restore_principle(session: AsyncSession, cache: CacheBackend, principle_id: int) -> Principle:
    """Restore a soft-deleted principle.

    Raises:
        ValueError: If the principle does not exist or is not trashed.
    """
    principle = await _require(session, principle_id, with_trashed=True)
    if principle.deleted_at is None:
        msg = f"Principle {principle_id} is not deleted"
        raise ValueError(msg)
    principle.deleted_at = None
    await session.commit()
    await invalidate(cache)
    logger.info(f"Restored principle {principle.id}")
    return principle


async def force_delete_principle(session: AsyncSession, cache: CacheBackend, principle_id: int) -> None:
    """Permanently remove a trashed principle.

    Raises:
        ValueError: If no trashed principle has this ID.
    """
    result = await session.execute(
        select(Principle).where(Principle.id == principle_id, Principle.deleted_at.is_not(None))
    )
    principle = result.scalar_one_or_none()
    if principle is None:
        msg = f"Trashed principle {principle_id} not found"
        raise ValueError(msg)
    await session.delete(principle)
    await session.commit()
    await invalidate(cache)
    logger.info(f"Force-deleted principle {principle_id}")


async def reorder_principles(session: AsyncSession, cache: CacheBackend, ids: Sequence[int]) -> list[Principle]:
    """Persist a drag-and-drop ordering of principles in one commit."""
    principles = await content_service.reorder_records(session, Principle, ids, Principle.not_deleted())
    await session.commit()
    await invalidate(cache)
    logger.info(f"Reordered {len(principles)} principles")
    return principles


# ---------------------------------------------------------------------------
# Bulk actions
# ---------------------------------------------------------------------------


async def set_active_many(session: AsyncSession, cache: CacheBackend, ids: Sequence[int], *, value: bool) -> int:
    """Activate or deactivate the selected principles.

    Returns:
        Number of principles updated.
    """
    principles = await content_service.fetch_by_ids(session, Principle, ids, Principle.not_deleted())
    for principle in principles:
        principle.is_active = value
    await session.commit()
    await invalidate(cache)
    logger.info(f"Set is_active={value} on {len(principles)} principles")
    return len(principles)


async def delete_many(session: AsyncSession, cache: CacheBackend, ids: Sequence[int]) -> int:
    """Soft-delete the selected principles."""
    principles = await content_service.fetch_by_ids(session, Principle, ids, Principle.not_deleted())
    now = datetime.now(UTC)
    for principle in principles:
        principle.deleted_at = now
    await session.commit()
    await invalidate(cache)
    logger.info(f"Soft-deleted {len(principles)} principles")
    return len(principles)


async def restore_many(session: AsyncSession, cache: CacheBackend, ids: Sequence[int]) -> int:
    """Restore the selected trashed principles."""
    principles = await content_service.fetch_by_ids(session, Principle, ids, Principle.deleted_at.is_not(None))
    for principle in principles:
        principle.deleted_at = None
    await session.commit()
    await invalidate(cache)
    logger.info(f"Restored {len(principles)} principles")
    return len(principles)


async def force_delete_many(session: AsyncSession, cache: CacheBackend, ids: Sequence[int]) -> int:
    """Permanently remove the selected trashed principles; live ones are skipped."""
    principles = await content_service.fetch_by_ids(session, Principle, ids, Principle.deleted_at.is_not(None))
    for principle in principles:
        await session.delete(principle)
    await session.commit()
    await invalidate(cache)
    logger.info(f"Force-deleted {len(principles)} principles")
    return len(principles)
