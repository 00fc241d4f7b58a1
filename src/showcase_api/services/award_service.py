"""Award service -- cached public reads and admin writes for awards."""

from collections.abc import Sequence
from typing import Any

from loguru import logger
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase_api.core.config import Settings
from showcase_api.lib.cache import CacheBackend
from showcase_api.models.award import Award
from showcase_api.schemas.award import AwardPublic
from showcase_api.schemas.common import PaginationMeta
from showcase_api.services import content_service

ACTIVE_KEY = "awards.active"
FEATURED_KEY = "awards.featured"

_UPDATABLE_FIELDS: frozenset[str] = frozenset({"title", "location", "featured", "is_active", "sort_order"})


def to_public(award: Award) -> dict[str, Any]:
    """Project an award into its JSON-ready public shape."""
    return AwardPublic(
        id=award.id,
        title=award.title,
        location=award.location,
        featured=award.featured,
    ).model_dump(mode="json")


async def invalidate(cache: CacheBackend) -> None:
    """Evict the cached award lists."""
    await cache.delete(ACTIVE_KEY, FEATURED_KEY)


# ---------------------------------------------------------------------------
# Public reads
# ---------------------------------------------------------------------------


async def list_active(session: AsyncSession, cache: CacheBackend, settings: Settings) -> list[dict[str, Any]]:
    """Return active awards in display order, served from cache when live."""

    async def compute() -> list[dict[str, Any]]:
        result = await session.execute(select(Award).where(Award.active()).order_by(*Award.ordering()))
        return [to_public(a) for a in result.scalars().all()]

    return await cache.remember(ACTIVE_KEY, settings.cache_list_ttl, compute)


async def list_featured(session: AsyncSession, cache: CacheBackend, settings: Settings) -> list[dict[str, Any]]:
    """Return awards that are both active and featured, in display order."""

    async def compute() -> list[dict[str, Any]]:
        result = await session.execute(
            select(Award).where(Award.active(), Award.featured_only()).order_by(*Award.ordering())
        )
        return [to_public(a) for a in result.scalars().all()]

    return await cache.remember(FEATURED_KEY, settings.cache_list_ttl, compute)


# ---------------------------------------------------------------------------
# Admin reads
# ---------------------------------------------------------------------------


async def list_awards(
    session: AsyncSession,
    *,
    is_active: bool | None = None,
    featured: bool | None = None,
    search: str | None = None,
    page: int = 1,
    page_size: int = 20,
) -> tuple[list[Award], PaginationMeta]:
    """List awards for the admin table.

    Args:
        session: Database session.
        is_active: Filter by active flag (None for all).
        featured: Filter by featured flag (None for all).
        search: Case-insensitive substring match on title or location.
        page: Page number (1-based).
        page_size: Items per page.
    """
    criteria = []
    if is_active is not None:
        criteria.append(Award.is_active.is_(is_active))
    if featured is not None:
        criteria.append(Award.featured.is_(featured))
    if search:
        pattern = f"%{search}%"
        criteria.append(or_(Award.title.ilike(pattern), Award.location.ilike(pattern)))

    query = select(Award).where(*criteria).order_by(*Award.ordering())
    count_query = select(func.count(Award.id)).where(*criteria)
    awards, meta = await content_service.paginate(session, query, count_query, page=page, page_size=page_size)
    logger.info(f"Listed {len(awards)} awards (total={meta.total}, page={page})")
    return awards, meta


async def get_award(session: AsyncSession, award_id: int) -> Award | None:
    """Get an award by ID regardless of active flag."""
    result = await session.execute(select(Award).where(Award.id == award_id))
    return result.scalar_one_or_none()


async def _require(session: AsyncSession, award_id: int) -> Award:
    award = await get_award(session, award_id)
    if award is None:
        msg = f"Award {award_id} not found"
        raise ValueError(msg)
    return award


# ---------------------------------------------------------------------------
# Admin writes
# ---------------------------------------------------------------------------


async def create_award(
    session: AsyncSession,
    cache: CacheBackend,
    *,
    title: str,
    location: str,
    featured: bool = False,
    is_active: bool = True,
    sort_order: int | None = None,
) -> Award:
    """Create an award, appended after the current last one unless ``sort_order`` is given.

    Raises:
        ValueError: If an award with the same title already exists.
    """
    if sort_order is None:
        sort_order = await content_service.next_sort_order(session, Award)

    award = Award(
        title=title,
        location=location,
        featured=featured,
        is_active=is_active,
        sort_order=sort_order,
    )
    session.add(award)
    await content_service.commit_or_conflict(session, f"Award '{title}' already exists")
    await session.refresh(award)
    await invalidate(cache)
    logger.info(f"Created award {award.id} ({title})")
    return award


async def update_award(
    session: AsyncSession,
    cache: CacheBackend,
    award_id: int,
    *,
    data: dict[str, Any],
) -> Award:
    """Update an award with the given fields.

    Raises:
        ValueError: If the award is not found or the title is taken.
    """
    award = await _require(session, award_id)
    content_service.apply_changes(award, data, _UPDATABLE_FIELDS, frozenset())
    await content_service.commit_or_conflict(session, "Update would create a duplicate award title")
    await session.refresh(award)
    await invalidate(cache)
    logger.info(f"Updated award {award.id}")
    return award


async def toggle_active(session: AsyncSession, cache: CacheBackend, award_id: int) -> Award:
    """Flip an award between active and inactive."""
    award = await _require(session, award_id)
    award.is_active = not award.is_active
    await session.commit()
    await invalidate(cache)
    logger.info(f"Award {award.id} is now {'active' if award.is_active else 'inactive'}")
    return award


async def toggle_featured(session: AsyncSession, cache: CacheBackend, award_id: int) -> Award:
    """Flip an award between featured and not featured."""
    award = await _require(session, award_id)
    award.featured = not award.featured
    await session.commit()
    await invalidate(cache)
    logger.info(f"Award {award.id} is now {'featured' if award.featured else 'not featured'}")
    return award


async def delete_award(session: AsyncSession, cache: CacheBackend, award_id: int) -> None:
    """Permanently remove an award."""
    award = await _require(session, award_id)
    await session.delete(award)
    await session.commit()
    await invalidate(cache)
    logger.info(f"Deleted award {award_id}")


async def reorder_awards(session: AsyncSession, cache: CacheBackend, ids: Sequence[int]) -> list[Award]:
    """Persist a drag-and-drop ordering of awards in one commit."""
    awards = await content_service.reorder_records(session, Award, ids)
    await session.commit()
    await invalidate(cache)
    logger.info(f"Reordered {len(awards)} awards")
    return awards


async def set_active_many(session: AsyncSession, cache: CacheBackend, ids: Sequence[int], *, value: bool) -> int:
    """Activate or deactivate the selected awards.

    Returns:
        Number of awards updated.
    """
    awards = await content_service.fetch_by_ids(session, Award, ids)
    for award in awards:
        award.is_active = value
    await session.commit()
    await invalidate(cache)
    logger.info(f"Set is_active={value} on {len(awards)} awards")
    return len(awards)


async def delete_many(session: AsyncSession, cache: CacheBackend, ids: Sequence[int]) -> int:
    """Permanently remove the selected awards."""
    awards = await content_service.fetch_by_ids(session, Award, ids)
    for award in awards:
        await session.delete(award)
    await session.commit()
    await invalidate(cache)
    logger.info(f"Deleted {len(awards)} awards")
    return len(awards)
