"""Shared building blocks for the principle, team, and award services.

All three content types share the same shape: an integer primary key, an
``is_active`` flag, and a manual ``sort_order``.  The helpers here operate
on any of those models; entity services wrap them with their own scopes
and cache invalidation.
"""

from collections.abc import Sequence
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from showcase_api.models import Award, Principle, Team
from showcase_api.schemas.common import PaginationMeta

ContentModel = TypeVar("ContentModel", Principle, Team, Award)


async def next_sort_order(
    session: AsyncSession,
    model: type[ContentModel],
    *criteria: ColumnElement[bool],
) -> int:
    """Return one past the current maximum sort_order (1 for an empty table).

    Args:
        session: Database session.
        model: Content model class.
        *criteria: Extra filters (e.g. exclude soft-deleted rows).
    """
    result = await session.execute(select(func.max(model.sort_order)).where(*criteria))
    current = result.scalar_one_or_none()
    return (current or 0) + 1


async def count(
    session: AsyncSession,
    model: type[ContentModel],
    *criteria: ColumnElement[bool],
) -> int:
    """Count rows of ``model`` matching ``criteria``."""
    result = await session.execute(select(func.count(model.id)).where(*criteria))
    return result.scalar_one()


async def fetch_by_ids(
    session: AsyncSession,
    model: type[ContentModel],
    ids: Sequence[int],
    *criteria: ColumnElement[bool],
) -> list[ContentModel]:
    """Load the records among ``ids`` that exist and match ``criteria``.

    Unknown IDs are skipped; the result is in primary-key order.
    """
    if not ids:
        return []
    result = await session.execute(select(model).where(model.id.in_(ids), *criteria).order_by(model.id))
    return list(result.scalars().all())


def apply_changes(record: Any, data: dict[str, Any], updatable: frozenset[str], nullable: frozenset[str]) -> None:
    """Copy allowlisted fields from ``data`` onto ``record``.

    Fields outside ``updatable`` are ignored, which prevents mass-assignment
    of ``id``, timestamps, or ``deleted_at``.  A ``None`` value is only
    applied to columns listed in ``nullable``.
    """
    for field_name, value in data.items():
        if field_name not in updatable:
            continue
        if value is None and field_name not in nullable:
            continue
        setattr(record, field_name, value)


async def commit_or_conflict(session: AsyncSession, conflict_message: str) -> None:
    """Commit the session, translating a unique violation into ValueError.

    Raises:
        ValueError: With ``conflict_message`` if the commit violates a
            constraint.  The session is rolled back first.
    """
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise ValueError(conflict_message) from None


async def reorder_records(
    session: AsyncSession,
    model: type[ContentModel],
    ids: Sequence[int],
    *criteria: ColumnElement[bool],
) -> list[ContentModel]:
    """Rewrite sort_order so the records appear in the order of ``ids``.

    The smallest sort_order currently held by the selected records becomes
    the base and each record gets ``base + position``, so reordering one
    page leaves its position relative to other pages intact.  The caller
    commits.

    Raises:
        ValueError: If ``ids`` contains duplicates or unknown IDs.
    """
    if len(set(ids)) != len(ids):
        msg = "Reorder IDs must not contain duplicates"
        raise ValueError(msg)

    records = await fetch_by_ids(session, model, ids, *criteria)
    by_id = {record.id: record for record in records}
    missing = [i for i in ids if i not in by_id]
    if missing:
        msg = f"{model.__name__} records not found: {', '.join(str(i) for i in missing)}"
        raise ValueError(msg)

    base = min(record.sort_order for record in records)
    for position, record_id in enumerate(ids):
        by_id[record_id].sort_order = base + position
    return [by_id[i] for i in ids]


async def paginate(
    session: AsyncSession,
    query: Select[Any],
    count_query: Select[Any],
    *,
    page: int,
    page_size: int,
) -> tuple[list[Any], PaginationMeta]:
    """Run a paginated query with its matching count query.

    Returns:
        Tuple of (page items, pagination metadata).
    """
    total = (await session.execute(count_query)).scalar_one()
    offset = (page - 1) * page_size
    result = await session.execute(query.offset(offset).limit(page_size))
    items = list(result.scalars().all())
    meta = PaginationMeta(
        total=total,
        page=page,
        page_size=page_size,
        total_pages=(total + page_size - 1) // page_size if total > 0 else 0,
    )
    return items, meta
