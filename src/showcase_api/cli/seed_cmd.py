"""CLI command for loading the built-in sample content.

With a shared Redis cache configured, the running API sees seeded records
immediately because every insert evicts the affected keys.
"""

import asyncio
from enum import StrEnum

import typer


class SeedSection(StrEnum):
    PRINCIPLES = "principles"
    TEAM = "team"
    AWARDS = "awards"


def seed(
    only: list[SeedSection] | None = typer.Option(
        None,
        "--only",
        help="Seed only this section (repeatable)",
    ),
    fresh: bool = typer.Option(
        False,
        "--fresh",
        help="Delete existing rows of each seeded section first",
    ),
) -> None:
    """Seed principles, team members and awards with sample content."""
    sections = tuple(s.value for s in only) if only else None
    asyncio.run(_seed(sections, fresh=fresh))


async def _seed(sections: tuple[str, ...] | None, *, fresh: bool) -> None:
    """Async implementation of seeding."""
    from showcase_api.core.cache import dispose_cache, init_cache
    from showcase_api.core.config import get_settings
    from showcase_api.core.database import dispose_engine, get_session_factory, init_engine
    from showcase_api.services.seed_service import SEED_SECTIONS, seed_content

    settings = get_settings()
    init_engine(settings.database_url)
    cache = init_cache(settings)

    try:
        factory = get_session_factory()
        async with factory() as session:
            created = await seed_content(session, cache, sections=sections or SEED_SECTIONS, fresh=fresh)
        for section, count in created.items():
            typer.echo(f"{section}: {count} created")
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    finally:
        await dispose_cache()
        await dispose_engine()
