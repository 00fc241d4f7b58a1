"""Built-in sample content for local development and demos.

Records are created through the entity services so each insert evicts the
matching cache keys.  Existing titles/names are skipped, which makes seeding
safe to repeat.
"""

from typing import Any

from loguru import logger
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase_api.lib.cache import CacheBackend
from showcase_api.models import Award, Principle, Team
from showcase_api.services import award_service, principle_service, team_service

SEED_SECTIONS = ("principles", "team", "awards")

_IMAGE_HOST = "https://api.builder.io/api/v1/image/assets/bbac1778046042629f3fc2333ccbaf93"

PRINCIPLES: list[dict[str, Any]] = [
    {
        "title": "Prioritize Trust",
        "description": "Shayna is an award-winning ametia construction company with lorem",
        "icon": "Shield",
        "image": f"{_IMAGE_HOST}/0ab79c452129ddf5053f461a7d4a42a8deb400db",
    },
    {
        "title": "Professional People",
        "description": "Shayna is an award-winning ametia construction company with lorem",
        "icon": "Users",
        "image": f"{_IMAGE_HOST}/22dba3343234a54bed1adb040ca131cedef16949",
    },
    {
        "title": "Eco Friendly Concept",
        "description": "Shayna is an award-winning ametia construction company with lorem",
        "icon": "Leaf",
        "image": f"{_IMAGE_HOST}/136d8bb6e31140d11dcd40e0c86eb671386827ef",
    },
]

TEAM: list[dict[str, Any]] = [
    {"name": "Angga Setiawan", "position": "Chief Executive Officer", "location": "Shanghai, China", "sort_order": 1},
    {"name": "Shayna Liza", "position": "Product Manager", "location": "Bali, Indonesia", "sort_order": 2},
    {"name": "Bruno Oleo", "position": "Customer Relations", "location": "Orchard, Singapore", "sort_order": 3},
    {"name": "Sami Kimi", "position": "Senior 3D Designer", "location": "Ho Chi Min, Vietnam", "sort_order": 4},
    {"name": "Wibowo Putra", "position": "Senior 3D Designer", "location": "Ho Chi Min, Vietnam", "sort_order": 5},
    {"name": "Putri Emily", "position": "Chief Technology Officer", "location": "Shanghai, China", "sort_order": 6},
    {"name": "Yuyan Chin", "position": "Senior Product Manager", "location": "Bali, Indonesia", "sort_order": 7},
    {"name": "Alex Morgan", "position": "Senior Full Stack Developer", "location": "Austin, TX", "sort_order": 10},
    {"name": "Jessica Park", "position": "Frontend Developer", "location": "Seattle, WA", "sort_order": 11},
    {"name": "Ryan Martinez", "position": "Backend Developer", "location": "Boston, MA", "sort_order": 12},
    # Inactive, so the public list and stats have something to exclude
    {
        "name": "John Smith",
        "position": "Former Developer",
        "location": "Remote",
        "sort_order": 100,
        "is_active": False,
    },
]

AWARDS: list[dict[str, Any]] = [
    {"title": "Solid Fundamental Crafter Async", "location": "Bali, 2020", "sort_order": 0},
    {"title": "Most Crowded Yet Harmony Place", "location": "Shanghai, 2021", "sort_order": 1},
    {"title": "Small Things Made Much Big Impacts", "location": "Zurich, 2022", "featured": True, "sort_order": 2},
    {"title": "Teamwork and Solidarity", "location": "Bandung, 2023", "sort_order": 3},
]


def _team_image(name: str) -> str:
    return f"team-members/{name.lower().replace(' ', '-')}.jpg"


async def _existing(session: AsyncSession, column: Any) -> set[str]:
    result = await session.execute(select(column))
    return set(result.scalars().all())


async def seed_principles(session: AsyncSession, cache: CacheBackend) -> int:
    existing = await _existing(session, Principle.title)
    created = 0
    for item in PRINCIPLES:
        if item["title"] in existing:
            continue
        await principle_service.create_principle(session, cache, **item)
        created += 1
    return created


async def seed_team(session: AsyncSession, cache: CacheBackend) -> int:
    existing = await _existing(session, Team.name)
    created = 0
    for item in TEAM:
        if item["name"] in existing:
            continue
        await team_service.create_member(session, cache, image=_team_image(item["name"]), **item)
        created += 1
    return created


async def seed_awards(session: AsyncSession, cache: CacheBackend) -> int:
    existing = await _existing(session, Award.title)
    created = 0
    for item in AWARDS:
        if item["title"] in existing:
            continue
        await award_service.create_award(session, cache, **item)
        created += 1
    return created


_SEEDERS = {
    "principles": (Principle, principle_service.invalidate, seed_principles),
    "team": (Team, team_service.invalidate, seed_team),
    "awards": (Award, award_service.invalidate, seed_awards),
}


async def seed_content(
    session: AsyncSession,
    cache: CacheBackend,
    *,
    sections: tuple[str, ...] = SEED_SECTIONS,
    fresh: bool = False,
) -> dict[str, int]:
    """Seed the requested sections with sample content.

    Args:
        session: Database session.
        cache: Cache backend; evicted for every section touched.
        sections: Any of ``principles``, ``team``, ``awards``.
        fresh: Remove every existing row of a section (trashed principles
            included) before seeding it.

    Returns:
        Mapping of section name to number of records created.

    Raises:
        ValueError: If an unknown section is requested.
    """
    unknown = [s for s in sections if s not in _SEEDERS]
    if unknown:
        msg = f"Unknown seed section(s): {', '.join(unknown)}"
        raise ValueError(msg)

    created: dict[str, int] = {}
    for section in sections:
        model, invalidate, seeder = _SEEDERS[section]
        if fresh:
            await session.execute(delete(model))
            await session.commit()
            session.expunge_all()
            await invalidate(cache)
            logger.info(f"Cleared existing {section}")
        created[section] = await seeder(session, cache)
        logger.info(f"Seeded {created[section]} {section}")
    return created
