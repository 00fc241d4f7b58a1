"""FastAPI dependency injection for database sessions and admin authorization.

Provides get_async_session, the policy dependency, and the
``require_ability`` factory guarding admin endpoints.
"""

from collections.abc import AsyncGenerator, Callable
from typing import Annotated, Any

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from showcase_api.core.config import Settings, get_settings
from showcase_api.core.database import get_session_factory
from showcase_api.core.policy import Ability, ContentPolicy, build_policy


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Yield an async database session with per-request lifecycle."""
    factory = get_session_factory()
    async with factory() as session:
        yield session


def get_policy(settings: Annotated[Settings, Depends(get_settings)]) -> ContentPolicy:
    """Return the admin authorization policy selected in settings."""
    return build_policy(settings.admin_policy)


def require_ability(ability: Ability, resource: str) -> Callable[..., Any]:
    """Factory that creates a dependency enforcing an admin ability.

    Args:
        ability: The ability the endpoint exercises.
        resource: Resource name the ability applies to.

    Returns:
        A FastAPI dependency that raises 403 when the policy refuses.
    """

    async def ability_checker(
        policy: Annotated[ContentPolicy, Depends(get_policy)],
    ) -> None:
        if not policy.allows(ability, resource):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Not permitted to {ability.value} {resource}",
            )

    return ability_checker
