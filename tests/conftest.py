"""Shared test fixtures for async database, sessions, cache, and HTTP client."""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from showcase_api.api.router import create_router
from showcase_api.core.cache import get_cache
from showcase_api.core.config import Settings, get_settings
from showcase_api.core.dependencies import get_async_session
from showcase_api.lib.cache import MemoryCache
from showcase_api.models import Award, Principle, Team
from showcase_api.models.base import Base


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        asset_base_url="https://example.test",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
async def async_engine(settings: Settings) -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory async SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def async_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create a per-test async session."""
    session_factory = async_sessionmaker(async_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def cache() -> MemoryCache:
    """Fresh in-process cache per test."""
    return MemoryCache()


@pytest.fixture
def app(settings: Settings, async_session: AsyncSession, cache: MemoryCache) -> FastAPI:
    """App with every router mounted and dependencies pointed at the test database and cache."""
    application = FastAPI()
    application.include_router(create_router(settings))

    async def _session() -> AsyncGenerator[AsyncSession]:
        yield async_session

    application.dependency_overrides[get_async_session] = _session
    application.dependency_overrides[get_cache] = lambda: cache
    application.dependency_overrides[get_settings] = lambda: settings
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="https://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Direct-insert factories (bypass the services, so nothing is invalidated)
# ---------------------------------------------------------------------------


@pytest.fixture
def make_principle(async_session: AsyncSession):
    """Factory inserting a principle straight into the database."""

    async def _make(**overrides) -> Principle:
        defaults = {
            "title": "Prioritize Trust",
            "description": "We keep our promises.",
            "sort_order": 0,
            "is_active": True,
        }
        defaults.update(overrides)
        principle = Principle(**defaults)
        async_session.add(principle)
        await async_session.commit()
        await async_session.refresh(principle)
        return principle

    return _make


@pytest.fixture
def make_member(async_session: AsyncSession):
    """Factory inserting a team member straight into the database."""

    async def _make(**overrides) -> Team:
        defaults = {
            "name": "Shayna Liza",
            "position": "Product Manager",
            "location": "Bali, Indonesia",
            "image": "team-members/shayna-liza.jpg",
            "sort_order": 0,
            "is_active": True,
        }
        defaults.update(overrides)
        member = Team(**defaults)
        async_session.add(member)
        await async_session.commit()
        await async_session.refresh(member)
        return member

    return _make


@pytest.fixture
def make_award(async_session: AsyncSession):
    """Factory inserting an award straight into the database."""

    async def _make(**overrides) -> Award:
        defaults = {
            "title": "Teamwork and Solidarity",
            "location": "Bandung, 2023",
            "featured": False,
            "sort_order": 0,
            "is_active": True,
        }
        defaults.update(overrides)
        award = Award(**defaults)
        async_session.add(award)
        await async_session.commit()
        await async_session.refresh(award)
        return award

    return _make
