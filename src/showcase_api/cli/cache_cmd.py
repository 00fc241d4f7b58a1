"""Cache maintenance CLI commands."""

import asyncio

import typer

cache_app = typer.Typer()


@cache_app.command("clear")
def clear() -> None:
    """Drop every cached public payload from the configured cache."""
    asyncio.run(_clear())


async def _clear() -> None:
    """Async implementation of cache clearing."""
    from showcase_api.core.cache import dispose_cache, init_cache
    from showcase_api.core.config import get_settings

    settings = get_settings()
    cache = init_cache(settings)
    try:
        await cache.clear()
        typer.echo("Cache cleared")
    finally:
        await dispose_cache()
