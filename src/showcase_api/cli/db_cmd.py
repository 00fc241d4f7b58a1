"""Database migration CLI commands driving Alembic programmatically."""

from typing import TYPE_CHECKING

import typer
from loguru import logger

if TYPE_CHECKING:
    from alembic.config import Config

db_app = typer.Typer()


def _alembic_config(ini_path: str) -> "Config":
    """Load the Alembic config; the database URL always comes from settings."""
    from alembic.config import Config

    from showcase_api.core.config import get_settings

    config = Config(ini_path)
    config.set_main_option("sqlalchemy.url", get_settings().database_url)
    return config


@db_app.command()
def upgrade(
    revision: str = typer.Argument("head", help="Target revision"),
    ini_path: str = typer.Option("alembic.ini", "--config", help="Path to alembic.ini"),
) -> None:
    """Apply migrations up to the target revision."""
    from alembic import command

    logger.info(f"Upgrading content schema to {revision}")
    command.upgrade(_alembic_config(ini_path), revision)
    logger.info("Content schema upgrade complete")


@db_app.command()
def downgrade(
    revision: str = typer.Argument("-1", help="Target revision"),
    ini_path: str = typer.Option("alembic.ini", "--config", help="Path to alembic.ini"),
) -> None:
    """Roll the schema back to the target revision."""
    from alembic import command

    logger.info(f"Downgrading content schema to {revision}")
    command.downgrade(_alembic_config(ini_path), revision)
    logger.info("Content schema downgrade complete")


@db_app.command()
def current(
    ini_path: str = typer.Option("alembic.ini", "--config", help="Path to alembic.ini"),
) -> None:
    """Show the revision the database is at."""
    from alembic import command

    command.current(_alembic_config(ini_path), verbose=True)
