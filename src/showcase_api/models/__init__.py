"""ORM model registry -- import all models so Alembic autogenerate discovers them."""

from showcase_api.models.award import Award
from showcase_api.models.principle import Principle
from showcase_api.models.team import Team

__all__ = [
    "Award",
    "Principle",
    "Team",
]
