"""Team model -- a team member profile shown on the website."""

from typing import Literal

from sqlalchemy import Boolean, Index, Integer, String, true
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql.elements import ColumnElement, UnaryExpression

from showcase_api.models.base import Base, IntegerIDMixin, TimestampMixin


class Team(Base, IntegerIDMixin, TimestampMixin):
    """A team member.  Deletion is permanent.

    Attributes:
        name: Unique full name.
        position: Job title.
        location: Optional city/country.
        image: Profile photo storage path or absolute URL.
        is_active: Whether the member is visible on the website.
        sort_order: Manual display position (lower first).
    """

    __tablename__ = "teams"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    position: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    image: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    __table_args__ = (Index("ix_teams_is_active_sort_order", "is_active", "sort_order"),)

    @classmethod
    def active(cls) -> ColumnElement[bool]:
        return cls.is_active.is_(True)

    @classmethod
    def ordering(cls, direction: Literal["asc", "desc"] = "asc") -> tuple[UnaryExpression, ...]:
        sort = cls.sort_order.desc() if direction == "desc" else cls.sort_order.asc()
        return (sort, cls.id.asc())
