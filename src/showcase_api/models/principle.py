"""Principle model -- a company principle or value shown on the website.

Supports manual ordering, an active flag, optional icon/image assets, and
soft delete (trashed principles stay restorable until force-deleted).
"""

from typing import Literal

from sqlalchemy import Boolean, Index, Integer, String, Text, true
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql.elements import ColumnElement, UnaryExpression

from showcase_api.models.base import Base, IntegerIDMixin, SoftDeleteMixin, TimestampMixin


class Principle(Base, IntegerIDMixin, TimestampMixin, SoftDeleteMixin):
    """A company principle.

    Attributes:
        title: Unique display title.
        subtitle: Optional tagline.
        description: Body text (max 1000 characters).
        icon: Storage path or absolute URL of the icon.
        image: Storage path or absolute URL of the image.
        sort_order: Manual display position (lower first).
        is_active: Whether the principle is visible on the website.
    """

    __tablename__ = "principles"

    title: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    subtitle: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    icon: Mapped[str | None] = mapped_column(String(255), nullable=True)
    image: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())

    __table_args__ = (
        Index("ix_principles_is_active", "is_active"),
        Index("ix_principles_sort_order", "sort_order"),
    )

    @classmethod
    def active(cls) -> ColumnElement[bool]:
        return cls.is_active.is_(True)

    @classmethod
    def inactive(cls) -> ColumnElement[bool]:
        return cls.is_active.is_(False)

    @classmethod
    def not_deleted(cls) -> ColumnElement[bool]:
        return cls.deleted_at.is_(None)

    @classmethod
    def ordering(cls, direction: Literal["asc", "desc"] = "asc") -> tuple[UnaryExpression, ...]:
        """Display ordering: sort_order in ``direction``, ties by insertion order."""
        sort = cls.sort_order.desc() if direction == "desc" else cls.sort_order.asc()
        return (sort, cls.id.asc())
