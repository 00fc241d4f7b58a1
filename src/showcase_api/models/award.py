"""Award model -- company awards and achievements for the website."""

from sqlalchemy import Boolean, Index, Integer, String, false, true
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql.elements import ColumnElement, UnaryExpression

from showcase_api.models.base import Base, IntegerIDMixin, TimestampMixin


class Award(Base, IntegerIDMixin, TimestampMixin):
    """An award.  Deletion is permanent.

    Attributes:
        title: Unique award title.
        location: Where/when it was received (e.g. "Bali, 2020").
        featured: Spotlight flag, independent of is_active.
        is_active: Whether the award is visible on the website.
        sort_order: Manual display position (lower first).
    """

    __tablename__ = "awards"

    title: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    __table_args__ = (
        Index("ix_awards_is_active_sort_order", "is_active", "sort_order"),
        Index("ix_awards_featured", "featured"),
    )

    @classmethod
    def active(cls) -> ColumnElement[bool]:
        return cls.is_active.is_(True)

    @classmethod
    def featured_only(cls) -> ColumnElement[bool]:
        return cls.featured.is_(True)

    @classmethod
    def ordering(cls) -> tuple[UnaryExpression, ...]:
        """Display ordering: sort_order ascending, newest first on ties."""
        return (cls.sort_order.asc(), cls.created_at.desc(), cls.id.desc())
