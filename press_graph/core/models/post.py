"""Post model: every post object (posts, pages, menu items) lives in one table."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from press_graph.core.database import Base, IntegerPKMixin

from .term import term_relationships

if TYPE_CHECKING:
    from .meta import PostMeta
    from .term import Term
    from .user import User


class Post(Base, IntegerPKMixin):
    """A post object, discriminated by ``post_type``.

    ``post``, ``page`` and ``nav_menu_item`` rows share this table the way
    they do in WordPress; menu-item specific values are stored as meta rows.
    Dates are naive and interpreted as site-local time.
    """

    __tablename__ = "posts"

    post_type: Mapped[str] = mapped_column(String(20), default="post", nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="publish", nullable=False)

    title: Mapped[str] = mapped_column(Text, default="", nullable=False)
    name: Mapped[str] = mapped_column(
        String(200), default="", nullable=False, comment="URL slug"
    )
    content: Mapped[str] = mapped_column(Text, default="", nullable=False)
    excerpt: Mapped[str] = mapped_column(Text, default="", nullable=False)
    password: Mapped[str] = mapped_column(String(255), default="", nullable=False)

    author_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("posts.id", ondelete="SET NULL"), nullable=True, index=True
    )
    menu_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_sticky: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=False), server_default=func.now(), nullable=False
    )
    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Relationships
    author: Mapped[User | None] = relationship("User", back_populates="posts")
    meta: Mapped[list[PostMeta]] = relationship(
        "PostMeta",
        back_populates="post",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    terms: Mapped[list[Term]] = relationship(
        "Term", secondary=term_relationships, back_populates="posts"
    )

    __table_args__ = (
        Index("ix_posts_type_status_date", "post_type", "status", "date"),
        Index("ix_posts_name", "name"),
    )

    def get_meta(self, key: str, default: str | None = None) -> str | None:
        """Return the first meta value stored under ``key``."""
        for row in self.meta:
            if row.key == key:
                return row.value
        return default

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, post_type={self.post_type!r}, name={self.name!r})>"
