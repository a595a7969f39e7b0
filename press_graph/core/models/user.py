"""User model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from press_graph.core.database import Base, IntegerPKMixin

if TYPE_CHECKING:
    from .post import Post


class User(Base, IntegerPKMixin):
    """A registered user. ``roles`` is a list of role names."""

    __tablename__ = "users"

    login: Mapped[str] = mapped_column(String(60), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    display_name: Mapped[str] = mapped_column(String(250), default="", nullable=False)
    nicename: Mapped[str] = mapped_column(String(50), default="", nullable=False)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    nickname: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str | None] = mapped_column(String(100), nullable=True)
    locale: Mapped[str] = mapped_column(String(20), default="en_US", nullable=False)
    roles: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    registered: Mapped[datetime] = mapped_column(
        DateTime(timezone=False), server_default=func.now(), nullable=False
    )

    posts: Mapped[list[Post]] = relationship("Post", back_populates="author")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, login={self.login!r})>"
