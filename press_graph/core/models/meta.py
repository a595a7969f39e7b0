"""Key/value meta rows attached to posts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from press_graph.core.database import Base, IntegerPKMixin

if TYPE_CHECKING:
    from .post import Post


class PostMeta(Base, IntegerPKMixin):
    """Arbitrary post metadata; values are stored as text."""

    __tablename__ = "postmeta"

    post_id: Mapped[int] = mapped_column(
        ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    key: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str | None] = mapped_column(Text, nullable=True)

    post: Mapped[Post] = relationship("Post", back_populates="meta")

    __table_args__ = (Index("ix_postmeta_key", "key"),)
