"""Taxonomy terms (categories, tags) and their post assignments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Index, String, Table, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from press_graph.core.database import Base, IntegerPKMixin

if TYPE_CHECKING:
    from .post import Post

term_relationships = Table(
    "term_relationships",
    Base.metadata,
    Column("post_id", ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
    Column("term_id", ForeignKey("terms.id", ondelete="CASCADE"), primary_key=True),
)


class Term(Base, IntegerPKMixin):
    """A term within a taxonomy such as ``category`` or ``post_tag``."""

    __tablename__ = "terms"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False)
    taxonomy: Mapped[str] = mapped_column(String(32), nullable=False)
    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("terms.id", ondelete="SET NULL"), nullable=True
    )

    posts: Mapped[list[Post]] = relationship(
        "Post", secondary=term_relationships, back_populates="terms"
    )

    __table_args__ = (
        UniqueConstraint("taxonomy", "slug"),
        Index("ix_terms_taxonomy", "taxonomy"),
    )
