"""Database models package.

Import all models here so ``Base.metadata`` knows every table.
"""

from __future__ import annotations

from press_graph.core.database import Base

from .meta import PostMeta
from .post import Post
from .term import Term, term_relationships
from .user import User

__all__ = ["Base", "Post", "PostMeta", "Term", "User", "term_relationships"]
