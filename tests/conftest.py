"""Pytest configuration and shared fixtures.

Organization:
    - Application Fixtures: FastAPI app and HTTP client
    - Database Fixtures: in-memory SQLite engine and session
    - Content Fixtures: users, terms, posts, pages and menu items
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from press_graph.core.models import Post, Term, User

# Ensure tests run without external infrastructure
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DB_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_JSON_LOGS", "false")
os.environ.setdefault("GRAPHQL_EMPTY_CONNECTION_ERROR", "true")
os.environ.setdefault("GRAPHQL_BATCH_ISOLATE_ERRORS", "false")


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Create async SQLAlchemy engine with in-memory SQLite.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create async database session with automatic table creation and cleanup.

    Example:
        async def test_create_user(db_session):
            user = User(login="alice")
            db_session.add(user)
            await db_session.commit()
            assert user.id is not None
    """
    from press_graph.core.models import Base

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# ============================================================================
# Content Fixtures
# ============================================================================


@dataclass
class Content:
    """Seeded content, newest post first where order matters."""

    author: User
    other_author: User
    admin: User
    news: Term
    sports: Term
    featured: Term
    posts: list[Post] = field(default_factory=list)
    draft: Post | None = None
    pages: list[Post] = field(default_factory=list)
    menu_items: list[Post] = field(default_factory=list)

    @property
    def post_ids(self) -> list[int]:
        return [post.id for post in self.posts]


@pytest.fixture
async def content(db_session: AsyncSession) -> Content:
    """Seed a small site.

    - 5 published posts by ``author`` dated 2024-01-01..05; ``posts`` is in
      canonical (newest first) order: p5, p4, p3, p2, p1
    - p5, p4, p3 in category ``news``; p2, p1 in ``sports``; p5, p3 tagged
      ``featured``; p4 has meta ``rating=7``, p2 ``rating=3``
    - 1 draft by ``other_author``
    - 2 pages (one by ``other_author``, child of the first)
    - 3 menu items (the third nested under the first)
    """
    from press_graph.core.models import Post, PostMeta, Term, User

    author = User(login="alice", email="alice@example.com", display_name="Alice", nicename="alice", roles=["author"])
    other_author = User(login="bob", email="bob@example.com", display_name="Bob", nicename="bob", roles=["editor"])
    admin = User(login="root", email="root@example.com", display_name="Root", nicename="root", roles=["administrator"])
    news = Term(name="News", slug="news", taxonomy="category")
    sports = Term(name="Sports", slug="sports", taxonomy="category")
    featured = Term(name="Featured", slug="featured", taxonomy="post_tag")
    db_session.add_all([author, other_author, admin, news, sports, featured])
    await db_session.flush()

    posts = []
    for day in range(1, 6):
        post = Post(
            post_type="post",
            status="publish",
            title=f"Post {day}",
            name=f"post-{day}",
            content=f"Body {day}",
            author_id=author.id,
            date=datetime(2024, 1, day, 12, 0),
            modified=datetime(2024, 2, day, 12, 0),
        )
        post.terms = [news] if day >= 3 else [sports]
        if day in (3, 5):
            post.terms.append(featured)
        posts.append(post)
    posts[3].meta = [PostMeta(key="rating", value="7")]
    posts[1].meta = [PostMeta(key="rating", value="3")]

    draft = Post(
        post_type="post",
        status="draft",
        title="Draft",
        name="draft",
        content="Secret",
        author_id=other_author.id,
        date=datetime(2024, 3, 1),
        modified=datetime(2024, 3, 1),
    )
    db_session.add_all([*posts, draft])
    await db_session.flush()

    about = Post(
        post_type="page",
        title="About",
        name="about",
        author_id=author.id,
        menu_order=1,
        date=datetime(2023, 6, 1),
        modified=datetime(2023, 6, 1),
    )
    db_session.add(about)
    await db_session.flush()
    team = Post(
        post_type="page",
        title="Team",
        name="team",
        author_id=other_author.id,
        parent_id=about.id,
        menu_order=2,
        date=datetime(2023, 6, 2),
        modified=datetime(2023, 6, 2),
    )
    db_session.add(team)
    await db_session.flush()

    home = Post(
        post_type="nav_menu_item",
        title="Home",
        menu_order=1,
        date=datetime(2023, 1, 1),
        modified=datetime(2023, 1, 1),
        meta=[
            PostMeta(key="_menu_item_url", value="https://example.com/"),
            PostMeta(key="_menu_item_classes", value="menu-home current"),
            PostMeta(key="_menu_item_menu_item_parent", value="0"),
            PostMeta(key="_menu_item_object", value="custom"),
        ],
    )
    about_link = Post(
        post_type="nav_menu_item",
        title="About us",
        menu_order=2,
        date=datetime(2023, 1, 2),
        modified=datetime(2023, 1, 2),
        meta=[
            PostMeta(key="_menu_item_url", value="https://example.com/about"),
            PostMeta(key="_menu_item_object_id", value=str(about.id)),
            PostMeta(key="_menu_item_object", value="page"),
            PostMeta(key="_menu_item_target", value="_blank"),
        ],
    )
    db_session.add_all([home, about_link])
    await db_session.flush()
    team_link = Post(
        post_type="nav_menu_item",
        title="Team",
        menu_order=3,
        date=datetime(2023, 1, 3),
        modified=datetime(2023, 1, 3),
        meta=[
            PostMeta(key="_menu_item_url", value="https://example.com/about/team"),
            PostMeta(key="_menu_item_menu_item_parent", value=str(home.id)),
        ],
    )
    db_session.add(team_link)
    await db_session.commit()

    return Content(
        author=author,
        other_author=other_author,
        admin=admin,
        news=news,
        sports=sports,
        featured=featured,
        posts=list(reversed(posts)),
        draft=draft,
        pages=[about, team],
        menu_items=[home, about_link, team_link],
    )


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
async def app(db_session: AsyncSession):
    """FastAPI application whose GraphQL context uses the test session."""
    from press_graph.app.main import create_app
    from press_graph.core.dependencies.database import get_db_session

    application = create_app()

    async def override_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    application.dependency_overrides[get_db_session] = override_session
    return application


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client bound to the app (lifespan is not run)."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# ============================================================================
# GraphQL Fixtures
# ============================================================================


def build_graphql_context(session: AsyncSession, requester=None, **settings_overrides):
    """Build a GraphQLContext for ``schema.execute`` outside HTTP.

    Settings overrides (e.g. ``empty_connection_error=True``) apply to the
    connection resolver only.
    """
    from press_graph.core.schemas.auth import Requester
    from press_graph.core.settings.graphql import GraphQLSettings
    from press_graph.features.graphql.connection import PostObjectsConnectionResolver
    from press_graph.features.graphql.context import GraphQLContext
    from press_graph.features.graphql.dataloaders import create_dataloaders

    requester = requester or Requester.anonymous()
    return GraphQLContext(
        session=session,
        loaders=create_dataloaders(session, requester),
        requester=requester,
        connections=PostObjectsConnectionResolver(settings=GraphQLSettings(**settings_overrides)),
        correlation_id="test-correlation-id",
    )


@pytest.fixture
def graphql_context(db_session: AsyncSession):
    """Anonymous GraphQL context bound to the test session.

    Note: This is a synchronous fixture because GraphQLContext is a dataclass.
    """
    return build_graphql_context(db_session)


@pytest.fixture
def make_graphql_context(db_session: AsyncSession):
    """Factory fixture: ``make_graphql_context(requester, **settings)``."""

    def factory(requester=None, **settings_overrides):
        return build_graphql_context(db_session, requester, **settings_overrides)

    return factory
