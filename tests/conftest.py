"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite session factory, seeded portfolio catalogue,
sample context documents
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from portfolio_assistant.application.streaming import drain_background_tasks
from portfolio_assistant.boundary.db.base import Base
from portfolio_assistant.boundary.db.models import (
    EmbeddingModel,
    ProjectImageModel,
    ProjectModel,
)
from portfolio_assistant.models.context import ContentType, ContextDocument, MatchType


@pytest.fixture
async def session_factory():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        async_sessionmaker: Factory bound to a fresh schema
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    yield factory

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def seeded_projects(session_factory) -> dict[str, ProjectModel]:
    """
    Seed three projects; only Modern Day Sniper has an embedding row.

    Returns:
        dict: Title to persisted ProjectModel
    """
    async with session_factory() as session:
        mds = ProjectModel(
            title="Modern Day Sniper",
            slug="modern-day-sniper",
            summary="Brand identity and e-commerce site for an outdoor apparel label.",
            featured=True,
            features=["Custom storefront", "Brand guidelines"],
            tools=["Figma", "Shopify"],
            tags=["branding"],
        )
        swyvvl = ProjectModel(
            title="Swyvvl",
            slug="swyvvl",
            summary="Mobile app for booking local services.",
            featured=True,
            image_url="https://cdn.example.com/swyvvl/cover.png",
        )
        rctb = ProjectModel(
            title="River City Travel Ball",
            slug="river-city-travel-ball",
            summary="Team site for a youth baseball organisation.",
            featured=False,
        )
        session.add_all([mds, swyvvl, rctb])
        await session.flush()

        session.add(
            ProjectImageModel(
                project_id=mds.id,
                url="https://cdn.example.com/mds/hero.jpg",
                order_index=0,
            )
        )
        session.add(
            EmbeddingModel(
                content_id=str(mds.id),
                content_type=ContentType.PROJECT.value,
                project_title="Modern Day Sniper",
            )
        )
        await session.commit()

    return {project.title: project for project in (mds, swyvvl, rctb)}


def make_project_document(
    name: str,
    similarity: float = 0.7,
    content_id: str | None = None,
    match_type: MatchType = MatchType.VECTOR_MATCH,
    **content,
) -> ContextDocument:
    """Build a project ContextDocument for tests."""
    return ContextDocument(
        content_id=content_id or str(uuid.uuid4()),
        content_type=ContentType.PROJECT,
        similarity=similarity,
        content={"name": name, **content},
        match_type=match_type,
    )


def make_general_document(
    title: str,
    text: str,
    similarity: float = 0.7,
) -> ContextDocument:
    """Build a general-info ContextDocument for tests."""
    return ContextDocument(
        content_id=str(uuid.uuid4()),
        content_type=ContentType.GENERAL_INFO,
        similarity=similarity,
        content={"title": title, "content": text},
    )


@pytest.fixture
def project_document():
    """Provide the project document factory."""
    return make_project_document


@pytest.fixture
def general_document():
    """Provide the general-info document factory."""
    return make_general_document


@pytest.fixture(autouse=True)
async def drain_background():
    """Let detached tasks finish inside the test's event loop."""
    yield
    await drain_background_tasks(timeout=1)
