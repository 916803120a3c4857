"""
Project CRUD operations.

Read-side queries over the project catalogue used by intent detection,
direct lookup, fallback and illustration resolution.

Dependencies: sqlalchemy, portfolio_assistant.boundary.db.models
System role: Project catalogue queries
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_assistant.boundary.db.CRUD.base_crud import BaseCRUD
from portfolio_assistant.boundary.db.models.project_model import (
    ProjectImageModel,
    ProjectModel,
)


class ProjectCRUD(BaseCRUD[ProjectModel]):
    """CRUD operations for ProjectModel."""

    def __init__(self) -> None:
        super().__init__(ProjectModel)

    async def list_titles(self, session: AsyncSession) -> list[str]:
        """
        Return every project title, alphabetically.

        The order is what the intent detector iterates, so it decides which
        title wins when one title is a substring of another.
        """
        stmt = select(ProjectModel.title).order_by(ProjectModel.title)
        result = await session.execute(stmt)
        return [title for title in result.scalars().all() if title]

    async def list_prompt_titles(self, session: AsyncSession) -> list[str]:
        """Every project title, featured first, then alphabetically."""
        stmt = select(ProjectModel.title).order_by(
            ProjectModel.featured.desc(), ProjectModel.title
        )
        result = await session.execute(stmt)
        return [title for title in result.scalars().all() if title]

    async def get_by_title_ci(
        self,
        session: AsyncSession,
        title: str,
    ) -> ProjectModel | None:
        """Find a project whose title equals `title` ignoring case."""
        stmt = (
            select(ProjectModel)
            .where(func.lower(ProjectModel.title) == title.lower())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def get_by_slug(self, session: AsyncSession, slug: str) -> ProjectModel | None:
        stmt = select(ProjectModel).where(ProjectModel.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_featured(
        self,
        session: AsyncSession,
        limit: int,
    ) -> Sequence[ProjectModel]:
        """Featured projects first, then the rest by title."""
        stmt = (
            select(ProjectModel)
            .order_by(ProjectModel.featured.desc(), ProjectModel.title)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_first_image_url(
        self,
        session: AsyncSession,
        project_id: UUID,
    ) -> str | None:
        """URL of the lowest order_index image for a project."""
        stmt = (
            select(ProjectImageModel.url)
            .where(ProjectImageModel.project_id == project_id)
            .order_by(ProjectImageModel.order_index)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalars().first()


project_crud = ProjectCRUD()
