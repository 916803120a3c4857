"""
Embedding store CRUD operations.

Dependencies: sqlalchemy, portfolio_assistant.boundary.db.models
System role: Relational lookups against the embeddings table
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_assistant.boundary.db.CRUD.base_crud import BaseCRUD
from portfolio_assistant.boundary.db.models.embedding_model import EmbeddingModel
from portfolio_assistant.models.context import ContentType


class EmbeddingCRUD(BaseCRUD[EmbeddingModel]):
    """CRUD operations for EmbeddingModel."""

    def __init__(self) -> None:
        super().__init__(EmbeddingModel)

    async def get_project_embedding(
        self,
        session: AsyncSession,
        project_title: str,
    ) -> EmbeddingModel | None:
        """
        Find the embedded row for a project by its title.

        Args:
            session: Async database session
            project_title: Canonical project title

        Returns:
            First matching embedding row, None when the project was never embedded
        """
        stmt = (
            select(EmbeddingModel)
            .where(
                EmbeddingModel.content_type == ContentType.PROJECT.value,
                EmbeddingModel.project_title == project_title,
            )
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalars().first()


embedding_crud = EmbeddingCRUD()
