"""
Base CRUD operations for SQLAlchemy models.

Generic insert and update-by-id shared by the model-specific CRUD classes.
Callers own the transaction: methods flush but never commit.

Dependencies: sqlalchemy, uuid
System role: Foundation for all database CRUD operations
"""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_assistant.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Insert a row and return it with generated id and timestamps.

        Raises:
            IntegrityError: On a unique constraint violation (at flush)
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def update_by_id(
        self,
        session: AsyncSession,
        id: UUID,
        **kwargs,
    ) -> int:
        """
        Update a row by primary key.

        Returns:
            Number of rows updated (0 when the id is unknown)
        """
        stmt = update(self.model).where(self.model.id == id).values(**kwargs)
        result = await session.execute(stmt)
        return result.rowcount
