"""
Chat message CRUD operations.

Append-only message rows per conversation session.

Dependencies: sqlalchemy, portfolio_assistant.boundary.db.models
System role: Chat message persistence
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_assistant.boundary.db.CRUD.base_crud import BaseCRUD
from portfolio_assistant.boundary.db.models.session_model import ChatMessageModel


class ChatMessageCRUD(BaseCRUD[ChatMessageModel]):
    """CRUD operations for ChatMessageModel."""

    def __init__(self) -> None:
        super().__init__(ChatMessageModel)

    async def add_message(
        self,
        session: AsyncSession,
        session_id: UUID,
        role: str,
        content: str,
    ) -> ChatMessageModel:
        return await self.create(
            session,
            session_id=session_id,
            role=role,
            content=content,
        )

    async def get_recent(
        self,
        session: AsyncSession,
        session_id: UUID,
        limit: int,
    ) -> Sequence[ChatMessageModel]:
        """
        Most recent messages first.

        Args:
            session: Async database session
            session_id: Owning conversation session
            limit: Maximum number of messages

        Returns:
            Messages ordered newest to oldest
        """
        stmt = (
            select(ChatMessageModel)
            .where(ChatMessageModel.session_id == session_id)
            .order_by(ChatMessageModel.created_at.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_history(
        self,
        session: AsyncSession,
        session_id: UUID,
        limit: int,
    ) -> Sequence[ChatMessageModel]:
        """Oldest messages first, up to `limit`."""
        stmt = (
            select(ChatMessageModel)
            .where(ChatMessageModel.session_id == session_id)
            .order_by(ChatMessageModel.created_at.asc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


chat_message_crud = ChatMessageCRUD()
