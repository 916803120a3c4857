"""
Conversation session CRUD operations.

Provides lookups by client session key, listing, and the one-time title
update for ConversationSessionModel.

Dependencies: sqlalchemy, portfolio_assistant.boundary.db.models
System role: Conversation session persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_assistant.boundary.db.base import utc_now
from portfolio_assistant.boundary.db.CRUD.base_crud import BaseCRUD
from portfolio_assistant.boundary.db.models.session_model import (
    DEFAULT_SESSION_TITLE,
    ConversationSessionModel,
)


class ConversationSessionCRUD(BaseCRUD[ConversationSessionModel]):
    """CRUD operations for ConversationSessionModel."""

    def __init__(self) -> None:
        super().__init__(ConversationSessionModel)

    async def get_by_key(
        self,
        session: AsyncSession,
        session_key: str,
    ) -> ConversationSessionModel | None:
        """
        Retrieve a session by its client-held key.

        Args:
            session: Async database session
            session_key: Opaque key from the browser

        Returns:
            ConversationSessionModel if found, None otherwise
        """
        stmt = select(ConversationSessionModel).where(
            ConversationSessionModel.session_key == session_key
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_recent(
        self,
        session: AsyncSession,
        limit: int = 10,
    ) -> Sequence[ConversationSessionModel]:
        """Sessions ordered by most recent update."""
        stmt = (
            select(ConversationSessionModel)
            .order_by(ConversationSessionModel.updated_at.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def rename_if_default(
        self,
        session: AsyncSession,
        id: UUID,
        title: str,
    ) -> bool:
        """
        Set the title only while the session still has the placeholder.

        Returns:
            True when the title was changed
        """
        stmt = (
            update(ConversationSessionModel)
            .where(
                ConversationSessionModel.id == id,
                ConversationSessionModel.title == DEFAULT_SESSION_TITLE,
            )
            .values(title=title, updated_at=utc_now())
        )
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def touch(self, session: AsyncSession, id: UUID) -> None:
        await self.update_by_id(session, id, updated_at=utc_now())


session_crud = ConversationSessionCRUD()
