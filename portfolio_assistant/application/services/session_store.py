"""
Conversation session store.

Maps client-held session keys to persisted sessions and their message
history. History is an enhancement, not a prerequisite for answering, so
every operation logs and swallows storage errors and returns a neutral
value instead.

Dependencies: sqlalchemy, portfolio_assistant.boundary.db
System role: Conversation persistence use cases
"""

import logging
import uuid
from collections.abc import Sequence
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portfolio_assistant.application.adapters import ASSISTANT_ROLE, USER_ROLE
from portfolio_assistant.boundary.db.CRUD import (
    analytics_crud,
    chat_message_crud,
    session_crud,
)
from portfolio_assistant.boundary.db.models import (
    ChatMessageModel,
    ConversationSessionModel,
)
from portfolio_assistant.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 30
VALID_ROLES = frozenset({USER_ROLE, ASSISTANT_ROLE})


def title_from_prompt(prompt: str) -> str:
    """First 30 characters of the prompt, with "..." when truncated."""
    text = " ".join(prompt.split())
    if len(text) > TITLE_MAX_LENGTH:
        return text[:TITLE_MAX_LENGTH] + "..."
    return text


def _parse_session_id(session_id: str | uuid.UUID) -> uuid.UUID | None:
    if isinstance(session_id, uuid.UUID):
        return session_id
    try:
        return uuid.UUID(str(session_id))
    except ValueError:
        logger.warning("Invalid session id", extra={"session_id": str(session_id)})
        return None


class ConversationSessionStore:
    """
    Session and message persistence.

    Each operation opens its own AsyncSession, so operations are safe to
    run from detached background tasks.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_or_create_session(self, session_key: str) -> str | None:
        """
        Resolve a session key to a session id, creating the session on first use.

        Two concurrent first calls for the same key both return the same id:
        the loser of the insert race hits the unique constraint, rolls back
        and re-reads the winner's row.

        Args:
            session_key: Opaque key held by the client

        Returns:
            Session id as a string, None when storage is unavailable
        """
        try:
            async with self._session_factory() as session:
                existing = await session_crud.get_by_key(session, session_key)
                if existing is not None:
                    return str(existing.id)

                try:
                    created = await session_crud.create(session, session_key=session_key)
                    await session.commit()
                    logger.info(
                        "Created conversation session",
                        extra={"session_id": str(created.id)},
                    )
                    return str(created.id)
                except IntegrityError:
                    await session.rollback()
                    winner = await session_crud.get_by_key(session, session_key)
                    return str(winner.id) if winner is not None else None
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger, "Failed to resolve conversation session", e, session_key=session_key
            )
            return None

    async def find_session_id(self, session_key: str) -> str | None:
        """Look up a session id without creating one."""
        try:
            async with self._session_factory() as session:
                existing = await session_crud.get_by_key(session, session_key)
                return str(existing.id) if existing is not None else None
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger, "Failed to look up conversation session", e, session_key=session_key
            )
            return None

    async def get_session_messages(
        self,
        session_id: str,
        limit: int,
    ) -> list[ChatMessageModel]:
        """
        Most recent messages first, up to `limit`.

        Callers reverse the list to prompt in chronological order.
        """
        parsed = _parse_session_id(session_id)
        if parsed is None or limit <= 0:
            return []
        try:
            async with self._session_factory() as session:
                return list(await chat_message_crud.get_recent(session, parsed, limit))
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger, "Failed to load session messages", e, session_id=session_id
            )
            return []

    async def get_chat_history(
        self,
        session_id: str,
        limit: int = 50,
    ) -> list[ChatMessageModel]:
        """Messages in creation order, up to `limit`."""
        parsed = _parse_session_id(session_id)
        if parsed is None:
            return []
        try:
            async with self._session_factory() as session:
                return list(await chat_message_crud.get_history(session, parsed, limit))
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger, "Failed to load chat history", e, session_id=session_id
            )
            return []

    async def save_chat_message(self, session_id: str, role: str, content: str) -> None:
        """Append one message."""
        await self.save_messages(session_id, [(role, content)])

    async def save_messages(
        self,
        session_id: str,
        messages: Sequence[tuple[str, str]],
    ) -> None:
        """
        Append messages in order within one transaction.

        Args:
            session_id: Owning session
            messages: (role, content) pairs
        """
        parsed = _parse_session_id(session_id)
        if parsed is None:
            return
        invalid = [role for role, _ in messages if role not in VALID_ROLES]
        if invalid:
            logger.warning("Refusing to save messages with unknown roles", extra={"roles": invalid})
            return
        try:
            async with self._session_factory() as session:
                for role, content in messages:
                    await chat_message_crud.add_message(session, parsed, role, content)
                await session_crud.touch(session, parsed)
                await session.commit()
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger, "Failed to save chat messages", e, session_id=session_id
            )

    async def update_session_title(self, session_id: str, title: str) -> None:
        """Name the session unless it already has a non-default title."""
        parsed = _parse_session_id(session_id)
        if parsed is None or not title.strip():
            return
        try:
            async with self._session_factory() as session:
                renamed = await session_crud.rename_if_default(session, parsed, title)
                await session.commit()
            if renamed:
                logger.info("Updated session title", extra={"session_id": session_id})
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger, "Failed to update session title", e, session_id=session_id
            )

    async def get_sessions_list(self, limit: int = 10) -> list[ConversationSessionModel]:
        """Most recently updated sessions first."""
        try:
            async with self._session_factory() as session:
                return list(await session_crud.list_recent(session, limit))
        except SQLAlchemyError as e:
            log_exception_with_context(logger, "Failed to list sessions", e)
            return []

    async def record_chat_interaction(
        self,
        query: str,
        response: str,
        session_id: str | None = None,
        search_results: list[dict[str, Any]] | None = None,
        user_id: str | None = None,
    ) -> None:
        """Insert one analytics row."""
        parsed = _parse_session_id(session_id) if session_id else None
        try:
            async with self._session_factory() as session:
                await analytics_crud.create(
                    session,
                    query=query,
                    response=response,
                    session_id=parsed,
                    user_id=user_id,
                    search_results=search_results or [],
                )
                await session.commit()
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger, "Failed to record chat analytics", e, session_id=session_id
            )
