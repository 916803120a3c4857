"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from portfolio_assistant.boundary.db.CRUD import session_crud

    conversation = await session_crud.get_by_key(db, session_key)
"""

from portfolio_assistant.boundary.db.CRUD.analytics_crud import ChatAnalyticsCRUD, analytics_crud
from portfolio_assistant.boundary.db.CRUD.base_crud import BaseCRUD
from portfolio_assistant.boundary.db.CRUD.chat_message_crud import ChatMessageCRUD, chat_message_crud
from portfolio_assistant.boundary.db.CRUD.embedding_crud import EmbeddingCRUD, embedding_crud
from portfolio_assistant.boundary.db.CRUD.project_crud import ProjectCRUD, project_crud
from portfolio_assistant.boundary.db.CRUD.session_crud import (
    ConversationSessionCRUD,
    session_crud,
)

__all__ = [
    "BaseCRUD",
    "ProjectCRUD",
    "project_crud",
    "EmbeddingCRUD",
    "embedding_crud",
    "ConversationSessionCRUD",
    "session_crud",
    "ChatMessageCRUD",
    "chat_message_crud",
    "ChatAnalyticsCRUD",
    "analytics_crud",
]
