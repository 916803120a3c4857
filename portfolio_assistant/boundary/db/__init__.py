"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), dispose_engine(): Async connection management
  - Project, embedding, conversation and analytics models
  - CRUD operation singletons

Dependencies: sqlalchemy, portfolio_assistant.configs
System role: Database adapter for the project catalogue, embeddings table,
conversation history and analytics.
"""

from portfolio_assistant.boundary.db.base import Base, TimestampMixin, UUIDMixin
from portfolio_assistant.boundary.db.connection import (
    dispose_engine,
    get_async_engine,
    get_async_session_factory,
)
from portfolio_assistant.boundary.db.models import (
    DEFAULT_SESSION_TITLE,
    ChatAnalyticsModel,
    ChatMessageModel,
    ConversationSessionModel,
    EmbeddingModel,
    ProjectImageModel,
    ProjectModel,
)
from portfolio_assistant.boundary.db.CRUD import (
    analytics_crud,
    chat_message_crud,
    embedding_crud,
    project_crud,
    session_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "dispose_engine",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "DEFAULT_SESSION_TITLE",
    "ProjectModel",
    "ProjectImageModel",
    "EmbeddingModel",
    "ConversationSessionModel",
    "ChatMessageModel",
    "ChatAnalyticsModel",
    # CRUD singletons
    "project_crud",
    "embedding_crud",
    "session_crud",
    "chat_message_crud",
    "analytics_crud",
]
