"""
Database models package.

Exports:
  - ProjectModel, ProjectImageModel: Portfolio catalogue
  - EmbeddingModel: Relational view of the similarity store
  - ConversationSessionModel, ChatMessageModel: Conversation persistence
  - ChatAnalyticsModel: Per-exchange analytics

Dependencies: sqlalchemy, portfolio_assistant.boundary.db.base
System role: Database model definitions for domain entities
"""

from portfolio_assistant.boundary.db.models.analytics_model import ChatAnalyticsModel
from portfolio_assistant.boundary.db.models.embedding_model import EmbeddingModel
from portfolio_assistant.boundary.db.models.project_model import (
    ProjectImageModel,
    ProjectModel,
)
from portfolio_assistant.boundary.db.models.session_model import (
    DEFAULT_SESSION_TITLE,
    ChatMessageModel,
    ConversationSessionModel,
)

__all__ = [
    "ProjectModel",
    "ProjectImageModel",
    "EmbeddingModel",
    "ConversationSessionModel",
    "ChatMessageModel",
    "ChatAnalyticsModel",
    "DEFAULT_SESSION_TITLE",
]
