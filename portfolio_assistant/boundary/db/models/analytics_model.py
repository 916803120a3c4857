"""
Chat analytics ORM model.

Dependencies: sqlalchemy, portfolio_assistant.boundary.db.base
System role: Per-exchange analytics record
"""

from uuid import UUID

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_assistant.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ChatAnalyticsModel(Base, UUIDMixin, TimestampMixin):
    """One answered query with the context it was answered from."""

    __tablename__ = "chat_analytics"

    query: Mapped[str] = mapped_column(Text, nullable=False)
    response: Mapped[str] = mapped_column(Text, nullable=False)
    session_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("conversation_sessions.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    user_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    search_results: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
