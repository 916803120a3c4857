"""
Conversation ORM models.

Conversation sessions keyed by a client-held session key, and their
append-only chat messages.

Dependencies: sqlalchemy, portfolio_assistant.boundary.db.base
System role: Conversation persistence for chat continuity
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_assistant.boundary.db.base import Base, TimestampMixin, UUIDMixin

DEFAULT_SESSION_TITLE = "New Chat"


class ConversationSessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Conversation session created lazily on the first message for a key.

    The unique constraint on session_key is what keeps concurrent first
    messages for the same key from creating two sessions.

    Attributes:
        session_key: Opaque key held by the browser
        title: Display title, "New Chat" until the first exchange names it
        messages: ChatMessageModel rows (cascading delete)
    """

    __tablename__ = "conversation_sessions"

    session_key: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default=DEFAULT_SESSION_TITLE,
    )

    messages = relationship(
        "ChatMessageModel",
        back_populates="session",
        cascade="all, delete-orphan",
    )


class ChatMessageModel(Base, UUIDMixin, TimestampMixin):
    """Single user or assistant turn."""

    __tablename__ = "chat_history"

    session_id: Mapped[UUID] = mapped_column(
        ForeignKey("conversation_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(String(16), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    session = relationship("ConversationSessionModel", back_populates="messages")
