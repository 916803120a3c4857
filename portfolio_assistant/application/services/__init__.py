"""Service orchestrators."""

from .chat_service import ChatService
from .session_store import ConversationSessionStore, title_from_prompt

__all__ = [
    "ChatService",
    "ConversationSessionStore",
    "title_from_prompt",
]
