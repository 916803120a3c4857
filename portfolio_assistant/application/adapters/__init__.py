"""Adapters between storage rows and prompt-level objects."""

from portfolio_assistant.application.adapters.chat_history_adapter import (
    ASSISTANT_ROLE,
    USER_ROLE,
    to_langchain_messages,
)

__all__ = ["ASSISTANT_ROLE", "USER_ROLE", "to_langchain_messages"]
