"""
Chat history adapter.

Converts persisted chat messages into LangChain messages for prompting.

Dependencies: langchain_core.messages
System role: Bridge between conversation storage and the chat prompt
"""

from collections.abc import Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage

from portfolio_assistant.boundary.db.models import ChatMessageModel

USER_ROLE = "user"
ASSISTANT_ROLE = "assistant"


def to_langchain_messages(messages: Sequence[ChatMessageModel]) -> list[BaseMessage]:
    """
    Convert stored messages to LangChain messages, preserving order.

    Rows with an unknown role are skipped.

    Args:
        messages: Stored messages in the order they should be prompted

    Returns:
        list[BaseMessage]: HumanMessage / AIMessage list
    """
    converted: list[BaseMessage] = []
    for message in messages:
        if message.role == USER_ROLE:
            converted.append(HumanMessage(content=message.content))
        elif message.role == ASSISTANT_ROLE:
            converted.append(AIMessage(content=message.content))
    return converted
