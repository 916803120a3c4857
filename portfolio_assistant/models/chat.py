"""
Chat domain models and schemas.

Request/response schemas for chat operations.

Dependencies: pydantic
System role: Chat API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from portfolio_assistant.models.context import ContextDocument, ProjectContent


class ChatRequest(BaseModel):
    """Request payload shared by the streaming and non-streaming endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    prompt: str | None = Field(default=None, description="Visitor question")
    session_key: str | None = Field(
        default=None,
        alias="sessionKey",
        description="Client-held conversation key",
    )
    include_history: bool = Field(
        default=True,
        alias="includeHistory",
        description="Load prior turns of the session into the prompt",
    )


class ChatResponse(BaseModel):
    """Response schema for the non-streaming chat endpoint."""

    response: str
    context: list[ContextDocument]
    prompt: str
    relevant_project: ProjectContent | None = None
    session_id: str | None = None


class ChatErrorResponse(BaseModel):
    """Error body carrying a user-safe message."""

    error: str
    response: str


class ChatMessageResponse(BaseModel):
    """Single chat message in history."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    role: str = Field(description="Message role: 'user' or 'assistant'")
    content: str = Field(description="Message content")
    created_at: datetime | None = None


class ChatHistoryResponse(BaseModel):
    """Response schema for chat history."""

    messages: list[ChatMessageResponse]
    count: int = Field(description="Number of messages returned")
