"""
Streaming frame schemas for SSE chat.

Defines frame types and payloads for the text/event-stream chat endpoint.
Frames serialize to camelCase JSON for the browser EventSource client.

Dependencies: pydantic
System role: Streaming protocol schemas
"""

import json
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from portfolio_assistant.models.context import ProjectContent


class StreamEventType(str, Enum):
    """Server-to-client frame types for streaming chat."""

    METADATA = "metadata"
    CONTENT = "content"
    DONE = "done"
    ERROR = "error"


class StreamFrame(BaseModel):
    """Base streaming frame model."""

    model_config = ConfigDict(populate_by_name=True)

    type: StreamEventType

    @property
    def is_terminal(self) -> bool:
        return self.type in (StreamEventType.DONE, StreamEventType.ERROR)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return self.model_dump(mode="json", by_alias=True)

    def to_sse(self) -> str:
        """Encode as a single server-sent-event data line."""
        return f"data: {json.dumps(self.to_dict())}\n\n"


class MetadataFrame(StreamFrame):
    """
    First frame of every successful stream.

    Attributes:
        project_image: Illustration URL for the relevant project, if any
        session_id: Server-assigned conversation session id, if any
        relevant_project: Project the answer is most likely about
    """

    type: Literal[StreamEventType.METADATA] = StreamEventType.METADATA
    project_image: str | None = Field(default=None, alias="projectImage")
    session_id: str | None = Field(default=None, alias="sessionId")
    relevant_project: ProjectContent | None = Field(default=None, alias="relevantProject")


class ContentFrame(StreamFrame):
    """Incremental token chunk from the language model."""

    type: Literal[StreamEventType.CONTENT] = StreamEventType.CONTENT
    content: str


class DoneFrame(StreamFrame):
    """Terminal frame for a completed answer."""

    type: Literal[StreamEventType.DONE] = StreamEventType.DONE


class ErrorFrame(StreamFrame):
    """Terminal frame for a failed request."""

    type: Literal[StreamEventType.ERROR] = StreamEventType.ERROR
    error: str
    message: str
