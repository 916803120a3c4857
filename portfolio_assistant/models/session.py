"""
Session domain models and schemas.

Response schemas for conversation session operations.

Dependencies: pydantic
System role: Session API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SessionLookupResponse(BaseModel):
    """Resolved session id for a client-held session key."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(default=None, alias="sessionId")


class SessionSummary(BaseModel):
    """Listing entry for a conversation session."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    session_key: str
    title: str
    created_at: datetime
    updated_at: datetime


class SessionListResponse(BaseModel):
    """Most recently updated sessions."""

    sessions: list[SessionSummary]
    count: int


class ChatProjectsResponse(BaseModel):
    """Project titles offered as chat quick prompts."""

    model_config = ConfigDict(populate_by_name=True)

    projects: list[str]
    last_updated: datetime = Field(alias="lastUpdated")
