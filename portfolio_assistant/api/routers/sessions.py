"""
Conversation session API endpoints.

Routes:
- GET /chat/session?sessionKey=... - Resolve a session key to a session id
- GET /chat/history?sessionId=...&limit=50 - Chat history in creation order
- GET /chat/sessions?limit=10 - Most recently updated sessions

Dependencies: portfolio_assistant.application.services.session_store, portfolio_assistant.models
System role: Conversation session HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from portfolio_assistant.api.deps import get_session_store
from portfolio_assistant.application.services.session_store import ConversationSessionStore
from portfolio_assistant.models.chat import ChatHistoryResponse, ChatMessageResponse
from portfolio_assistant.models.session import (
    SessionListResponse,
    SessionLookupResponse,
    SessionSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["sessions"])


@router.get("/session", response_model=SessionLookupResponse)
async def get_session(
    session_key: str | None = Query(default=None, alias="sessionKey"),
    session_store: ConversationSessionStore = Depends(get_session_store),
):
    """
    Look up the session id for a client-held key.

    Returns:
        SessionLookupResponse: {sessionId}, null when the key is unknown
    """
    if not session_key:
        return JSONResponse(status_code=400, content={"error": "Session key is required"})

    session_id = await session_store.find_session_id(session_key)
    return SessionLookupResponse(session_id=session_id)


@router.get("/history", response_model=ChatHistoryResponse)
async def get_chat_history(
    session_id: str | None = Query(default=None, alias="sessionId"),
    limit: int = Query(default=50, ge=1, le=500),
    session_store: ConversationSessionStore = Depends(get_session_store),
):
    """
    Get chat history for a session.

    Returns:
        ChatHistoryResponse: Messages oldest first and their count
    """
    if not session_id:
        return JSONResponse(status_code=400, content={"error": "Session ID is required"})

    messages = await session_store.get_chat_history(session_id, limit=limit)
    return ChatHistoryResponse(
        messages=[ChatMessageResponse.model_validate(message) for message in messages],
        count=len(messages),
    )


@router.get("/sessions", response_model=SessionListResponse)
async def list_sessions(
    limit: int = Query(default=10, ge=1, le=100),
    session_store: ConversationSessionStore = Depends(get_session_store),
) -> SessionListResponse:
    """List the most recently updated sessions."""
    sessions = await session_store.get_sessions_list(limit=limit)
    return SessionListResponse(
        sessions=[SessionSummary.model_validate(session) for session in sessions],
        count=len(sessions),
    )
