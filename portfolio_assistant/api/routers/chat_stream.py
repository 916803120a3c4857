"""
Server-sent-event streaming chat endpoint.

Routes: GET /chat/stream?data=<json>

The query string carries a JSON payload {prompt, sessionKey?, includeHistory?}
so browsers can use EventSource. Frames are `data: <json>\\n\\n` with type
metadata, content, done or error.

Dependencies: portfolio_assistant.application.services.chat_service
System role: SSE streaming HTTP API
"""

import json
import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import ValidationError as PydanticValidationError

from portfolio_assistant.api.deps import get_chat_service
from portfolio_assistant.application.services.chat_service import ChatService
from portfolio_assistant.application.streaming import FrameChannel
from portfolio_assistant.models.chat import ChatRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["streaming"])

SSE_HEADERS = {
    "Cache-Control": "no-cache, no-transform",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",  # Disable nginx buffering
}


async def sse_frames(channel: FrameChannel) -> AsyncGenerator[str, None]:
    """Drain a frame channel as SSE lines; detach when the client goes away."""
    try:
        async for frame in channel:
            yield frame.to_sse()
    finally:
        channel.detach()


@router.get("/stream")
async def chat_stream(
    data: str | None = Query(default=None, description="JSON-encoded chat request"),
    chat_service: ChatService = Depends(get_chat_service),
):
    """Stream a chat answer using Server-Sent Events (SSE).

    Args:
        data: JSON payload with prompt, sessionKey and includeHistory
        chat_service: Injected ChatService

    Returns:
        StreamingResponse: SSE stream, or a 400 JSON body for a missing
        payload or prompt
    """
    if not data:
        return JSONResponse(status_code=400, content={"error": "Data parameter is required"})

    try:
        request = ChatRequest.model_validate(json.loads(data))
    except (json.JSONDecodeError, PydanticValidationError) as e:
        logger.warning(f"{__name__}:chat_stream - Invalid payload: {type(e).__name__}")
        return JSONResponse(status_code=400, content={"error": "Invalid data parameter"})

    if not request.prompt or not request.prompt.strip():
        return JSONResponse(status_code=400, content={"error": "Prompt is required"})

    logger.info(
        f"{__name__}:chat_stream - START has_session_key={bool(request.session_key)}"
    )
    channel = chat_service.stream_chat(request)

    return StreamingResponse(
        sse_frames(channel),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
