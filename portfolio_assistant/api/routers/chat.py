"""Chat API endpoints.

Routes:
- POST /chat - Answer a question in one response

Dependencies: portfolio_assistant.application.services.chat_service
System role: Non-streaming chat HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from portfolio_assistant.api.deps import get_chat_service
from portfolio_assistant.application.services.chat_service import (
    PROCESSING_ERROR_MESSAGE,
    PROMPT_REQUIRED_MESSAGE,
    TIMEOUT_ERROR_MESSAGE,
    ChatService,
)
from portfolio_assistant.core.exceptions import (
    LanguageModelError,
    RetrievalError,
    RetrievalTimeoutError,
    ValidationError,
)
from portfolio_assistant.models.chat import ChatErrorResponse, ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])

UPSTREAM_ERROR_MESSAGE = (
    "I'm having trouble connecting to my knowledge base right now. Please try again in a moment."
)


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ChatErrorResponse(error=error, response=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "",
    response_model=ChatResponse,
    responses={
        400: {"model": ChatErrorResponse},
        500: {"model": ChatErrorResponse},
        502: {"model": ChatErrorResponse},
        504: {"model": ChatErrorResponse},
    },
)
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
):
    """Answer a visitor question with retrieved portfolio context.

    Args:
        request: ChatRequest with prompt and optional session key
        chat_service: Injected ChatService

    Returns:
        ChatResponse: HTML answer, the context it was built from, and the relevant project

    Error responses carry a user-safe `response` message:
        400: Missing prompt
        504: Retrieval exceeded its time budget
        502: Embedding, similarity store or model call failed
        500: Anything else
    """
    try:
        return await chat_service.process_chat(request)
    except ValidationError as e:
        return _error_response(400, e.message, PROMPT_REQUIRED_MESSAGE)
    except RetrievalTimeoutError as e:
        logger.error(f"{__name__}:chat - Timeout: {e}", extra={"details": e.details})
        return _error_response(504, "Request timed out", TIMEOUT_ERROR_MESSAGE)
    except (RetrievalError, LanguageModelError) as e:
        logger.error(f"{__name__}:chat - Upstream failure: {type(e).__name__}: {e}")
        return _error_response(502, "Upstream service unavailable", UPSTREAM_ERROR_MESSAGE)
    except Exception as e:
        logger.exception(
            "Chat processing failed",
            extra={"error_type": type(e).__name__, "error_msg": str(e)},
        )
        return _error_response(500, "Failed to process request", PROCESSING_ERROR_MESSAGE)
