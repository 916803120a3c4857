"""
OpenAI chat completion client.

Wraps ChatOpenAI for token streaming and one-shot completions with
per-request temperature and token limits.

Dependencies: langchain-openai, langchain-core, portfolio_assistant.configs
System role: Language model adapter for answer generation
"""

import logging
from collections.abc import AsyncGenerator

from langchain_core.messages import BaseMessage
from langchain_openai import ChatOpenAI

from portfolio_assistant.configs.llm import OpenAISettings
from portfolio_assistant.core.exceptions import LanguageModelError

logger = logging.getLogger(__name__)


def chunk_text(content: str | list) -> str:
    """Flatten a message chunk's content to plain text."""
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content)


class ChatModelClient:
    """Chat completion client with streaming support."""

    def __init__(
        self,
        settings: OpenAISettings,
        model: ChatOpenAI | None = None,
    ) -> None:
        self._model_id = settings.chat_model
        self._model = model or ChatOpenAI(
            model=settings.chat_model,
            api_key=settings.api_key,
            timeout=settings.request_timeout,
            streaming=True,
        )

    async def stream(
        self,
        messages: list[BaseMessage],
        temperature: float,
        max_tokens: int,
    ) -> AsyncGenerator[str, None]:
        """
        Stream completion tokens.

        Args:
            messages: System, history and user messages
            temperature: Sampling temperature
            max_tokens: Completion token cap

        Yields:
            str: Non-empty text chunks in arrival order

        Raises:
            LanguageModelError: If the provider call fails mid-stream
        """
        model = self._model.bind(temperature=temperature, max_tokens=max_tokens)
        try:
            async for chunk in model.astream(messages):
                token = chunk_text(chunk.content) if chunk.content else ""
                if token:
                    yield token
        except Exception as e:
            logger.error(
                f"{__name__}:stream - FAILED (model={self._model_id}) - {type(e).__name__}: {e}"
            )
            raise LanguageModelError(
                "Chat completion stream failed",
                details={"model": self._model_id, "error_type": type(e).__name__},
            ) from e

    async def complete(
        self,
        messages: list[BaseMessage],
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Return the full completion text in one call."""
        model = self._model.bind(temperature=temperature, max_tokens=max_tokens)
        try:
            result = await model.ainvoke(messages)
        except Exception as e:
            raise LanguageModelError(
                "Chat completion failed",
                details={"model": self._model_id, "error_type": type(e).__name__},
            ) from e
        return chunk_text(result.content)
