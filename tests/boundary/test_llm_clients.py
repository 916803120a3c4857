"""
Test suite for the OpenAI embedding and chat clients.

The langchain clients are replaced with mocks; no network calls are made.

System role: Verification of language model adapters
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage, AIMessageChunk, HumanMessage

from portfolio_assistant.boundary.llm.chat_model import ChatModelClient, chunk_text
from portfolio_assistant.boundary.llm.embeddings import QueryEmbedder
from portfolio_assistant.configs.llm import OpenAISettings
from portfolio_assistant.core.exceptions import EmbeddingError, LanguageModelError


@pytest.fixture
def settings() -> OpenAISettings:
    return OpenAISettings(embedding_dimensions=3)


class TestQueryEmbedder:
    """Test suite for QueryEmbedder."""

    @pytest.mark.asyncio
    async def test_should_return_vector(self, settings) -> None:
        # Arrange
        embeddings = MagicMock()
        embeddings.aembed_query = AsyncMock(return_value=[0.1, 0.2, 0.3])
        embedder = QueryEmbedder(settings, embeddings=embeddings)

        # Act
        vector = await embedder.embed_query("skills")

        # Assert
        assert vector == [0.1, 0.2, 0.3]

    @pytest.mark.asyncio
    async def test_wrong_dimensions_should_raise(self, settings) -> None:
        # Arrange
        embeddings = MagicMock()
        embeddings.aembed_query = AsyncMock(return_value=[0.1, 0.2])
        embedder = QueryEmbedder(settings, embeddings=embeddings)

        # Act & Assert
        with pytest.raises(EmbeddingError):
            await embedder.embed_query("skills")

    @pytest.mark.asyncio
    async def test_provider_failure_should_raise(self, settings) -> None:
        # Arrange
        embeddings = MagicMock()
        embeddings.aembed_query = AsyncMock(side_effect=ConnectionError("reset"))
        embedder = QueryEmbedder(settings, embeddings=embeddings)

        # Act & Assert
        with pytest.raises(EmbeddingError) as exc_info:
            await embedder.embed_query("skills")
        assert exc_info.value.details["error_type"] == "ConnectionError"


class TestChatModelClient:
    """Test suite for ChatModelClient."""

    @pytest.mark.asyncio
    async def test_stream_should_yield_non_empty_tokens(self, settings) -> None:
        # Arrange
        async def astream(messages):
            for text in ("<p>", "", "Hi</p>"):
                yield AIMessageChunk(content=text)

        bound = MagicMock()
        bound.astream = astream
        model = MagicMock()
        model.bind.return_value = bound
        client = ChatModelClient(settings, model=model)

        # Act
        tokens = [token async for token in client.stream([HumanMessage(content="Hi")], 0.7, 1000)]

        # Assert
        assert tokens == ["<p>", "Hi</p>"]
        model.bind.assert_called_once_with(temperature=0.7, max_tokens=1000)

    @pytest.mark.asyncio
    async def test_stream_failure_should_raise_language_model_error(self, settings) -> None:
        # Arrange
        async def astream(messages):
            yield AIMessageChunk(content="<p>")
            raise TimeoutError("read timeout")

        bound = MagicMock()
        bound.astream = astream
        model = MagicMock()
        model.bind.return_value = bound
        client = ChatModelClient(settings, model=model)

        # Act & Assert
        with pytest.raises(LanguageModelError):
            async for _ in client.stream([HumanMessage(content="Hi")], 0.7, 1000):
                pass

    @pytest.mark.asyncio
    async def test_complete_should_return_text(self, settings) -> None:
        # Arrange
        bound = MagicMock()
        bound.ainvoke = AsyncMock(return_value=AIMessage(content="<p>Done</p>"))
        model = MagicMock()
        model.bind.return_value = bound
        client = ChatModelClient(settings, model=model)

        # Act
        text = await client.complete([HumanMessage(content="Hi")], 0.4, 700)

        # Assert
        assert text == "<p>Done</p>"

    def test_chunk_text_should_flatten_content_blocks(self) -> None:
        assert chunk_text([{"type": "text", "text": "a"}, "b"]) == "ab"
