"""
OpenAI embedding generator.

Generates query embeddings with text-embedding-3-small (1536 dimensions),
matching the model used to populate the embeddings table.

Dependencies: langchain-openai, portfolio_assistant.configs
System role: Embedding generation adapter
"""

import logging

from langchain_openai import OpenAIEmbeddings

from portfolio_assistant.configs.llm import OpenAISettings
from portfolio_assistant.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class QueryEmbedder:
    """OpenAI query embedding generator."""

    def __init__(
        self,
        settings: OpenAISettings,
        embeddings: OpenAIEmbeddings | None = None,
    ) -> None:
        """
        Initialize embeddings client.

        Args:
            settings: OpenAI configuration
            embeddings: Optional pre-built client (tests inject a fake)
        """
        self._dimensions = settings.embedding_dimensions
        self._embeddings = embeddings or OpenAIEmbeddings(
            model=settings.embedding_model,
            dimensions=settings.embedding_dimensions,
            api_key=settings.api_key,
            request_timeout=settings.request_timeout,
        )

    async def embed_query(self, query: str) -> list[float]:
        """
        Generate embedding for query.

        Args:
            query: Query text

        Returns:
            list[float]: Query embedding vector

        Raises:
            EmbeddingError: If the provider call fails or returns a wrong-sized vector
        """
        try:
            vector = await self._embeddings.aembed_query(query)
        except Exception as e:
            raise EmbeddingError(
                "Embedding generation failed",
                query=query,
                details={"error_type": type(e).__name__, "error": str(e)},
            ) from e

        if len(vector) != self._dimensions:
            raise EmbeddingError(
                "Embedding has unexpected dimensions",
                query=query,
                details={"expected": self._dimensions, "actual": len(vector)},
            )
        return vector
