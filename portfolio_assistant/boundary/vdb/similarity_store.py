"""
Similarity store client.

Calls the two SQL functions the database exposes over the embeddings table:
hybrid_search (combined lexical + vector ranking) and get_content_by_id
(denormalized project or general-info content as JSON).

Dependencies: sqlalchemy, portfolio_assistant.core.exceptions
System role: Vector retrieval adapter
"""

import json
import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portfolio_assistant.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)

HYBRID_SEARCH_SQL = text(
    "SELECT content_id, content_type, similarity, content "
    "FROM hybrid_search("
    "CAST(:query_embedding AS vector), :query_text, :match_threshold, :match_count)"
)

GET_CONTENT_SQL = text(
    "SELECT get_content_by_id(:p_content_id, :p_content_type) AS content"
)


def to_pgvector_literal(embedding: list[float]) -> str:
    """Render an embedding in pgvector's text input format."""
    return "[" + ",".join(f"{value:.8f}" for value in embedding) + "]"


def _as_json(value: Any) -> Any:
    if isinstance(value, (str, bytes)):
        return json.loads(value)
    return value


class SimilarityStore:
    """
    Client for server-side similarity search.

    Each call opens its own session from the injected factory.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def hybrid_search(
        self,
        embedding: list[float],
        query_text: str,
        match_threshold: float,
        match_count: int,
    ) -> list[dict[str, Any]]:
        """
        Run combined lexical and vector ranking.

        Args:
            embedding: Query embedding
            query_text: Text used for the lexical half of the ranking
            match_threshold: Minimum similarity for returned rows
            match_count: Maximum number of rows

        Returns:
            Ranked rows with content_id, content_type, similarity, content

        Raises:
            VectorStoreError: If the query fails
        """
        params = {
            "query_embedding": to_pgvector_literal(embedding),
            "query_text": query_text,
            "match_threshold": match_threshold,
            "match_count": match_count,
        }
        try:
            async with self._session_factory() as session:
                result = await session.execute(HYBRID_SEARCH_SQL, params)
                rows = result.mappings().all()
        except SQLAlchemyError as e:
            raise VectorStoreError(
                message="Hybrid search query failed",
                operation="hybrid_search",
                details={"error": str(e), "match_count": match_count},
            ) from e

        return [
            {
                "content_id": row["content_id"],
                "content_type": row["content_type"],
                "similarity": float(row["similarity"] or 0.0),
                "content": _as_json(row["content"]) or {},
            }
            for row in rows
        ]

    async def get_content_by_id(
        self,
        content_id: str,
        content_type: str,
    ) -> dict[str, Any] | None:
        """
        Fetch denormalized content for one embedded row.

        Raises:
            VectorStoreError: If the query fails
        """
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    GET_CONTENT_SQL,
                    {"p_content_id": str(content_id), "p_content_type": content_type},
                )
                content = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise VectorStoreError(
                message="Content lookup failed",
                operation="get_content_by_id",
                details={"error": str(e), "content_id": str(content_id)},
            ) from e
        return _as_json(content) if content else None
