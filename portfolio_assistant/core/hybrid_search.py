"""
Hybrid search orchestrator.

Combines deterministic project detection with lexical + vector ranking:

    1. classify the query
    2. for a confidently named project, look it up directly and stage it
       as a guaranteed first result (similarity 0.99)
    3. always run the similarity store's hybrid search
    4. merge: direct match first and never duplicated; otherwise fall back
       to featured projects when a project-shaped query found nothing

Only the vector step may fail the call. Direct lookup and fallback degrade
to "no result" on any error.

Dependencies: sqlalchemy, pydantic, portfolio_assistant.boundary
System role: Retrieval for the chat coordinator
"""

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portfolio_assistant.boundary.db.CRUD import embedding_crud, project_crud
from portfolio_assistant.boundary.db.models import ProjectModel
from portfolio_assistant.boundary.llm.embeddings import QueryEmbedder
from portfolio_assistant.boundary.vdb.similarity_store import SimilarityStore
from portfolio_assistant.core.exceptions import RetrievalError
from portfolio_assistant.core.project_matcher import ProjectIntentDetector
from portfolio_assistant.models.context import ContentType, ContextDocument, MatchType
from portfolio_assistant.models.intent import Intent

logger = logging.getLogger(__name__)

DIRECT_MATCH_MIN_CONFIDENCE = 0.7
FALLBACK_MIN_CONFIDENCE = 0.4
DIRECT_MATCH_SIMILARITY = 0.99
FALLBACK_SIMILARITY = 0.3

DEFAULT_CONTENT_TYPES = (ContentType.GENERAL_INFO.value, ContentType.PROJECT.value)


def _project_key(document: ContextDocument) -> str | None:
    project = document.project
    if project is None or not project.name:
        return None
    return project.name.lower()


def _project_row_content(project: ProjectModel) -> dict[str, Any]:
    return {
        "id": str(project.id),
        "name": project.title,
        "title": project.title,
        "slug": project.slug,
        "summary": project.summary,
        "description": project.description,
        "category": project.category,
        "url": project.url,
        "image_url": project.image_url,
        "features": project.features or [],
        "tools": project.tools or [],
        "tags": project.tags or [],
    }


class HybridSearchOrchestrator:
    """
    Retrieves ranked context documents for a query.

    Stateless between calls; every database step opens its own session.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        similarity_store: SimilarityStore,
        embedder: QueryEmbedder,
        intent_detector: ProjectIntentDetector,
        default_match_threshold: float = 0.5,
        default_match_count: int = 5,
        fallback_project_count: int = 3,
    ) -> None:
        self._session_factory = session_factory
        self._similarity_store = similarity_store
        self._embedder = embedder
        self._intent_detector = intent_detector
        self._default_match_threshold = default_match_threshold
        self._default_match_count = default_match_count
        self._fallback_project_count = fallback_project_count

    async def search(
        self,
        query: str,
        match_threshold: float | None = None,
        match_count: int | None = None,
        content_types: Sequence[str] | None = None,
        intent: Intent | None = None,
    ) -> list[ContextDocument]:
        """
        Run hybrid search.

        Args:
            query: Raw visitor query
            match_threshold: Minimum similarity (default 0.5)
            match_count: Maximum vector results (default 5)
            content_types: Content types to keep (default project and general_info)
            intent: Precomputed intent; detected here when omitted

        Returns:
            Ranked, de-duplicated context documents

        Raises:
            RetrievalError: If embedding or similarity search fails
        """
        threshold = self._default_match_threshold if match_threshold is None else match_threshold
        count = self._default_match_count if match_count is None else match_count
        allowed_types = {
            ContentType(content_type).value
            for content_type in (content_types or DEFAULT_CONTENT_TYPES)
        }

        if intent is None:
            intent = await self._intent_detector.detect(query)

        specific_project: str | None = None
        direct: ContextDocument | None = None
        if (
            intent.has_specific_project
            and intent.confidence > DIRECT_MATCH_MIN_CONFIDENCE
        ):
            specific_project = intent.project_name
            direct = await self._direct_project_lookup(specific_project)

        search_text = query
        if specific_project and direct is None:
            search_text = specific_project
            logger.info(
                "Narrowing search text to project name",
                extra={"project_name": specific_project},
            )

        vector_results = await self._vector_search(query, search_text, threshold, count)
        filtered = [
            document
            for document in vector_results
            if document.content_type.value in allowed_types
        ]

        if direct is not None:
            merged = self._merge_with_direct(direct, filtered)
            logger.info(
                "Hybrid search complete",
                extra={"strategy": "direct", "result_count": len(merged)},
            )
            return merged

        if (
            not filtered
            and intent.is_project_query
            and intent.confidence > FALLBACK_MIN_CONFIDENCE
        ):
            fallback = await self._fallback_projects()
            if fallback:
                logger.info(
                    "Hybrid search complete",
                    extra={"strategy": "fallback", "result_count": len(fallback)},
                )
                return fallback

        logger.info(
            "Hybrid search complete",
            extra={"strategy": "vector", "result_count": len(filtered)},
        )
        return filtered

    async def _direct_project_lookup(self, project_name: str) -> ContextDocument | None:
        """Title -> embedding row -> full content. Any failure yields None."""
        try:
            async with self._session_factory() as session:
                project = await project_crud.get_by_title_ci(session, project_name)
                if project is None:
                    logger.info("Direct lookup: no project row", extra={"project_name": project_name})
                    return None
                embedding_row = await embedding_crud.get_project_embedding(session, project_name)
                if embedding_row is None:
                    logger.info(
                        "Direct lookup: project has no embedding row",
                        extra={"project_name": project_name},
                    )
                    return None
                content_id = embedding_row.content_id

            content = await self._similarity_store.get_content_by_id(
                content_id, ContentType.PROJECT.value
            )
            if not content:
                return None

            return ContextDocument(
                content_id=content_id,
                content_type=ContentType.PROJECT,
                similarity=DIRECT_MATCH_SIMILARITY,
                content=content,
                match_type=MatchType.DIRECT_PROJECT_MATCH,
            )
        except Exception as e:
            logger.warning(
                "Direct project lookup failed",
                extra={
                    "project_name": project_name,
                    "error_type": type(e).__name__,
                    "error_msg": str(e),
                },
            )
            return None

    async def _vector_search(
        self,
        query: str,
        search_text: str,
        threshold: float,
        count: int,
    ) -> list[ContextDocument]:
        try:
            embedding = await self._embedder.embed_query(query)
            rows = await self._similarity_store.hybrid_search(
                embedding, search_text, threshold, count
            )
        except RetrievalError as e:
            logger.error(
                f"{__name__}:_vector_search - FAILED - {type(e).__name__}: {e}"
            )
            raise

        documents = []
        for row in rows:
            try:
                documents.append(ContextDocument.model_validate(row))
            except PydanticValidationError as e:
                logger.warning(
                    "Skipping malformed search row",
                    extra={"content_id": row.get("content_id"), "error_msg": str(e)},
                )
        return documents

    @staticmethod
    def _merge_with_direct(
        direct: ContextDocument,
        results: list[ContextDocument],
    ) -> list[ContextDocument]:
        """Direct match first; drop any later project with the same name."""
        merged = [direct]
        seen_projects = {_project_key(direct)} - {None}
        seen_ids = {direct.content_id}
        for document in results:
            if document.is_project:
                key = _project_key(document)
                if key in seen_projects or document.content_id in seen_ids:
                    continue
                if key:
                    seen_projects.add(key)
            merged.append(document)
        return merged

    async def _fallback_projects(self) -> list[ContextDocument]:
        """Featured projects at low similarity. Any failure yields []."""
        try:
            async with self._session_factory() as session:
                projects = await project_crud.list_featured(
                    session, self._fallback_project_count
                )
        except Exception as e:
            logger.warning(
                "Fallback project lookup failed",
                extra={"error_type": type(e).__name__, "error_msg": str(e)},
            )
            return []

        documents = []
        for project in projects:
            content: dict[str, Any] | None = None
            try:
                content = await self._similarity_store.get_content_by_id(
                    str(project.id), ContentType.PROJECT.value
                )
            except Exception as e:
                logger.warning(
                    "Fallback content lookup failed, using project row",
                    extra={
                        "project_id": str(project.id),
                        "error_type": type(e).__name__,
                        "error_msg": str(e),
                    },
                )
            try:
                documents.append(
                    ContextDocument(
                        content_id=str(project.id),
                        content_type=ContentType.PROJECT,
                        similarity=FALLBACK_SIMILARITY,
                        content=content or _project_row_content(project),
                        match_type=MatchType.FALLBACK_PROJECT,
                    )
                )
            except Exception as e:
                logger.warning(
                    "Skipping fallback project",
                    extra={
                        "project_id": str(project.id),
                        "error_type": type(e).__name__,
                        "error_msg": str(e),
                    },
                )
        return documents
