"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived collaborators (the
engine-backed session factory, OpenAI clients, the project-title cache) are
built lazily once per process and shared across requests.

Dependencies: portfolio_assistant.configs, portfolio_assistant.application,
portfolio_assistant.boundary
System role: DI container for service injection
"""

from portfolio_assistant.configs import Settings, get_settings
from portfolio_assistant.application.services.chat_service import ChatService
from portfolio_assistant.application.services.session_store import ConversationSessionStore


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._session_factory = None
        self._similarity_store = None
        self._embedder = None
        self._chat_model = None
        self._title_cache = None
        self._intent_detector = None
        self._hybrid_search = None
        self._image_resolver = None
        self._session_store = None
        self._chat_service = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def session_factory(self):
        """Get cached async session factory."""
        if self._session_factory is None:
            from portfolio_assistant.boundary.db import get_async_session_factory
            self._session_factory = get_async_session_factory()
        return self._session_factory

    @property
    def similarity_store(self):
        """Get cached similarity store client."""
        if self._similarity_store is None:
            from portfolio_assistant.boundary.vdb import SimilarityStore
            self._similarity_store = SimilarityStore(self.session_factory)
        return self._similarity_store

    @property
    def embedder(self):
        """Get cached query embedder."""
        if self._embedder is None:
            from portfolio_assistant.boundary.llm import QueryEmbedder
            self._embedder = QueryEmbedder(self.settings.openai)
        return self._embedder

    @property
    def chat_model(self):
        """Get cached chat model client."""
        if self._chat_model is None:
            from portfolio_assistant.boundary.llm import ChatModelClient
            self._chat_model = ChatModelClient(self.settings.openai)
        return self._chat_model

    @property
    def title_cache(self):
        """Get the process-wide project-title cache."""
        if self._title_cache is None:
            from portfolio_assistant.boundary.db.CRUD import project_crud
            from portfolio_assistant.core.project_matcher import ProjectTitleCache

            session_factory = self.session_factory

            async def load_titles() -> list[str]:
                async with session_factory() as session:
                    return await project_crud.list_titles(session)

            self._title_cache = ProjectTitleCache(
                load_titles,
                ttl_seconds=self.settings.retrieval.project_title_cache_ttl_seconds,
            )
        return self._title_cache

    @property
    def intent_detector(self):
        """Get cached intent detector."""
        if self._intent_detector is None:
            from portfolio_assistant.core.project_matcher import ProjectIntentDetector
            self._intent_detector = ProjectIntentDetector(
                self.title_cache,
                owner_name=self.settings.assistant.owner_name,
            )
        return self._intent_detector

    @property
    def hybrid_search(self):
        """Get cached hybrid search orchestrator."""
        if self._hybrid_search is None:
            from portfolio_assistant.core.hybrid_search import HybridSearchOrchestrator

            retrieval = self.settings.retrieval
            self._hybrid_search = HybridSearchOrchestrator(
                session_factory=self.session_factory,
                similarity_store=self.similarity_store,
                embedder=self.embedder,
                intent_detector=self.intent_detector,
                default_match_threshold=retrieval.default_match_threshold,
                default_match_count=retrieval.default_match_count,
                fallback_project_count=retrieval.fallback_project_count,
            )
        return self._hybrid_search

    @property
    def image_resolver(self):
        """Get cached project image resolver."""
        if self._image_resolver is None:
            from portfolio_assistant.core.project_image import ProjectImageResolver
            self._image_resolver = ProjectImageResolver(self.session_factory)
        return self._image_resolver

    @property
    def session_store(self) -> ConversationSessionStore:
        """Get cached conversation session store."""
        if self._session_store is None:
            self._session_store = ConversationSessionStore(self.session_factory)
        return self._session_store

    @property
    def chat_service(self) -> ChatService:
        """Get cached chat service."""
        if self._chat_service is None:
            self._chat_service = ChatService(
                intent_detector=self.intent_detector,
                search=self.hybrid_search,
                image_resolver=self.image_resolver,
                session_store=self.session_store,
                chat_model=self.chat_model,
                retrieval_settings=self.settings.retrieval,
                assistant_settings=self.settings.assistant,
            )
        return self._chat_service


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_chat_service() -> ChatService:
    """
    Get chat service instance.

    Returns:
        ChatService: Shared chat service wired to the database and OpenAI
    """
    return get_service_cache().chat_service


def get_session_store() -> ConversationSessionStore:
    """
    Get conversation session store.

    Returns:
        ConversationSessionStore: Shared store; opens a session per operation
    """
    return get_service_cache().session_store
