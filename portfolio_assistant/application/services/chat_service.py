"""
Chat service for portfolio Q&A with hybrid retrieval.

Orchestrates the full chat flow: intent classification, session resolution,
retrieval, illustration lookup, answer generation and detached persistence.
stream_chat() returns a FrameChannel for server-sent events; process_chat()
returns the whole answer at once.

Dependencies: portfolio_assistant.core, portfolio_assistant.boundary,
portfolio_assistant.application
System role: Chat service orchestration layer
"""

import asyncio
import logging
from dataclasses import dataclass, field

from langchain_core.messages import BaseMessage

from portfolio_assistant.application.adapters import (
    ASSISTANT_ROLE,
    USER_ROLE,
    to_langchain_messages,
)
from portfolio_assistant.application.services.session_store import (
    ConversationSessionStore,
    title_from_prompt,
)
from portfolio_assistant.application.streaming import FrameChannel, spawn_background
from portfolio_assistant.boundary.llm.chat_model import ChatModelClient
from portfolio_assistant.configs.assistant import AssistantSettings
from portfolio_assistant.configs.retrieval import RetrievalSettings
from portfolio_assistant.core.context_formatter import format_context
from portfolio_assistant.core.exceptions import RetrievalTimeoutError, ValidationError
from portfolio_assistant.core.hybrid_search import HybridSearchOrchestrator
from portfolio_assistant.core.project_image import (
    ProjectImageResolver,
    find_most_relevant_project,
)
from portfolio_assistant.core.project_matcher import ProjectIntentDetector
from portfolio_assistant.core.prompts import build_chat_messages
from portfolio_assistant.models.chat import ChatRequest, ChatResponse
from portfolio_assistant.models.context import ContextDocument, ProjectContent
from portfolio_assistant.models.intent import Intent
from portfolio_assistant.models.streaming import (
    ContentFrame,
    DoneFrame,
    ErrorFrame,
    MetadataFrame,
)

logger = logging.getLogger(__name__)

PROCESSING_ERROR_MESSAGE = (
    "I apologize, but something went wrong processing your request. Please try again."
)
STREAM_ERROR_MESSAGE = "There was an error generating the response. Please try again."
TIMEOUT_ERROR_MESSAGE = (
    "I'm sorry, but the request took too long to process. Please try a simpler question."
)
PROMPT_REQUIRED_MESSAGE = "Please enter a question to get started."


@dataclass
class PreparedChat:
    """Everything gathered before the model is called."""

    intent: Intent
    session_id: str | None = None
    history: list[BaseMessage] = field(default_factory=list)
    documents: list[ContextDocument] = field(default_factory=list)
    context: str = ""
    relevant_project: ProjectContent | None = None
    project_image: str | None = None


def _search_summary(documents: list[ContextDocument]) -> list[dict]:
    return [
        {
            "content_id": document.content_id,
            "content_type": document.content_type.value,
            "similarity": document.similarity,
            "match_type": document.match_type.value,
        }
        for document in documents
    ]


class ChatService:
    """
    Chat service for portfolio Q&A.

    Holds no per-request state; collaborators are shared across requests.
    """

    def __init__(
        self,
        intent_detector: ProjectIntentDetector,
        search: HybridSearchOrchestrator,
        image_resolver: ProjectImageResolver,
        session_store: ConversationSessionStore,
        chat_model: ChatModelClient,
        retrieval_settings: RetrievalSettings,
        assistant_settings: AssistantSettings,
    ) -> None:
        self.intent_detector = intent_detector
        self.search = search
        self.image_resolver = image_resolver
        self.session_store = session_store
        self.chat_model = chat_model
        self.retrieval_settings = retrieval_settings
        self.assistant_settings = assistant_settings

    def stream_chat(self, request: ChatRequest) -> FrameChannel:
        """
        Start a streamed answer.

        Frames: metadata, content*, then exactly one of done or error. An
        empty prompt yields a single error frame without touching any
        collaborator. The producer runs detached, so persistence still
        happens when the client disconnects mid-stream.

        Args:
            request: Chat request

        Returns:
            FrameChannel: Channel the transport drains
        """
        channel = FrameChannel()
        prompt = (request.prompt or "").strip()
        if not prompt:
            logger.info(f"{__name__}:stream_chat - Rejected empty prompt")
            channel.send(ErrorFrame(error="Prompt is required", message=PROMPT_REQUIRED_MESSAGE))
            return channel

        spawn_background(self._produce(channel, prompt, request), name="chat-stream")
        return channel

    async def process_chat(self, request: ChatRequest) -> ChatResponse:
        """
        Answer a chat request without streaming.

        Raises:
            ValidationError: If the prompt is missing
            RetrievalTimeoutError: If preparation exceeds its budget
            RetrievalError: If embedding or similarity search fails
            LanguageModelError: If the completion fails
        """
        prompt = (request.prompt or "").strip()
        if not prompt:
            raise ValidationError("Prompt is required", field="prompt")

        intent = await self.intent_detector.detect(prompt)
        prepared = await self._prepare_with_budget(prompt, request, intent)
        temperature, max_tokens = self._generation_params(intent)

        response = await self.chat_model.complete(
            self._build_messages(prompt, prepared), temperature, max_tokens
        )
        self._dispatch_persistence(prompt, response, prepared)

        return ChatResponse(
            response=response,
            context=prepared.documents,
            prompt=prompt,
            relevant_project=prepared.relevant_project,
            session_id=prepared.session_id,
        )

    async def _produce(self, channel: FrameChannel, prompt: str, request: ChatRequest) -> None:
        logger.info(f"{__name__}:_produce - START prompt_len={len(prompt)}")
        try:
            # Step 1: Classify and prepare within the time budget
            try:
                intent = await self.intent_detector.detect(prompt)
                prepared = await self._prepare_with_budget(prompt, request, intent)
            except RetrievalTimeoutError as e:
                logger.error(f"{__name__}:_produce - Step 1 FAILED: {e}")
                channel.send(ErrorFrame(error="Request timed out", message=TIMEOUT_ERROR_MESSAGE))
                return
            except Exception as e:
                logger.error(f"{__name__}:_produce - Step 1 FAILED: {type(e).__name__}: {e}")
                channel.send(
                    ErrorFrame(error="Failed to process request", message=PROCESSING_ERROR_MESSAGE)
                )
                return

            # Step 2: Metadata precedes every content frame
            channel.send(
                MetadataFrame(
                    project_image=prepared.project_image,
                    session_id=prepared.session_id,
                    relevant_project=prepared.relevant_project,
                )
            )

            # Step 3: Stream tokens, buffering the full answer
            temperature, max_tokens = self._generation_params(intent)
            chunks: list[str] = []
            try:
                async for token in self.chat_model.stream(
                    self._build_messages(prompt, prepared), temperature, max_tokens
                ):
                    chunks.append(token)
                    channel.send(ContentFrame(content=token))
            except Exception as e:
                logger.error(f"{__name__}:_produce - Step 3 FAILED: {type(e).__name__}: {e}")
                channel.send(ErrorFrame(error="Streaming error", message=STREAM_ERROR_MESSAGE))
                return

            response = "".join(chunks)
            logger.info(
                f"{__name__}:_produce - Step 3 OK: tokens={len(chunks)}, answer_len={len(response)}"
            )

            # Step 4: Complete, then persist detached from the client
            channel.send(DoneFrame())
            self._dispatch_persistence(prompt, response, prepared)
        finally:
            if not channel.closed:
                channel.send(
                    ErrorFrame(error="Failed to process request", message=PROCESSING_ERROR_MESSAGE)
                )

    async def _prepare_with_budget(
        self,
        prompt: str,
        request: ChatRequest,
        intent: Intent,
    ) -> PreparedChat:
        budget = (
            self.retrieval_settings.project_timeout_seconds
            if intent.is_project_query
            else self.retrieval_settings.general_timeout_seconds
        )
        try:
            return await asyncio.wait_for(self._prepare(prompt, request, intent), timeout=budget)
        except asyncio.TimeoutError:
            raise RetrievalTimeoutError(budget, query=prompt) from None

    async def _prepare(
        self,
        prompt: str,
        request: ChatRequest,
        intent: Intent,
    ) -> PreparedChat:
        prepared = PreparedChat(intent=intent)

        if request.session_key:
            prepared.session_id = await self.session_store.get_or_create_session(
                request.session_key
            )
            if prepared.session_id and request.include_history:
                recent = await self.session_store.get_session_messages(
                    prepared.session_id, self.retrieval_settings.history_limit
                )
                prepared.history = to_langchain_messages(list(reversed(recent)))

        threshold, count = self._retrieval_params(intent)
        prepared.documents = await self.search.search(
            prompt,
            match_threshold=threshold,
            match_count=count,
            intent=intent,
        )
        prepared.context = format_context(prepared.documents)
        logger.info(
            f"{__name__}:_prepare - Retrieved {len(prepared.documents)} documents "
            f"(threshold={threshold}, count={count})"
        )

        prepared.relevant_project = find_most_relevant_project(prepared.documents, intent)
        if prepared.relevant_project is not None:
            prepared.project_image = await self.image_resolver.resolve(prepared.relevant_project)
        return prepared

    def _retrieval_params(self, intent: Intent) -> tuple[float, int]:
        settings = self.retrieval_settings
        if intent.has_specific_project:
            return settings.project_match_threshold, settings.project_match_count
        return settings.general_match_threshold, settings.general_match_count

    def _generation_params(self, intent: Intent) -> tuple[float, int]:
        settings = self.assistant_settings
        if intent.is_project_query:
            return settings.project_temperature, settings.project_max_tokens
        return settings.general_temperature, settings.general_max_tokens

    def _build_messages(self, prompt: str, prepared: PreparedChat) -> list[BaseMessage]:
        return build_chat_messages(
            prompt=prompt,
            context=prepared.context,
            intent=prepared.intent,
            settings=self.assistant_settings,
            history=prepared.history,
            relevant_project=prepared.relevant_project,
        )

    def _dispatch_persistence(self, prompt: str, response: str, prepared: PreparedChat) -> None:
        """Fire the three persistence tasks without awaiting them."""
        session_id = prepared.session_id
        if session_id:
            spawn_background(
                self.session_store.save_messages(
                    session_id, [(USER_ROLE, prompt), (ASSISTANT_ROLE, response)]
                ),
                name="save-messages",
            )
            spawn_background(
                self.session_store.update_session_title(session_id, title_from_prompt(prompt)),
                name="update-title",
            )
        spawn_background(
            self.session_store.record_chat_interaction(
                prompt,
                response,
                session_id=session_id,
                search_results=_search_summary(prepared.documents),
            ),
            name="record-analytics",
        )
