"""
Test suite for chat prompt assembly.

System role: Verification of the system prompt and message ordering
"""

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from portfolio_assistant.configs.assistant import AssistantSettings
from portfolio_assistant.core.prompts import NO_CONTEXT_TEXT, build_chat_messages
from portfolio_assistant.models.context import ProjectContent
from portfolio_assistant.models.intent import Intent, MatchPattern

PROJECT_INTENT = Intent(
    is_project_query=True,
    project_name="Swyvvl",
    confidence=0.9,
    match_pattern=MatchPattern.ALIAS_MATCH,
)


class TestBuildChatMessages:
    """Test suite for build_chat_messages."""

    def test_should_order_system_history_then_question(self) -> None:
        # Arrange
        history = [HumanMessage(content="Hi"), AIMessage(content="<p>Hello</p>")]

        # Act
        messages = build_chat_messages(
            prompt="What is Swyvvl?",
            context="[PROJECT: Swyvvl - Match: 90.0%]",
            intent=PROJECT_INTENT,
            settings=AssistantSettings(),
            history=history,
        )

        # Assert
        assert isinstance(messages[0], SystemMessage)
        assert [message.content for message in messages[1:3]] == ["Hi", "<p>Hello</p>"]
        assert isinstance(messages[-1], HumanMessage)
        assert messages[-1].content == "What is Swyvvl?"

    def test_should_embed_context_and_project_focus(self) -> None:
        # Arrange
        project = ProjectContent(name="Swyvvl", slug="swyvvl")

        # Act
        messages = build_chat_messages(
            prompt="What is Swyvvl?",
            context="[PROJECT: Swyvvl - Match: 90.0%]",
            intent=PROJECT_INTENT,
            settings=AssistantSettings(),
            relevant_project=project,
        )

        # Assert
        system = messages[0].content
        assert "[PROJECT: Swyvvl - Match: 90.0%]" in system
        assert 'asking about the "Swyvvl" project' in system
        assert '"slug": "swyvvl"' in system
        assert '<a href="/work/{slug}">' in system

    def test_empty_context_should_use_placeholder(self) -> None:
        # Act
        messages = build_chat_messages(
            prompt="Hello",
            context="",
            intent=Intent(),
            settings=AssistantSettings(owner_name="Sam"),
        )

        # Assert
        assert NO_CONTEXT_TEXT in messages[0].content
        assert "Sam's skills" in messages[0].content
        assert len(messages) == 2
