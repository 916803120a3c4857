"""
Portfolio assistant system prompt.

Defines the chat prompt template: a system message carrying the behavioral
rules and retrieved context, prior conversation turns, and the visitor's
question.

Dependencies: langchain_core.prompts, portfolio_assistant.configs
System role: Prompt template for answer generation
"""

import json

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from portfolio_assistant.configs.assistant import AssistantSettings
from portfolio_assistant.models.context import ProjectContent
from portfolio_assistant.models.intent import Intent

NO_CONTEXT_TEXT = "No specific information found in knowledge base."

SYSTEM_PROMPT = """You are an AI assistant for {owner_full_name}'s portfolio website. {owner_name} is {owner_summary}.

## Rules
1. Only provide information about real, documented projects from the context provided.
2. DO NOT invent or speculate about any projects, outcomes, or roles.
3. If no relevant project matches the question, say that no related project is available.
4. Maintain a professional and convincing tone, focusing on accurate and verified information.
5. Format responses in semantic HTML using only <h2>, <h3>, <p>, <ul>, <li>, <strong>, <em> and <a> tags.
6. DO NOT wrap the response in markdown code blocks and DO NOT use markdown syntax.
7. When linking to a project case study, ALWAYS use <a href="/work/{{slug}}">Project Name</a> where {{slug}} is the project's slug value.
8. DO NOT include any <img> tags. The interface displays project images separately.

{focus_instructions}

## Context
{context}

{relevant_project}"""

PROJECT_FOCUS = """## Current Project
The visitor is asking about the "{project_name}" project.
Focus your answer on accurate details about this specific project."""

PROJECT_BROWSE_FOCUS = """## Projects
The visitor is asking about {owner_name}'s work.
Summarize the most relevant documented projects and link to their case studies."""

GENERAL_FOCUS = """## General Information
The visitor is asking about {owner_name}'s skills, experience, or background.
Focus on {owner_name}'s professional expertise and capabilities.
Keep your answer concise and informative without unnecessary detail."""

PORTFOLIO_CHAT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    MessagesPlaceholder("history", optional=True),
    ("human", "{prompt}"),
])


def _focus_instructions(
    intent: Intent,
    relevant_project: ProjectContent | None,
    settings: AssistantSettings,
) -> str:
    if intent.is_project_query and relevant_project is not None:
        return PROJECT_FOCUS.format(project_name=relevant_project.display_name)
    if intent.is_project_query:
        return PROJECT_BROWSE_FOCUS.format(owner_name=settings.owner_name)
    return GENERAL_FOCUS.format(owner_name=settings.owner_name)


def build_chat_messages(
    prompt: str,
    context: str,
    intent: Intent,
    settings: AssistantSettings,
    history: list[BaseMessage] | None = None,
    relevant_project: ProjectContent | None = None,
) -> list[BaseMessage]:
    """
    Build the message list for the chat model.

    Args:
        prompt: Visitor question
        context: Formatted retrieval context ("" when nothing was found)
        intent: Classified query intent
        settings: Persona settings
        history: Prior turns in chronological order
        relevant_project: Project the answer is most likely about

    Returns:
        list[BaseMessage]: System message, history, then the question
    """
    project_block = ""
    if relevant_project is not None:
        project_json = json.dumps(
            relevant_project.model_dump(mode="json", exclude_none=True), indent=2
        )
        project_block = f"## Relevant Project\n{project_json}"

    return PORTFOLIO_CHAT_PROMPT.format_messages(
        owner_full_name=settings.owner_full_name,
        owner_name=settings.owner_name,
        owner_summary=settings.owner_summary,
        focus_instructions=_focus_instructions(intent, relevant_project, settings),
        context=context or NO_CONTEXT_TEXT,
        relevant_project=project_block,
        history=history or [],
        prompt=prompt,
    )
