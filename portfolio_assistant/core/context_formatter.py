"""
Context formatting for prompt injection.

Renders ranked context documents as plain text blocks in input order.
Pure and total: never raises, and an empty input gives "".

Dependencies: portfolio_assistant.models.context
System role: Prompt context builder
"""

from collections.abc import Sequence

from portfolio_assistant.models.context import (
    ContextDocument,
    GeneralInfoContent,
    ProjectContent,
)


def _match_label(document: ContextDocument) -> str:
    return f"Match: {document.similarity * 100:.1f}%"


def _format_general_info(content: GeneralInfoContent, label: str) -> str:
    title = content.title or "General information"
    lines = [f"[{title} - {label}]"]
    if content.content:
        lines.append(content.content)
    return "\n".join(lines)


def _format_project(content: ProjectContent, label: str) -> str:
    lines = [f"[PROJECT: {content.display_name} - {label}]"]
    if content.slug:
        lines.append(f"Slug: {content.slug}")
    if content.summary or content.description:
        lines.append(content.summary or content.description)
    if content.features:
        lines.append("Key Features:")
        lines.extend(f"- {feature}" for feature in content.features)
    if content.tools:
        lines.append(f"Tools: {', '.join(content.tools)}")
    if content.tags:
        lines.append(f"Tags: {', '.join(content.tags)}")
    if content.url:
        lines.append(f"Project URL: {content.url}")
    return "\n".join(lines)


def format_context(documents: Sequence[ContextDocument]) -> str:
    """
    Format documents into a prompt-ready context block.

    Args:
        documents: Rank-ordered documents from hybrid search

    Returns:
        str: One block per document separated by blank lines, "" when empty
    """
    blocks = []
    for document in documents or ():
        label = _match_label(document)
        if isinstance(document.content, ProjectContent):
            blocks.append(_format_project(document.content, label))
        else:
            blocks.append(_format_general_info(document.content, label))
    return "\n\n".join(blocks)
