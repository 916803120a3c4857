"""
Relevant project and illustration resolution.

Picks the project an answer is most likely about and resolves a
representative image URL for the stream's metadata frame. Resolution is an
enrichment: every failure yields None instead of an error.

Dependencies: sqlalchemy, portfolio_assistant.boundary.db
System role: Illustration lookup for the chat coordinator
"""

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portfolio_assistant.boundary.db.CRUD import project_crud
from portfolio_assistant.models.context import ContextDocument, MatchType, ProjectContent
from portfolio_assistant.models.intent import Intent

logger = logging.getLogger(__name__)

HIGH_SIMILARITY = 0.8
SKIP_LOOKUP_SIMILARITY = 0.85
MIN_IMAGE_URL_LENGTH = 10


def is_valid_image_url(url: str | None) -> bool:
    """Non-empty, http(s)-prefixed and longer than 10 characters."""
    if not url or not isinstance(url, str):
        return False
    return url.startswith(("http://", "https://")) and len(url) > MIN_IMAGE_URL_LENGTH


def _normalized(document: ContextDocument) -> ProjectContent:
    project = document.project.model_copy()
    if not project.name and project.title:
        project.name = project.title
    if not project.id and document.content_id:
        project.id = document.content_id
    return project


def find_most_relevant_project(
    documents: Sequence[ContextDocument],
    intent: Intent,
) -> ProjectContent | None:
    """
    Choose the project to illustrate.

    Non-project queries only get a project when some project document is
    above 0.85 similarity. Preference order: direct match, first project
    above 0.8, first project.

    Returns:
        A normalized copy of the project content, or None
    """
    projects = [document for document in documents if document.project is not None]
    if not projects:
        return None

    if not intent.is_project_query and not any(
        document.similarity > SKIP_LOOKUP_SIMILARITY for document in projects
    ):
        return None

    for document in projects:
        if document.match_type == MatchType.DIRECT_PROJECT_MATCH:
            return _normalized(document)

    for document in projects:
        if document.similarity > HIGH_SIMILARITY:
            return _normalized(document)

    return _normalized(projects[0])


def _parse_uuid(value: str | None) -> uuid.UUID | None:
    if not value:
        return None
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class ProjectImageResolver:
    """Resolves an illustration URL through the project image chain."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def resolve(self, project: ProjectContent) -> str | None:
        """
        Resolve a project's illustration.

        Chain: image_url, first gallery image, first project_images row by
        id, then re-resolve the id from the slug and retry.

        Args:
            project: Relevant project content

        Returns:
            A valid image URL, or None
        """
        if is_valid_image_url(project.image_url):
            return project.image_url

        if project.gallery_images and is_valid_image_url(project.gallery_images[0].url):
            return project.gallery_images[0].url

        try:
            async with self._session_factory() as session:
                project_id = _parse_uuid(project.id)
                if project_id is not None:
                    url = await project_crud.get_first_image_url(session, project_id)
                    if is_valid_image_url(url):
                        return url

                if project.slug:
                    row = await project_crud.get_by_slug(session, project.slug)
                    if row is not None and row.id != project_id:
                        url = await project_crud.get_first_image_url(session, row.id)
                        if is_valid_image_url(url):
                            return url
        except Exception as e:
            logger.warning(
                "Project image lookup failed",
                extra={
                    "project_id": project.id,
                    "slug": project.slug,
                    "error_type": type(e).__name__,
                    "error_msg": str(e),
                },
            )
        return None
