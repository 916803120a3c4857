"""
Retrieved context document schemas.

A ContextDocument is one ranked unit of retrieved information handed to the
language model. Its content is a tagged union keyed by content_type.

Dependencies: pydantic
System role: Retrieval result contracts
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ContentType(str, Enum):
    """Kinds of content held by the similarity store."""

    PROJECT = "project"
    GENERAL_INFO = "general_info"


class MatchType(str, Enum):
    """How a document entered the retrieval result."""

    DIRECT_PROJECT_MATCH = "direct_project_match"
    FALLBACK_PROJECT = "fallback_project"
    VECTOR_MATCH = "vector_match"


def _as_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    items = []
    for item in value:
        if isinstance(item, dict):
            item = item.get("name") or item.get("title") or item.get("text")
        if item:
            items.append(str(item))
    return items


class GalleryImage(BaseModel):
    """Single gallery entry attached to a project."""

    model_config = ConfigDict(extra="allow")

    url: str | None = None


class ProjectContent(BaseModel):
    """Denormalized project record as returned by get_content_by_id."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str | None = None
    title: str | None = None
    slug: str | None = None
    summary: str | None = None
    description: str | None = None
    features: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    url: str | None = None
    image_url: str | None = None
    gallery_images: list[GalleryImage] = Field(default_factory=list)
    category: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> str | None:
        return None if value is None else str(value)

    @field_validator("features", "tools", "tags", mode="before")
    @classmethod
    def _coerce_lists(cls, value: Any) -> list[str]:
        return _as_str_list(value)

    @field_validator("gallery_images", mode="before")
    @classmethod
    def _coerce_gallery(cls, value: Any) -> list[Any]:
        return value or []

    @model_validator(mode="after")
    def _name_from_title(self) -> "ProjectContent":
        if not self.name and self.title:
            self.name = self.title
        return self

    @property
    def display_name(self) -> str:
        return self.name or self.title or "Untitled project"


class GeneralInfoContent(BaseModel):
    """General information snippet about the site owner."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    title: str | None = None
    content: str | None = None
    category: str | None = None
    keywords: list[str] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> str | None:
        return None if value is None else str(value)

    @field_validator("keywords", mode="before")
    @classmethod
    def _coerce_keywords(cls, value: Any) -> list[str]:
        return _as_str_list(value)


class ContextDocument(BaseModel):
    """
    One ranked retrieval result.

    Attributes:
        content_id: Identifier of the underlying content row
        content_type: Discriminator for the content variant
        similarity: Relevance score in [0, 1]
        content: Project or general-info payload
        match_type: How the document was obtained
    """

    content_id: str
    content_type: ContentType
    similarity: float = 0.0
    content: ProjectContent | GeneralInfoContent
    match_type: MatchType = MatchType.VECTOR_MATCH

    @model_validator(mode="before")
    @classmethod
    def _select_content_variant(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("content_id") is not None:
            data["content_id"] = str(data["content_id"])
        if data.get("match_type") is None:
            data.pop("match_type", None)
        content = data.get("content") or {}
        if isinstance(content, dict):
            content_type = data.get("content_type")
            if content_type in (ContentType.PROJECT, ContentType.PROJECT.value):
                data["content"] = ProjectContent.model_validate(content)
            else:
                data["content"] = GeneralInfoContent.model_validate(content)
        return data

    @property
    def is_project(self) -> bool:
        return self.content_type == ContentType.PROJECT

    @property
    def project(self) -> ProjectContent | None:
        """Project payload, or None for general-info documents."""
        if isinstance(self.content, ProjectContent):
            return self.content
        return None
