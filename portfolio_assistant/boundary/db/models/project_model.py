"""
Project ORM models.

Portfolio projects and their ordered gallery images. Rows are maintained by
the admin side; the assistant only reads them.

Dependencies: sqlalchemy, portfolio_assistant.boundary.db.base
System role: Project catalogue read by intent detection and image resolution
"""

from uuid import UUID

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_assistant.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ProjectModel(Base, UUIDMixin, TimestampMixin):
    """
    Portfolio project.

    Attributes:
        title: Canonical project title matched by the intent detector
        slug: URL slug used for /work/{slug} links
        featured: Whether the project is promoted; drives fallback ordering
        image_url: Explicit illustration URL, highest priority for the metadata frame
    """

    __tablename__ = "projects"

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    features: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    tools: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    images = relationship(
        "ProjectImageModel",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ProjectImageModel.order_index",
    )


class ProjectImageModel(Base, UUIDMixin, TimestampMixin):
    """Gallery image attached to a project, ordered by order_index."""

    __tablename__ = "project_images"

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    alt_text: Mapped[str | None] = mapped_column(String(500), nullable=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    project = relationship("ProjectModel", back_populates="images")
