"""
Embedding store ORM model.

Relational view of the similarity store. The vector column is written by the
ingestion job and queried only through the hybrid_search SQL function, so it
is not mapped here.

Dependencies: sqlalchemy, portfolio_assistant.boundary.db.base
System role: Direct project lookup in hybrid search
"""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_assistant.boundary.db.base import Base, TimestampMixin, UUIDMixin


class EmbeddingModel(Base, UUIDMixin, TimestampMixin):
    """
    One embedded content row.

    Attributes:
        content_id: Id of the project or general-info row that was embedded
        content_type: "project" or "general_info"
        project_title: Denormalized title for project rows
        chunk_metadata: Free-form metadata stored alongside the vector
    """

    __tablename__ = "embeddings"

    content_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    content_type: Mapped[str] = mapped_column(String(32), nullable=False)
    project_title: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    chunk_metadata: Mapped[dict] = mapped_column(
        "metadata",
        JSON,
        nullable=False,
        default=dict,
    )
