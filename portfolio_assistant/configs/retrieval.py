"""
Retrieval configuration settings.

Thresholds, result counts and time budgets for hybrid search and the
project-title cache used by intent detection.

Dependencies: pydantic, pydantic_settings
System role: Retrieval tuning for the chat assistant
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """Hybrid search and intent routing configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RETRIEVAL_",
        case_sensitive=False,
        extra="ignore",
    )

    default_match_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Similarity threshold when callers pass none",
    )
    default_match_count: int = Field(
        default=5,
        ge=1,
        description="Result count when callers pass none",
    )

    project_match_threshold: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Threshold for queries naming a specific project",
    )
    project_match_count: int = Field(default=3, ge=1, description="Result count for project queries")
    general_match_threshold: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Threshold for general-information queries",
    )
    general_match_count: int = Field(default=3, ge=1, description="Result count for general queries")

    fallback_project_count: int = Field(
        default=3,
        ge=1,
        description="Featured projects substituted when project-shaped search finds nothing",
    )
    project_title_cache_ttl_seconds: float = Field(
        default=3600.0,
        description="Lifetime of the cached project-title list",
    )
    history_limit: int = Field(
        default=5,
        ge=0,
        description="Prior messages loaded for conversation continuity",
    )

    project_timeout_seconds: float = Field(
        default=12.0,
        description="Preparation budget for project-shaped queries",
    )
    general_timeout_seconds: float = Field(
        default=8.0,
        description="Preparation budget for general queries",
    )
