"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from portfolio_assistant.configs.assistant import AssistantSettings
from portfolio_assistant.configs.base import BaseSettings
from portfolio_assistant.configs.database import DatabaseSettings
from portfolio_assistant.configs.llm import OpenAISettings
from portfolio_assistant.configs.retrieval import RetrievalSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    openai: OpenAISettings = OpenAISettings()
    retrieval: RetrievalSettings = RetrievalSettings()
    assistant: AssistantSettings = AssistantSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from portfolio_assistant.configs import get_settings
        settings = get_settings()
    """
    return Settings()
