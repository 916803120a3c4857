"""
Assistant persona and generation settings.

Dependencies: pydantic, pydantic_settings
System role: Persona and per-intent generation parameters for the chat assistant
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssistantSettings(BaseSettings):
    """Persona and generation parameters for the portfolio assistant."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ASSISTANT_",
        case_sensitive=False,
        extra="ignore",
    )

    owner_name: str = Field(default="Jordan", description="Site owner's first name")
    owner_full_name: str = Field(default="Jordan Oakes", description="Site owner's full name")
    owner_summary: str = Field(
        default=(
            "a multi-disciplinary designer and developer specializing in user-centered "
            "digital experiences, with expertise in UX/UI design, web development, "
            "AI-driven solutions, and human-computer interaction"
        ),
        description="One-line persona summary injected into the system message",
    )

    project_temperature: float = Field(default=0.7, description="Sampling temperature for project queries")
    general_temperature: float = Field(default=0.4, description="Sampling temperature for general queries")
    project_max_tokens: int = Field(default=1000, description="Token cap for project answers")
    general_max_tokens: int = Field(default=700, description="Token cap for general answers")

    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Origins allowed to call the chat API",
    )
