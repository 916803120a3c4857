"""
OpenAI configuration settings.

Model identifiers and credentials for the chat completion and
embedding clients.

Dependencies: pydantic, pydantic_settings
System role: Language model and embedding provider configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAISettings(BaseSettings):
    """OpenAI chat and embedding model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="OPENAI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: SecretStr | None = Field(
        default=None,
        description="OpenAI API key",
    )
    chat_model: str = Field(
        default="gpt-4-turbo",
        description="Chat completion model used to answer visitor questions",
    )
    embedding_model: str = Field(
        default="text-embedding-3-small",
        description="Embedding model used for query vectors",
    )
    embedding_dimensions: int = Field(
        default=1536,
        description="Embedding vector dimension (must match the embeddings table)",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Per-request timeout in seconds for OpenAI API calls",
    )
