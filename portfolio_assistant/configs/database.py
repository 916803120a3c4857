"""
Database configuration settings.

The same PostgreSQL database hosts the portfolio tables, the embeddings
table (pgvector) and the server-side hybrid_search / get_content_by_id
functions. Hosted instances require TLS, so SSL defaults to "require".

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict

from portfolio_assistant.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection and pool configuration (POSTGRES_*)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: SecretStr = Field(default=SecretStr("postgres"), description="PostgreSQL password")
    db: str = Field(default="portfolio", description="PostgreSQL database name")
    sslmode: str = Field(
        default="require",
        description="TLS mode passed to asyncpg (disable, prefer, require, verify-full)",
    )

    pool_size: int = Field(default=5, ge=1, description="Persistent pooled connections")
    max_overflow: int = Field(default=10, ge=0, description="Extra connections under burst load")
    pool_timeout: int = Field(default=30, description="Seconds to wait for a pooled connection")
    pool_recycle: int = Field(
        default=1800,
        description="Recycle connections older than this many seconds",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def async_database_url(self) -> str:
        """asyncpg URL; the ssl query parameter is omitted when TLS is disabled."""
        url = (
            f"postgresql+asyncpg://{self.user}:{self.password.get_secret_value()}"
            f"@{self.host}:{self.port}/{self.db}"
        )
        if self.sslmode and self.sslmode != "disable":
            url += f"?ssl={self.sslmode}"
        return url
