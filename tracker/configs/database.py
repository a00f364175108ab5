"""
Database configuration settings.

Manages the parcel database connection parameters for SQLAlchemy.
Defaults to a local SQLite file; PostgreSQL is supported through asyncpg.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tracker.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Parcel database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TRACKER_DB_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="sqlite+aiosqlite:///tracker.db",
        description="SQLAlchemy async database URL",
    )

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured backend is SQLite (no server-side pool)."""
        return self.url.startswith("sqlite")

    @property
    def async_database_url(self) -> str:
        """
        Normalize the configured URL to an async driver URL.

        Plain ``postgres://`` / ``postgresql://`` URLs are rewritten to use
        asyncpg, and ``sqlite://`` to use aiosqlite.

        Returns:
            str: SQLAlchemy async-compatible database URL
        """
        url = self.url
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        if url.startswith("sqlite://"):
            return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return url
