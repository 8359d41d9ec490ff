"""
Application Configuration
Centralized configuration management using Pydantic Settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Lets-Schedule", description="Application name")
    app_env: str = Field(default="development", description="Environment")
    debug: bool = Field(default=False, description="Debug mode")

    # Database
    postgres_user: str = Field(default="letsschedule")
    postgres_password: str = Field(default="letsschedule_secret")
    postgres_db: str = Field(default="lets_schedule")
    postgres_host: str = Field(default="localhost")
    postgres_port: int = Field(default=5432)
    database_url: Optional[str] = Field(default=None)
    db_pool_size: int = Field(default=20)
    db_max_overflow: int = Field(default=10)

    # Logging
    log_level: str = Field(default="INFO")

    @property
    def database_url_sync(self) -> str:
        """Get synchronous database URL."""
        if self.database_url:
            return self.database_url.replace("+asyncpg", "")
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def database_url_async(self) -> str:
        """Get asynchronous database URL."""
        if self.database_url:
            if self.database_url.startswith("postgresql://"):
                return self.database_url.replace("postgresql://", "postgresql+asyncpg://")
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Export settings instance for convenience
settings = get_settings()
