"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or a local .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    # Export
    csv_escape_quotes: bool = False  # double embedded quotes (RFC 4180)
    checklist_divider_width: int = Field(default=40, ge=1, le=200)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
