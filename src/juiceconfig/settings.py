"""
Library settings using Pydantic.

Provides environment-based configuration loading with JUICE_ prefix.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """juiceconfig settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JUICE_",
        extra="ignore",
    )

    # Selector for the process-wide default store (JUICE_CONFIG)
    config: str | None = None

    # AWS Secrets Manager
    secrets_version_stage: str = "AWSCURRENT"
    aws_endpoint_url: str | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
