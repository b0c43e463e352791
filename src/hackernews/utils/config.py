"""Type-safe environment configuration using Pydantic Settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Client configuration loaded from environment variables.

    Every field has a default so the client works without any setup.
    Values can be overridden from the environment or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields in .env
        env_ignore_empty=True,
    )

    APP_NAME: str = Field(
        default="hackernews-client",
        description="Application name"
    )

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment"
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    # Hacker News Search API
    HN_API_BASE_URL: str = Field(
        default="https://hn.algolia.com/api/v1",
        description="Base URL of the Algolia HN Search API"
    )

    API_TIMEOUT: float = Field(
        default=30.0,
        description="API timeout in seconds",
        gt=0  # Must be greater than 0
    )

    HN_HITS_PER_PAGE: int = Field(
        default=34,
        description="Results per page used by the listing shortcuts",
        gt=0
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_levels}, got '{v}'"
            )
        return v_upper

    @field_validator("HN_API_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop trailing slashes so endpoint paths can be appended."""
        stripped = v.strip().rstrip("/")
        if not stripped:
            raise ValueError("HN_API_BASE_URL must not be empty")
        return stripped


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Loads settings from environment variables and .env file on first call.
    Subsequent calls return the cached instance.

    Returns:
        Settings: The application settings instance

    Raises:
        ValidationError: If environment variables are invalid
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton. Useful for testing."""
    global _settings
    _settings = None
