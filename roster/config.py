"""Configuration loading for the Roster user registry.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Rendering
    locale: Literal["en", "pt_BR"] = Field(
        default="en",
        description="Language for validation messages and the user report",
    )

    # Identifier generation
    id_strategy: Literal["uuid", "sequential"] = Field(
        default="uuid",
        description="How user identifiers are generated",
    )
    id_prefix: str = Field(
        default="user",
        description="Prefix for identifiers produced by the sequential strategy",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose command output",
    )

    @field_validator("id_prefix")
    @classmethod
    def validate_id_prefix(cls, v: str) -> str:
        """Ensure the identifier prefix is usable."""
        v = v.strip()
        if not v:
            raise ValueError("id_prefix must be a non-empty string")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
