"""Configuration management for TextForge."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Session defaults
    default_mode: str = Field(
        default="uppercase",
        alias="TEXTFORGE_DEFAULT_MODE",
    )
    auto_apply: bool = Field(
        default=False,
        alias="TEXTFORGE_AUTO_APPLY",
    )

    # History settings (capacity never exceeds 10 entries)
    history_limit: int = Field(
        default=10,
        ge=1,
        le=10,
        alias="TEXTFORGE_HISTORY_LIMIT",
    )
    preview_length: int = Field(
        default=50,
        ge=1,
        alias="TEXTFORGE_PREVIEW_LENGTH",
    )
    time_format: str = Field(
        default="%I:%M:%S %p",
        alias="TEXTFORGE_TIME_FORMAT",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        alias="TEXTFORGE_LOG_LEVEL",
    )

    # Clipboard command override, e.g. "xclip -selection clipboard"
    clipboard_command: Optional[str] = Field(
        default=None,
        alias="TEXTFORGE_CLIPBOARD_COMMAND",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None
