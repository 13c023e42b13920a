"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings so a test suite can tune diagnostics without code
changes:
  - TESTERR_NIL_TOKEN: rendering of an absent error in diagnostics
  - TESTERR_LOG_LEVEL: threshold for the library's structlog output

Settings are read once and cached; call get_settings.cache_clear() to reload.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NIL_TOKEN = "<nil>"
DEFAULT_LOG_LEVEL = "WARNING"


class TesterrSettings(BaseSettings):
    """
    Root settings for the library.

    Load order (highest priority first):
      1. Environment variables prefixed with TESTERR_
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="TESTERR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    nil_token: str = Field(
        default=DEFAULT_NIL_TOKEN,
        min_length=1,
        description="How an absent error is rendered after 'got error'",
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Reject names the logging module does not know."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> TesterrSettings:
    """Return the process-wide settings, loading them on first use."""
    return TesterrSettings()
