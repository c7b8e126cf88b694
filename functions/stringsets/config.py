"""
Configuration and settings for the string sets service.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_prefix: str = Field(default="/api")

    log_level: str = Field(default="INFO", validation_alias="STRINGSETS_LOG_LEVEL")

    # Wall-clock bound for a single longest chain solve; None means unbounded.
    longest_chain_timeout_seconds: Optional[float] = Field(
        default=None, gt=0, validation_alias="STRINGSETS_LONGEST_CHAIN_TIMEOUT"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
