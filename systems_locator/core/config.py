"""Locator configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from ``SYSTEMS_LOCATOR_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SYSTEMS_LOCATOR_",
        extra="ignore",
    )

    LOG_LEVEL: str = Field(default="info")
    LOG_DIR: Path | None = Field(default=None)
    LOG_SCHEMA_VERSION: str = Field(default="1.0.0")

    # Bootstrapping
    DEFAULT_ROOT_NAME: str = Field(default="Systems")
    SKIP_ROOT_KEYWORD: str = Field(default="SkipSystemsPrefab")
    DEFAULT_PREFAB_PATH: str = Field(default="Systems")


settings = Settings()
config = settings  # Alias for backward compatibility


__all__ = ["Settings", "settings", "config"]
