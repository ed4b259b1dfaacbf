"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Deployments that need durable data should select the
json storage backend explicitly.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Storage provider settings.

    Environment variables:
        TEAMTRACK_STORAGE_BACKEND: "memory" or "json" (default: memory)
        TEAMTRACK_STORAGE_PATH: JSON document path (default: teamtrack.json)
    """

    model_config = SettingsConfigDict(
        env_prefix="TEAMTRACK_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    backend: Literal["memory", "json"] = Field(
        default="memory",
        description="Which storage provider backs the collections",
    )
    path: Path = Field(
        default=Path("teamtrack.json"),
        description="Location of the JSON document for the json backend",
    )

    @model_validator(mode="after")
    def validate_path(self) -> "StorageSettings":
        """Reject a directory as the json document path."""
        if self.backend == "json" and self.path.is_dir():
            raise ValueError(f"storage path {self.path} is a directory")
        return self


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections.

    Environment variables:
        TEAMTRACK_DEBUG: Debug mode
        TEAMTRACK_RECENT_GROUPS_LIMIT: Groups listed on the dashboard (default: 5)
    """

    model_config = SettingsConfigDict(
        env_prefix="TEAMTRACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Debug mode")
    recent_groups_limit: int = Field(
        default=5,
        description="Number of groups shown in the dashboard summary",
        ge=1,
        le=100,
    )

    @property
    def storage(self) -> StorageSettings:
        """Get storage settings."""
        return get_storage_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_storage_settings() -> StorageSettings:
    """Get cached storage settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return StorageSettings()
