"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    favorites_key: str = "favorites"
    favorites_backend: Literal["memory", "file", "supabase"] = "memory"
    favorites_path: Path = Path(".nutriknow/favorites.json")
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "kv_store"
    recent_limit: int = Field(default=5, ge=1)
    log_level: str = "INFO"
    environment: str = Field(default=_ENVIRONMENT, validation_alias="ENVIRONMENT")

    model_config = SettingsConfigDict(
        env_prefix="NUTRIKNOW_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
