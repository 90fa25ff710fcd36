"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: Literal["file", "supabase"] = "file"
    state_dir: Path = Path(".grow_your_tree")
    storage_key: str = "gyt_state_v1"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "app_state"
    photo_max_bytes: int = 5_000_000
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
