"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from picsum_gallery.adapters.picsum_client import PICSUM_LIST_URL
from picsum_gallery.services.storage import DEFAULT_STORAGE_KEY

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

STORAGE_BACKENDS = {"file", "supabase"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    images_url: str = PICSUM_LIST_URL
    storage_backend: str = "file"
    storage_path: Path = Path(".gallery")
    storage_key: str = DEFAULT_STORAGE_KEY
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "kv_store"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_storage_backend(raw: str | None) -> str:
    """Normalize the configured storage backend name."""
    if raw is None:
        return "file"
    cleaned = raw.strip().lower()
    if not cleaned:
        return "file"
    if cleaned not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown storage backend: {raw}")
    return cleaned
