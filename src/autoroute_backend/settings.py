"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ROUTES_DIR = Path(__file__).resolve().parent / "api" / "routes"


class BackendSettings(BaseSettings):
    """Centralized settings for the autoroute backend service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    api_title: str = "Autoroute API"
    api_version: str = "0.1.0"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = ""
    routes_dir: Path = DEFAULT_ROUTES_DIR
    docs_url: str | None = "/docs"
    openapi_url: str | None = "/openapi.json"
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"
    rate_limit_window_seconds: int = 60
    rate_limit_max_calls: int = 30


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


__all__ = ["DEFAULT_ROUTES_DIR", "BackendSettings", "get_settings"]
