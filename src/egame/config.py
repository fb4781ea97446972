"""Runtime configuration for the egame server."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, overridable through ``EGAME_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EGAME_", env_file=".env", env_file_encoding="utf-8"
    )

    data_dir: Path = Field(default=Path("data"), description="Where the world snapshot lives")
    storage_backend: Literal["json", "sql"] = Field(
        default="json", description="Persistence backend for the world document"
    )
    database_url: str = Field(
        default="sqlite:///egame.db", description="SQLAlchemy URL used by the sql backend"
    )
    database_echo: bool = Field(default=False, description="Echo SQL statements")
    block_seconds: int = Field(
        default=10,
        description="Wall-clock seconds per block",
        gt=0,
    )
    log_level: str = Field(default="INFO", description="Root logger level for the CLI")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    settings = Settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings
