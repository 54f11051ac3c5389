from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv(override=False)


def _optional_path(name: str) -> Path | None:
    value = os.getenv(name)
    return Path(value) if value else None


class Settings(BaseModel):
    """Runtime configuration for the build script and API."""

    sqlite_db_path: Path = Field(default_factory=lambda: Path(os.getenv("QUICKRULES_DB", "artifacts/quickrules.db")))
    source_path: Path = Field(default_factory=lambda: Path(os.getenv("QUICKRULES_SOURCE", "data/srd")))
    source_pattern: str = Field(default_factory=lambda: os.getenv("QUICKRULES_PATTERN", "**/*.html"))
    journal: str | None = Field(default_factory=lambda: os.getenv("QUICKRULES_JOURNAL") or None)
    config_path: Path | None = Field(default_factory=lambda: _optional_path("QUICKRULES_CONFIG"))

    model_config = {
        "frozen": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance for FastAPI dependency injection."""

    return Settings()


__all__ = ["Settings", "get_settings"]
