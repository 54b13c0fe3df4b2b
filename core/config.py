# core/config.py
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

DEFAULT_DATABASE_URL = "sqlite:///library.db"


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "http://localhost:5173"))
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment"""
    return Settings()
