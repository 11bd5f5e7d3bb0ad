"""Configuration management using environment variables."""

import os
from functools import lru_cache
from pathlib import Path

from attrs import define

DEFAULT_API_URL = "https://www.themealdb.com/api/json/v1/1"


@define
class Settings:
    """Application settings."""

    api_base_url: str = DEFAULT_API_URL
    timeout: float = 30.0
    max_image_width: int = 128
    corpus_path: Path | None = None
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Load settings from environment."""
    corpus = os.environ.get("FOODFETCH_CORPUS")
    return Settings(
        api_base_url=os.environ.get("FOODFETCH_API_URL", DEFAULT_API_URL),
        timeout=float(os.environ.get("FOODFETCH_TIMEOUT", "30.0")),
        max_image_width=int(os.environ.get("FOODFETCH_MAX_IMAGE_WIDTH", "128")),
        corpus_path=Path(corpus) if corpus else None,
        log_level=os.environ.get("FOODFETCH_LOG_LEVEL", "WARNING"),
    )
