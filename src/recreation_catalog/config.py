"""
Application settings.

Values come from environment variables (case-insensitive) or a ``.env`` file
in the working directory, e.g.::

    RIDB_API_KEY=...
    RIDB_BASE_URL=https://ridb.recreation.gov/api/v1
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "recreation-catalog"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # RIDB
    ridb_api_key: str = ""
    ridb_base_url: str = "https://ridb.recreation.gov/api/v1"
    recgov_base_url: str = "https://www.recreation.gov"

    # HTTP
    request_timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=0, ge=0)

    # Aggregation
    page_size: int = Field(default=50, gt=0)
    max_pages: int = Field(default=5, gt=0)

    # Static site output
    site_dir: Path = Path("site")


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
