"""Settings for the quotify API, read from QUOTIFY_* environment variables or .env."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

REPO_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CACHE_PATH = REPO_ROOT / "quotify" / "data" / "quote_cache.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="QUOTIFY_", env_file=".env", extra="ignore")

    api_url: str = Field(default="https://api.quotable.io", description="Base URL of the quote API")
    request_timeout: float = Field(default=10.0, description="Per-request timeout in seconds")
    verify_tls: bool = Field(default=True, description="Verify the API's TLS certificate")
    batch_size: int = Field(default=60, ge=1)
    page_size: int = Field(default=20, ge=1)
    ttl_hours: float = Field(default=24.0, gt=0, description="Age after which the cached batch is refetched")
    cache_path: Path = Field(default=DEFAULT_CACHE_PATH)

    @property
    def ttl_ms(self) -> int:
        return int(self.ttl_hours * 60 * 60 * 1000)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    return Settings()
