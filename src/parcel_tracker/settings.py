"""
parcel_tracker.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the store and its helpers.
- Offer a cached settings instance for callers that do not build their own.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PARCEL_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "parcel-tracker"
    log_level: str = "INFO"

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./tracker.db"
    database_echo: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
