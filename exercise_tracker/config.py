# exercise_tracker/config.py
"""
Environment-driven settings (pydantic-settings).

get_settings() is cached, so the process reads the environment and the
optional .env file once; tests clear the cache to swap the database URL.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Store
    database_url: str = "sqlite:///db.sqlite"  # file in project root

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # "Today" for entries posted without a date
    timezone: str = "UTC"

    cors_origins: List[str] = ["*"]

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
