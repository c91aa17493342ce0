"""
Configuration settings for the Student Directory client.

Uses Pydantic Settings to load environment variables for the remote API
location, transport behaviour and logging. Settings are read once per process
through `get_settings()` and treated as read-only afterwards.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Remote API
    api_base_url: str = Field("http://localhost:8080/api/students", alias="STUDENTS_API_URL")
    # None leaves request duration to the transport (no explicit timeout)
    api_timeout_seconds: Optional[float] = Field(None, alias="STUDENTS_API_TIMEOUT")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
