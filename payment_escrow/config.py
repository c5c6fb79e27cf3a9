"""Application configuration settings."""
from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Runtime toggles -----------------------------------------------------
# Execution environment: "dev" | "staging" | "prod"
ENV = os.getenv("ESCROW_ENV", "dev").lower()

# Header carrying the pre-authenticated caller identity.
CALLER_HEADER = "X-Caller-Id"


class Settings(BaseSettings):
    """Environment configuration for the payment escrow service."""

    app_env: str = ENV
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:4943",
    ]
    SENTRY_DSN: str | None = None
    PROMETHEUS_ENABLED: bool = True

    # --- Value transfer ---------------------------------------------------
    TRANSFER_HOOK_ENABLED: bool = True

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        """Upper-case the level name and reject anything logging does not know."""

        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


class AppInfo(BaseModel):
    name: str = "payment-escrow"
    version: str = "0.1.0"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


__all__ = [
    "ENV",
    "CALLER_HEADER",
    "Settings",
    "AppInfo",
    "get_settings",
]
