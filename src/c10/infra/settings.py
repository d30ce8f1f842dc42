"""
Application settings for the C10 clock.

This module defines the runtime configuration using Pydantic BaseSettings.
Command-line options override whatever is loaded here.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings using Pydantic BaseSettings."""

    # Render cadence
    update_rate_hz: float = Field(default=60.0, gt=0.0, le=1000.0, alias="C10_UPDATE_RATE_HZ")
    drift_window: int = Field(default=4, ge=1, le=1024, alias="C10_DRIFT_WINDOW")
    clamp_negative_sleep: bool = Field(default=False, alias="C10_CLAMP_NEGATIVE_SLEEP")

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    env: str = Field(default="dev", alias="ENV")  # dev|prod|test

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


def _resolve_env_file() -> str | None:
    # 1) Explicit override
    explicit = os.getenv("C10_ENV_FILE")
    if explicit and Path(explicit).is_file():
        return explicit

    # 2) CWD .env
    cwd_env = Path.cwd() / ".env"
    if cwd_env.is_file():
        return str(cwd_env)

    # 3) Walk up from this file to find nearest .env
    here = Path(__file__).resolve()
    for parent in here.parents:
        candidate = parent / ".env"
        if candidate.is_file():
            return str(candidate)
    return None


def load_settings() -> Settings:
    """Build settings from the environment and the nearest ``.env`` file."""
    env_file = _resolve_env_file()
    return Settings(_env_file=env_file) if env_file else Settings()  # type: ignore[call-arg]


# Global settings instance (load from best-effort .env discovery)
settings = load_settings()
