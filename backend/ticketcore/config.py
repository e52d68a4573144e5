"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), single instance per process
    - log_level is always an upper-cased stdlib level name

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults keep Ticket construction total; strictness is opt-in
"""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Ticket construction
    ticket_strict_status: bool = False
    ticket_allow_empty_fields: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            v = v.strip().upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
