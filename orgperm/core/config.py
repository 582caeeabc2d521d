"""Settings for the orgperm service.

Read from the environment (and an optional .env file) by pydantic-settings.
The role and permission tables are code, not configuration; only the HTTP
surface and logging are tunable here.
"""

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings. Every field has a working default."""

    app_name: str = "orgperm"
    app_version: str = "1.0.0"
    debug: bool = False
    # Explicit level name (e.g. "WARNING"); when unset, debug picks DEBUG or INFO.
    log_level: str | None = None

    # Comma-separated browser origins allowed by CORS.
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"
    request_id_header: str = "X-Request-ID"

    # Reject custom-role permission names that are not in the catalog.
    enforce_permission_catalog: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}.")
        return name

    @model_validator(mode="after")
    def validate_request_id_header(self) -> "Settings":
        if not self.request_id_header.strip():
            raise ValueError("REQUEST_ID_HEADER must not be empty.")
        return self

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def effective_log_level(self) -> int:
        """Numeric level: log_level when set, else DEBUG in debug mode, else INFO."""
        if self.log_level:
            return logging.getLevelName(self.log_level)
        return logging.DEBUG if self.debug else logging.INFO


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings, loaded on first call.

    Tests that change environment variables call get_settings.cache_clear()
    before and after so the next call reloads.
    """
    return Settings()
