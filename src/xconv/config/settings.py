"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and an optional .env file, with validation.
There is no module-level instance: the caller builds Settings() once and
passes the values into constructors.

Files that USE this module:
- xconv.app (loads settings and wires services)
- tests.test_settings (unit tests)

Files that this module USES:
- xconv.adapters.providers.freecurrencyapi (DEFAULT_API_URL)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from xconv.adapters.providers.freecurrencyapi import DEFAULT_API_URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Provider ---
    api_key: str = Field(default="", alias="CURRENCY_API_KEY")
    api_url: str = Field(default=DEFAULT_API_URL, alias="API_URL")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Cache ---
    redis_url: Optional[str] = Field(default=None, alias="REDIS_URL")
    cache_file: Optional[Path] = Field(default=None, alias="XCONV_CACHE_FILE")

    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="XCONV_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace (empty means "not configured")."""
        # Format is checked in xconv.app once the key source (flag or env) is known
        return v.strip()

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("API_URL must be an http(s) URL")
        return v

    @field_validator("redis_url")
    @classmethod
    def empty_redis_url_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level name."""
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v
