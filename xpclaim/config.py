"""
Configuration for the xpclaim claim service.

- Reads environment variables (optionally from `.env`) via pydantic-settings.
- Exposes a cached `get_settings()` accessor.

Environment variables:
    XPCLAIM_MASTER_SECRET   (str, optional)       : operator key for player secrets
    XPCLAIM_LOG_LEVEL       (str, default "INFO")
    XPCLAIM_LOG_FORMAT      (json|text|auto, default "auto")

The master secret is held as a SecretStr so it never shows up in repr() or
in a dumped settings object.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError
from .nullifiers import MIN_SECRET_LENGTH


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="XPCLAIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    master_secret: Optional[SecretStr] = Field(
        default=None, description="HMAC key used to derive per-player secrets."
    )
    log_level: str = Field(default="INFO")
    log_format: Literal["json", "text", "auto"] = Field(default="auto")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    @field_validator("log_format", mode="before")
    @classmethod
    def _lower_format(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v

    def log_json(self) -> Optional[bool]:
        """configure(json=...) argument: None lets logging auto-detect."""
        if self.log_format == "auto":
            return None
        return self.log_format == "json"

    def require_master_secret(self) -> str:
        if self.master_secret is None:
            raise ConfigError("XPCLAIM_MASTER_SECRET is not set")
        value = self.master_secret.get_secret_value()
        if len(value) < MIN_SECRET_LENGTH:
            raise ConfigError(
                "master secret is too short", min_length=MIN_SECRET_LENGTH, length=len(value)
            )
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
