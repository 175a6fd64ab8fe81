from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PROVIDER_BASE_URL = "https://api.darksky.net"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHERAPP_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Weather provider
    provider_api_key: SecretStr
    provider_base_url: str = Field(default=DEFAULT_PROVIDER_BASE_URL)
    provider_units: str | None = Field(default=None, min_length=1, max_length=8)

    http_timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)

    log_level: str = Field(default="INFO")

    @field_validator("provider_api_key")
    @classmethod
    def _require_api_key(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("provider_api_key must not be blank")
        return value

    @field_validator("provider_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
