"""Application settings parsed from environment variables and defaults."""

import json
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]
DEFAULT_CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
DEFAULT_CORS_HEADERS = ["Authorization", "Content-Type"]


def _split_list(value: str | list[str] | None) -> list[str] | None:
    """Parse a JSON array, a CSV string, or a list into stripped entries."""
    if isinstance(value, list):
        return [item.strip() for item in value if isinstance(item, str) and item.strip()]
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return []
        try:
            parsed = json.loads(stripped)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, list):
            return [str(item).strip() for item in parsed if str(item).strip()]
        return [item.strip() for item in stripped.split(",") if item.strip()]
    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = "Playlist Curation API"
    environment: str = "development"
    api_prefix: str = "/api/v1"

    database_url: str
    test_database_url: Optional[str] = None

    access_token_expires_minutes: int = 30
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"

    log_level: str = "INFO"
    cors_origins: list[str] | str = Field(default_factory=lambda: DEFAULT_CORS_ORIGINS.copy())
    cors_allow_methods: list[str] | str = Field(default_factory=lambda: DEFAULT_CORS_METHODS.copy())
    cors_allow_headers: list[str] | str = Field(default_factory=lambda: DEFAULT_CORS_HEADERS.copy())
    cors_allow_credentials: bool = True

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_origins(cls, value: str | list[str] | None) -> list[str]:
        """Normalize CORS origins from JSON, CSV, or list inputs."""
        return _split_list(value) or DEFAULT_CORS_ORIGINS.copy()

    @field_validator("cors_allow_methods", mode="before")
    @classmethod
    def _split_cors_methods(cls, value: str | list[str] | None) -> list[str]:
        """Normalize allowed CORS methods, upper-casing each verb."""
        methods = _split_list(value) or DEFAULT_CORS_METHODS.copy()
        return [method.upper() for method in methods]

    @field_validator("cors_allow_headers", mode="before")
    @classmethod
    def _split_cors_headers(cls, value: str | list[str] | None) -> list[str]:
        """Normalize allowed CORS request headers."""
        return _split_list(value) or DEFAULT_CORS_HEADERS.copy()

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings to avoid re-parsing environment variables."""
    return Settings()


settings = get_settings()
