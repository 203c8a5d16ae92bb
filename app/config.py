"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DNS_LABEL_MAX_LENGTH = 63


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./websites.db",
        description="Database connection URL used by SQLAlchemy when the database backend is selected",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name or UTC offset used for website timestamps",
    )
    platform_domain: str = Field(
        default="cms.com",
        description="Hosting platform domain that website subdomains are composed under",
        min_length=1,
    )
    website_backend: Literal["memory", "database"] = Field(
        default="memory",
        description="Persistence backend used by the website store",
    )
    subdomain_max_length: int = Field(
        default=DNS_LABEL_MAX_LENGTH,
        description="Maximum number of characters accepted in a subdomain label",
        gt=0,
        le=DNS_LABEL_MAX_LENGTH,
    )

    @field_validator("platform_domain")
    @classmethod
    def _normalize_platform_domain(cls, value: str) -> str:
        normalized = value.strip().strip(".").lower()
        if not normalized:
            raise ValueError("PLATFORM_DOMAIN must not be blank")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment.

    The app timezone is read through ``get_settings`` on every call, so it
    follows the reload too.
    """

    get_settings.cache_clear()


__all__ = ["DNS_LABEL_MAX_LENGTH", "Settings", "get_settings", "reset_settings_cache"]
