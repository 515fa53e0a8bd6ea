"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, HttpUrl, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    base_url: HttpUrl = Field(
        default="http://localhost:4100",
        description="Storefront API origin; endpoints are appended as /api/...",
    )
    token: SecretStr | None = None
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)

    @field_validator("token", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SearchWidgetSettings(BaseModel):
    debounce_ms: int = Field(default=350, ge=0)
    blur_grace_ms: int = Field(default=200, ge=0)
    page_size: int = Field(default=8, ge=1, le=100)


class RemoteImagePattern(BaseModel):
    protocol: Literal["http", "https"] = "https"
    hostname: str
    port: str = ""
    pathname: str = "/**"


def _default_remote_patterns() -> list[RemoteImagePattern]:
    return [
        RemoteImagePattern(protocol="http", hostname="localhost", port="4100", pathname="/uploads/**"),
        RemoteImagePattern(protocol="http", hostname="192.168.56.1", port="4100", pathname="/uploads/**"),
        RemoteImagePattern(protocol="http", hostname="link.com", pathname="/**"),
        RemoteImagePattern(protocol="https", hostname="res.cloudinary.com", pathname="/**"),
        RemoteImagePattern(protocol="https", hostname="www.w3.org", pathname="/TR/pdf/**"),
    ]


class MediaSettings(BaseModel):
    upload_origin: AnyHttpUrl = Field(
        default="http://192.168.56.1:4100",
        description="Server that actually hosts /uploads; /api/uploads/* is rewritten to it.",
    )
    remote_patterns: list[RemoteImagePattern] = Field(default_factory=_default_remote_patterns)


class StorefrontSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__"
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "info"

    api: ApiSettings = Field(default_factory=ApiSettings)
    search: SearchWidgetSettings = Field(default_factory=SearchWidgetSettings)
    media: MediaSettings = Field(default_factory=MediaSettings)


@lru_cache
def get_settings() -> StorefrontSettings:
    """Return cached settings instance."""

    return StorefrontSettings()


__all__ = [
    "ApiSettings",
    "MediaSettings",
    "RemoteImagePattern",
    "SearchWidgetSettings",
    "StorefrontSettings",
    "get_settings",
]
