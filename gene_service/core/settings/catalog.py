"""Catalogue API client settings.

Environment variables use CATALOG_ prefix.
Example: CATALOG_BASE_URL=https://api.example.com/api/v1, CATALOG_TIMEOUT=5
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Settings for the offset-based catalogue backend."""

    base_url: str = Field(
        default="http://localhost:8080/api/v1",
        min_length=1,
        description="Base URL of the catalogue API",
    )
    timeout: float = Field(
        default=10.0,
        gt=0,
        le=120.0,
        description="Request timeout in seconds",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts per request for transport errors",
    )
    app_token: SecretStr | None = Field(
        default=None,
        description="Application token sent as X-XAPP-TOKEN",
    )
    total_count_header: str = Field(
        default="X-Total-Count",
        min_length=1,
        description="Response header carrying the total count of a listing",
    )

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
