"""Pagination settings for connection fields.

Having centralized pagination settings keeps every paginated relationship
consistent and allows tuning page sizes without code changes.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_DEFAULT_LIMIT=10, PAGINATION_MAX_LIMIT=100
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        default_limit: Page size when neither ``first`` nor ``last`` is given.
        max_limit: Largest ``first``/``last`` a caller may request.
        trending_sample_max: Largest ``sample`` accepted by list fields.

    Example:
        settings = PaginationSettings()
        params = resolve_page_params(args, default_limit=settings.default_limit)
    """

    default_limit: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Default page size when limit not specified",
    )
    max_limit: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Maximum allowed page size (hard limit)",
    )
    trending_sample_max: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Maximum sample size for randomly sampled lists",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _default_within_max(self) -> PaginationSettings:
        if self.default_limit > self.max_limit:
            msg = "default_limit must not exceed max_limit"
            raise ValueError(msg)
        return self
