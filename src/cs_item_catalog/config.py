"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables with validation,
type coercion, and sensible defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSourceConfig(BaseSettings):
    """Where raw catalogs are read from."""

    model_config = SettingsConfigDict(env_prefix="CATALOG_")

    use_local_file: bool = Field(
        default=True,
        description="Read local snapshots instead of fetching the remote catalog",
    )
    api_dir: Path = Field(
        default=Path("public/api"),
        description="Root of the local snapshot tree (<api_dir>/<locale>/<category>.json)",
    )
    remote_base_url: str = Field(
        default="https://raw.githubusercontent.com/ByMykel/CSGO-API/main/public/api",
        description="Base URL of the remote catalog",
    )
    primary_locale: str = Field(
        default="en",
        description="Locale used for selection and canonical names",
    )
    secondary_locale: str = Field(
        default="pt-BR",
        description="Locale consulted only for localized names",
    )
    timeout_seconds: int = Field(
        default=30,
        ge=5,
        le=120,
        description="HTTP request timeout in seconds",
    )

    @field_validator("remote_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so paths can be joined with '/'."""
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_locales_differ(self) -> "CatalogSourceConfig":
        """The secondary locale must not be the primary one."""
        if self.primary_locale == self.secondary_locale:
            raise ValueError(
                f"Primary and secondary locale must differ: {self.primary_locale}"
            )
        return self


class SelectionDefaultsConfig(BaseSettings):
    """
    Default selection rules applied when no criteria are given.

    These are cutoffs for a particular catalog snapshot, so they are
    kept as configuration rather than code.
    """

    model_config = SettingsConfigDict(env_prefix="SELECTION_")

    skin_collection_ids: list[str] = Field(
        default=[
            "collection-set-realism-camo",
            "collection-set-graphic-design",
            "collection-set-community-34",
            "collection-set-overpass-2024",
        ],
        description="Skins whose first collection is one of these are selected",
    )
    sticker_collection_ids: list[str] = Field(
        default=["collection-set-sugarface2"],
        description="Stickers whose first collection is one of these are selected",
    )
    graffiti_min_id: int = Field(default=7354, ge=0)
    crate_min_id: int = Field(default=4964, ge=0)
    keychain_min_id: int = Field(default=34, ge=0)


class OutputConfig(BaseSettings):
    """Output artifact configuration."""

    model_config = SettingsConfigDict(env_prefix="OUTPUT_")

    output_dir: Path = Field(
        default=Path("."),
        description="Directory artifacts are written to",
    )
    indent: int = Field(default=2, ge=0, le=8, description="JSON indentation")


class RetryConfig(BaseSettings):
    """Retry behavior configuration."""

    model_config = SettingsConfigDict(env_prefix="RETRY_")

    max_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Maximum number of retry attempts",
    )
    base_delay_seconds: float = Field(
        default=1.0,
        ge=0.1,
        le=30.0,
        description="Base delay between retries (exponential backoff)",
    )
    max_delay_seconds: float = Field(
        default=60.0,
        ge=1.0,
        le=300.0,
        description="Maximum delay between retries",
    )
    exponential_base: float = Field(
        default=2.0,
        ge=1.5,
        le=4.0,
        description="Base for exponential backoff calculation",
    )


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    include_timestamp: bool = Field(
        default=True,
        description="Include timestamp in log entries",
    )


class Settings(BaseSettings):
    """
    Main application settings.

    Aggregates all configuration sections and provides
    a single entry point for configuration access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sub-configurations
    source: CatalogSourceConfig = Field(default_factory=CatalogSourceConfig)
    selection: SelectionDefaultsConfig = Field(default_factory=SelectionDefaultsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once
    and reused across the application.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
