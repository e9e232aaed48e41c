"""Tests for configuration module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from cs_item_catalog.config import (
    CatalogSourceConfig,
    LoggingConfig,
    OutputConfig,
    RetryConfig,
    SelectionDefaultsConfig,
)


class TestCatalogSourceConfig:
    """Tests for catalog source configuration."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = CatalogSourceConfig()

        assert config.use_local_file is True
        assert config.api_dir == Path("public/api")
        assert config.remote_base_url == (
            "https://raw.githubusercontent.com/ByMykel/CSGO-API/main/public/api"
        )
        assert config.primary_locale == "en"
        assert config.secondary_locale == "pt-BR"

    def test_env_overrides(self) -> None:
        """Test that environment variables override defaults."""
        with patch.dict(
            os.environ,
            {
                "CATALOG_USE_LOCAL_FILE": "false",
                "CATALOG_SECONDARY_LOCALE": "zh-CN",
                "CATALOG_REMOTE_BASE_URL": "https://mirror.example.invalid/api/",
            },
        ):
            config = CatalogSourceConfig()

        assert config.use_local_file is False
        assert config.secondary_locale == "zh-CN"
        assert config.remote_base_url == "https://mirror.example.invalid/api"

    def test_locales_must_differ(self) -> None:
        """Test that identical locales are rejected."""
        with pytest.raises(ValueError, match="must differ"):
            CatalogSourceConfig(primary_locale="en", secondary_locale="en")


class TestSelectionDefaultsConfig:
    """Tests for default selection rules."""

    def test_default_values(self) -> None:
        """Test the snapshot cutoffs shipped as defaults."""
        with patch.dict(os.environ, {}, clear=True):
            config = SelectionDefaultsConfig()

        assert config.skin_collection_ids == [
            "collection-set-realism-camo",
            "collection-set-graphic-design",
            "collection-set-community-34",
            "collection-set-overpass-2024",
        ]
        assert config.sticker_collection_ids == ["collection-set-sugarface2"]
        assert config.graffiti_min_id == 7354
        assert config.crate_min_id == 4964
        assert config.keychain_min_id == 34

    def test_env_overrides(self) -> None:
        """Test that cutoffs can be moved without code changes."""
        with patch.dict(
            os.environ,
            {
                "SELECTION_CRATE_MIN_ID": "5000",
                "SELECTION_STICKER_COLLECTION_IDS": '["collection-set-a", "collection-set-b"]',
            },
        ):
            config = SelectionDefaultsConfig()

        assert config.crate_min_id == 5000
        assert config.sticker_collection_ids == ["collection-set-a", "collection-set-b"]


class TestOutputConfig:
    """Tests for output configuration."""

    def test_indent_bounds(self) -> None:
        """Test indent validation bounds."""
        with patch.dict(os.environ, {"OUTPUT_INDENT": "9"}), pytest.raises(ValueError):
            OutputConfig()


class TestRetryConfig:
    """Tests for retry configuration."""

    def test_default_values(self) -> None:
        """Test default retry values."""
        with patch.dict(os.environ, {}, clear=True):
            config = RetryConfig()

        assert config.max_attempts == 3
        assert config.base_delay_seconds == 1.0
        assert config.max_delay_seconds == 60.0
        assert config.exponential_base == 2.0

    def test_max_attempts_bounds(self) -> None:
        """Test max_attempts validation bounds."""
        with patch.dict(os.environ, {"RETRY_MAX_ATTEMPTS": "0"}), pytest.raises(ValueError):
            RetryConfig()

        with patch.dict(os.environ, {"RETRY_MAX_ATTEMPTS": "11"}), pytest.raises(ValueError):
            RetryConfig()


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_valid_levels(self) -> None:
        """Test valid log levels."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            with patch.dict(os.environ, {"LOG_LEVEL": level}):
                config = LoggingConfig()
                assert config.level == level

    def test_valid_formats(self) -> None:
        """Test valid log formats."""
        for fmt in ["json", "console"]:
            with patch.dict(os.environ, {"LOG_FORMAT": fmt}):
                config = LoggingConfig()
                assert config.format == fmt
