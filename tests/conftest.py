"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any, cast

import pytest

from cs_item_catalog.config import (
    CatalogSourceConfig,
    OutputConfig,
    RetryConfig,
    Settings,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"
API_DIR = FIXTURES_DIR / "api"


def load_fixture(locale: str, name: str) -> list[dict[str, Any]]:
    """Load a catalog fixture file."""
    with (API_DIR / locale / name).open(encoding="utf-8") as f:
        return cast(list[dict[str, Any]], json.load(f))


@pytest.fixture
def api_dir() -> Path:
    """Root of the fixture snapshot tree."""
    return API_DIR


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings reading fixture snapshots and writing into a temp dir."""
    return Settings(
        source=CatalogSourceConfig(api_dir=API_DIR, use_local_file=True),
        output=OutputConfig(output_dir=tmp_path / "out"),
        retry=RetryConfig(max_attempts=2, base_delay_seconds=0.1, max_delay_seconds=1.0),
    )


@pytest.fixture
def load_catalog() -> Any:
    """Loader for catalog fixture files: load_catalog(locale, name)."""
    return load_fixture
