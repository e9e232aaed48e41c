"""
Local snapshot source.

Reads catalogs from a directory tree laid out as
``<api_dir>/<locale>/<category>.json``.
"""

import json
from pathlib import Path
from typing import Any

from cs_item_catalog.catalog.categories import ItemCategory
from cs_item_catalog.config import get_settings
from cs_item_catalog.ingestion.sources.base import (
    CatalogFormatError,
    CatalogLoadError,
    CatalogSource,
    SnapshotNotFoundError,
)


class LocalSnapshotSource(CatalogSource):
    """
    Catalog source backed by local JSON snapshots.

    Example:
        >>> async with LocalSnapshotSource(api_dir=Path("public/api")) as source:
        ...     skins = await source.load(ItemCategory.SKINS, "en")
    """

    def __init__(self, *, api_dir: Path | None = None) -> None:
        """
        Initialize local source.

        Args:
            api_dir: Snapshot root (defaults to CATALOG_API_DIR)
        """
        self._api_dir = Path(api_dir or get_settings().source.api_dir)
        super().__init__()

    @property
    def source_name(self) -> str:
        """Return source identifier."""
        return "local_snapshot"

    def path_for(self, category: ItemCategory, locale: str) -> Path:
        """Snapshot file for a category and locale."""
        return self._api_dir / locale / f"{ItemCategory(category).value}.json"

    def location(self, category: ItemCategory, locale: str) -> str:
        return str(self.path_for(category, locale))

    async def _fetch(self, category: ItemCategory, locale: str) -> Any:
        path = self.path_for(category, locale)
        context = {"category": category.value, "locale": locale, "location": str(path)}

        if not path.is_file():
            raise SnapshotNotFoundError(f"Snapshot not found: {path}", **context)

        try:
            with path.open(encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogFormatError(
                f"Invalid JSON in {path}: {e.msg} (line {e.lineno})",
                original_error=e,
                **context,
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogLoadError(
                f"Could not read {path}: {e}",
                original_error=e,
                **context,
            ) from e
