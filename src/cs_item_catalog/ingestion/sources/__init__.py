"""
Catalog sources.

Raw catalogs come either from local snapshots or from the remote
API; both share one interface and one set of load errors.
"""

from cs_item_catalog.config import Settings, get_settings
from cs_item_catalog.ingestion.sources.base import (
    CatalogFormatError,
    CatalogLoadError,
    CatalogSource,
    CatalogValidationError,
    RemoteFetchError,
    SnapshotNotFoundError,
    parse_records,
)
from cs_item_catalog.ingestion.sources.local import LocalSnapshotSource
from cs_item_catalog.ingestion.sources.remote import RemoteCatalogSource


def create_source(
    settings: Settings | None = None,
    *,
    use_local_file: bool | None = None,
) -> CatalogSource:
    """
    Build the configured catalog source.

    Args:
        settings: Settings to read from (cached settings if None)
        use_local_file: Override CATALOG_USE_LOCAL_FILE

    Returns:
        CatalogSource: Local or remote source
    """
    settings = settings or get_settings()
    local = settings.source.use_local_file if use_local_file is None else use_local_file

    if local:
        return LocalSnapshotSource(api_dir=settings.source.api_dir)
    return RemoteCatalogSource(
        base_url=settings.source.remote_base_url,
        retry_config=settings.retry,
        timeout=settings.source.timeout_seconds,
    )


__all__ = [
    "CatalogFormatError",
    "CatalogLoadError",
    "CatalogSource",
    "CatalogValidationError",
    "LocalSnapshotSource",
    "RemoteCatalogSource",
    "RemoteFetchError",
    "SnapshotNotFoundError",
    "create_source",
    "parse_records",
]
