"""
CS Item Catalog.

Selection and normalization pipeline for game-item catalogs
(skins, stickers, crates, graffiti, keychains) with locale
cross-referencing of display names.
"""

from cs_item_catalog.config import Settings, get_settings
from cs_item_catalog.logger import get_logger, setup_logging

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "get_logger",
    "setup_logging",
    "__version__",
]
