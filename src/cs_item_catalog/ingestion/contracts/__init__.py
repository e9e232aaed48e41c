"""
Data contracts for catalog records.

Raw models describe what the catalog serves; record models
describe what the pipeline writes.
"""

from cs_item_catalog.ingestion.contracts.items import (
    NamedRef,
    RawCrate,
    RawGraffiti,
    RawItem,
    RawKeychain,
    RawSkin,
    RawSticker,
)
from cs_item_catalog.ingestion.contracts.records import (
    CrateRecord,
    GraffitiRecord,
    ItemRecord,
    KeychainRecord,
    LocaleRecord,
    OutputRecord,
    SkinRecord,
    StickerRecord,
)

__all__ = [
    "CrateRecord",
    "GraffitiRecord",
    "ItemRecord",
    "KeychainRecord",
    "LocaleRecord",
    "NamedRef",
    "OutputRecord",
    "RawCrate",
    "RawGraffiti",
    "RawItem",
    "RawKeychain",
    "RawSkin",
    "RawSticker",
    "SkinRecord",
    "StickerRecord",
]
