"""
Contracts for normalized output records.

Field names are snake_case in Python and serialized by alias to
the camelCase names consumers expect.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OutputRecord(BaseModel):
    """Base for all normalized records."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the wire field names."""
        return self.model_dump(by_alias=True)


class ItemRecord(OutputRecord):
    """A normalized catalog item; every category has a display name."""

    name: str | None


class SkinRecord(ItemRecord):
    """
    Normalized skin.

    Carries every raw field that is not renamed or removed, so extras
    are allowed. Fields whose source is absent are never set and are
    dropped from the output.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str | None = None
    crate_ids: list[str | None] | None = Field(default=None, alias="_crates")
    weapon: str | None = None
    pattern: str | None = None
    rarity: str | None = None
    collection: str | None = None
    category: str | None = None
    max_float: float | None = Field(default=None, alias="maxFloat")
    min_float: float | None = Field(default=None, alias="minFloat")
    paint_index: str | int | None = Field(default=None, alias="paintIndex")
    wears: list[str | None] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the fields that were actually set."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class StickerRecord(ItemRecord):
    """Normalized sticker."""

    name: str | None
    description: str | None
    rarity: str | None
    image: str | None


class GraffitiRecord(StickerRecord):
    """Normalized graffiti; same shape as a sticker."""


class KeychainRecord(ItemRecord):
    """Normalized keychain."""

    name: str | None
    description: str | None
    rarity: str | None
    image: str | None


class CrateRecord(ItemRecord):
    """Normalized crate with flattened content ids."""

    name: str | None
    description: str | None
    type: str | None
    contains: list[str | None]
    contains_rare: list[str | None] = Field(..., alias="containsRare")
    image: str | None


class LocaleRecord(OutputRecord):
    """Localized display name joined to its canonical (primary-locale) name."""

    market_hash_name_localized: str | None = Field(..., alias="marketHashNameLocalized")
    market_hash_name_canonical: str | None = Field(..., alias="marketHashNameCanonical")
