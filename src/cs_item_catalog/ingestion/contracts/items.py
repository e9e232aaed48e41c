"""
Data contracts for raw catalog records.

These Pydantic models describe the category-shaped records served by
the catalog. Only fields the pipeline reads are declared; everything
else is kept as extra data so that skins can carry it through.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NamedRef(BaseModel):
    """A nested `{id, name}` reference (rarity, weapon, collection, crate...)."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Some nested ids are served as numbers."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class RawItem(BaseModel):
    """
    Fields shared by every category.

    Nested references are optional: an absent `rarity` or an absent
    `collections` list is valid input, never an error.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str | None = None
    description: str | None = None
    image: str | None = None
    rarity: NamedRef | None = None
    collections: list[NamedRef] | None = None
    crates: list[NamedRef] | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Accept numeric ids by converting them to strings."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def first_collection(self) -> NamedRef | None:
        """First listed collection, if any."""
        return self.collections[0] if self.collections else None

    @property
    def first_crate(self) -> NamedRef | None:
        """First listed crate, if any."""
        return self.crates[0] if self.crates else None


class RawSkin(RawItem):
    """Skin record from `skins.json`."""

    weapon: NamedRef | None = None
    pattern: NamedRef | None = None
    category: NamedRef | None = None
    wears: list[NamedRef] | None = None
    min_float: float | None = None
    max_float: float | None = None
    paint_index: str | int | None = None
    team: Any = None


class RawSticker(RawItem):
    """Sticker record from `stickers.json`."""


class RawGraffiti(RawItem):
    """Graffiti record from `graffiti.json`."""


class RawKeychain(RawItem):
    """Keychain record from `keychains.json`."""


class RawCrate(RawItem):
    """
    Crate record from `crates.json`.

    `contains` and `contains_rare` are structurally required: a crate
    without them cannot be normalized.
    """

    type: str | None = None
    contains: list[NamedRef] = Field(..., description="Items dropped by the crate")
    contains_rare: list[NamedRef] = Field(..., description="Rare special items")
