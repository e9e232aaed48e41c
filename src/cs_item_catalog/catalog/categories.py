"""
Category registry.

The five item categories form a closed set. Each one is described by
a `CategoryDescriptor` bundling everything the generic pipeline needs:
where its raw data lives, how it is parsed, its default selection
rule, how it is normalized and which artifacts it produces.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from cs_item_catalog.catalog.normalizers import (
    normalize_crate,
    normalize_graffiti,
    normalize_keychain,
    normalize_skin,
    normalize_sticker,
)
from cs_item_catalog.catalog.selection import (
    CollectionDefault,
    DefaultRule,
    MinIdDefault,
    SelectionCriteria,
    select,
)
from cs_item_catalog.config import SelectionDefaultsConfig, get_settings
from cs_item_catalog.ingestion.contracts import (
    ItemRecord,
    RawCrate,
    RawGraffiti,
    RawItem,
    RawKeychain,
    RawSkin,
    RawSticker,
)


class ItemCategory(str, Enum):
    """Item categories served by the catalog."""

    SKINS = "skins"
    STICKERS = "stickers"
    CRATES = "crates"
    GRAFFITI = "graffiti"
    KEYCHAINS = "keychains"


@dataclass(frozen=True)
class CategoryDescriptor:
    """Everything that differs between categories."""

    category: ItemCategory
    raw_model: type[RawItem]
    normalizer: Callable[[Any], ItemRecord]
    default_rule: DefaultRule
    records_artifact: str
    names_artifact: str
    match_own_crate_id: bool = False

    def select(
        self,
        records: Sequence[RawItem],
        criteria: SelectionCriteria | None = None,
    ) -> list[RawItem]:
        """Apply `criteria`, or this category's default rule."""
        return select(
            records,
            criteria,
            default_rule=self.default_rule,
            match_own_crate_id=self.match_own_crate_id,
        )

    def normalize(self, records: Sequence[RawItem]) -> list[ItemRecord]:
        """Normalize selected records in order."""
        return [self.normalizer(record) for record in records]


def build_registry(
    defaults: SelectionDefaultsConfig | None = None,
) -> dict[ItemCategory, CategoryDescriptor]:
    """
    Build descriptors for every category.

    Args:
        defaults: Default selection rules (read from settings if None)

    Returns:
        dict: Descriptor per category
    """
    defaults = defaults or get_settings().selection

    return {
        ItemCategory.SKINS: CategoryDescriptor(
            category=ItemCategory.SKINS,
            raw_model=RawSkin,
            normalizer=normalize_skin,
            default_rule=CollectionDefault(frozenset(defaults.skin_collection_ids)),
            records_artifact="items.json",
            names_artifact="item_names.json",
        ),
        ItemCategory.STICKERS: CategoryDescriptor(
            category=ItemCategory.STICKERS,
            raw_model=RawSticker,
            normalizer=normalize_sticker,
            default_rule=CollectionDefault(frozenset(defaults.sticker_collection_ids)),
            records_artifact="stickers.json",
            names_artifact="stickers_names.json",
        ),
        ItemCategory.CRATES: CategoryDescriptor(
            category=ItemCategory.CRATES,
            raw_model=RawCrate,
            normalizer=normalize_crate,
            default_rule=MinIdDefault(defaults.crate_min_id),
            records_artifact="crates.json",
            names_artifact="crates_names.json",
            match_own_crate_id=True,
        ),
        ItemCategory.GRAFFITI: CategoryDescriptor(
            category=ItemCategory.GRAFFITI,
            raw_model=RawGraffiti,
            normalizer=normalize_graffiti,
            default_rule=MinIdDefault(defaults.graffiti_min_id),
            records_artifact="graffiti.json",
            names_artifact="graffiti_names.json",
        ),
        ItemCategory.KEYCHAINS: CategoryDescriptor(
            category=ItemCategory.KEYCHAINS,
            raw_model=RawKeychain,
            normalizer=normalize_keychain,
            default_rule=MinIdDefault(defaults.keychain_min_id),
            records_artifact="keychains.json",
            names_artifact="keychains_names.json",
        ),
    }


def get_descriptor(
    category: ItemCategory | str,
    defaults: SelectionDefaultsConfig | None = None,
) -> CategoryDescriptor:
    """Descriptor for a single category (accepts the enum or its value)."""
    return build_registry(defaults)[ItemCategory(category)]
