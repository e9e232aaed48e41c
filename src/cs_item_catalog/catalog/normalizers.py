"""
Per-category record normalization.

Each normalizer maps one selected raw record onto its category's fixed
output shape. Absent nested fields become absent (skins) or null
(other categories); they never raise.
"""

from typing import Any

from cs_item_catalog.ingestion.contracts import (
    CrateRecord,
    GraffitiRecord,
    KeychainRecord,
    NamedRef,
    RawCrate,
    RawGraffiti,
    RawKeychain,
    RawSkin,
    RawSticker,
    SkinRecord,
    StickerRecord,
)

STAR = "★"

# Raw skin fields that never reach the output.
SKIN_DROPPED_FIELDS = ("crates", "paint_index", "max_float", "min_float", "team", "collections")

# Knives that the catalog ships without a category.
KUKRI_MARKER = "Kukri"
KNIVES_CATEGORY = "Knives"


def strip_star(name: str | None) -> str | None:
    """Remove the star glyph prefixed to knife and glove names."""
    if name is None:
        return None
    return name.replace(f"{STAR} ", "").replace(STAR, "").strip()


def _ref_name(ref: NamedRef | None) -> str | None:
    return ref.name if ref is not None else None


def _ref_ids(refs: list[NamedRef] | None) -> list[str | None] | None:
    if refs is None:
        return None
    return [ref.id for ref in refs]


def _skin_category(raw: RawSkin) -> str | None:
    if raw.category is not None and raw.category.name:
        return raw.category.name
    if raw.name and KUKRI_MARKER in raw.name:
        return KNIVES_CATEGORY
    return None


def normalize_skin(raw: RawSkin) -> SkinRecord:
    """
    Flatten a raw skin.

    All raw fields are carried over, then nested references are
    flattened to their names and snake_case numeric fields are renamed.
    Fields whose source value is absent are left out entirely.
    """
    data: dict[str, Any] = raw.model_dump(exclude_unset=True)
    for field_name in SKIN_DROPPED_FIELDS:
        data.pop(field_name, None)

    first_collection = raw.first_collection
    flattened: dict[str, Any] = {
        "_crates": _ref_ids(raw.crates),
        "weapon": _ref_name(raw.weapon),
        "pattern": _ref_name(raw.pattern),
        "rarity": _ref_name(raw.rarity),
        "collection": first_collection.name if first_collection else None,
        "category": _skin_category(raw),
        "maxFloat": raw.max_float,
        "minFloat": raw.min_float,
        "paintIndex": raw.paint_index,
        "wears": [w.name for w in raw.wears] if raw.wears is not None else None,
        "name": strip_star(raw.name),
    }

    for key, value in flattened.items():
        data.pop(key, None)
        # An empty collection name is treated as no collection.
        if value is None or (key == "collection" and not value):
            continue
        data[key] = value

    data["id"] = raw.id
    return SkinRecord.model_validate(data)


def normalize_sticker(raw: RawSticker) -> StickerRecord:
    """Sticker: id, name, description, rarity name, image."""
    return StickerRecord(
        id=raw.id,
        name=raw.name,
        description=raw.description,
        rarity=_ref_name(raw.rarity),
        image=raw.image,
    )


def normalize_graffiti(raw: RawGraffiti) -> GraffitiRecord:
    """Graffiti: same shape as a sticker."""
    return GraffitiRecord(
        id=raw.id,
        name=raw.name,
        description=raw.description,
        rarity=_ref_name(raw.rarity),
        image=raw.image,
    )


def normalize_keychain(raw: RawKeychain) -> KeychainRecord:
    """Keychain: id, name, description, rarity name, image."""
    return KeychainRecord(
        id=raw.id,
        name=raw.name,
        description=raw.description,
        rarity=_ref_name(raw.rarity),
        image=raw.image,
    )


def normalize_crate(raw: RawCrate) -> CrateRecord:
    """Crate with its contents flattened to item ids."""
    return CrateRecord(
        id=raw.id,
        name=raw.name,
        description=raw.description,
        type=raw.type,
        contains=[ref.id for ref in raw.contains],
        containsRare=[ref.id for ref in raw.contains_rare],
        image=raw.image,
    )
