"""
Locale cross-referencing.

The primary-locale selection is the source of truth: the secondary
catalog is filtered down to the ids already selected, never the
reverse, and each surviving record is paired with its canonical name.
"""

from collections.abc import Iterable, Sequence

from cs_item_catalog.catalog.normalizers import strip_star
from cs_item_catalog.ingestion.contracts import ItemRecord, LocaleRecord, RawItem


def cross_reference(
    secondary: Iterable[RawItem],
    primary: Sequence[ItemRecord],
) -> list[LocaleRecord]:
    """
    Join secondary-locale records onto the primary selection by id.

    Args:
        secondary: Raw records from the secondary-locale catalog
        primary: Normalized primary-locale records for the same category

    Returns:
        list[LocaleRecord]: One record per secondary record whose id was
        selected, in secondary-catalog order
    """
    # First occurrence wins when the primary set repeats an id.
    canonical_names: dict[str | None, str | None] = {}
    for record in primary:
        canonical_names.setdefault(record.id, record.name)

    return [
        LocaleRecord(
            id=item.id,
            marketHashNameLocalized=strip_star(item.name),
            marketHashNameCanonical=canonical_names[item.id] or None,
        )
        for item in secondary
        if item.id in canonical_names
    ]
