"""
Catalog selection and normalization.

Numeric id parsing, selection policies, per-category normalizers,
locale cross-referencing and the category registry tying them together.
"""

from cs_item_catalog.catalog.categories import (
    CategoryDescriptor,
    ItemCategory,
    build_registry,
    get_descriptor,
)
from cs_item_catalog.catalog.ids import numeric_id, parse_numeric_id
from cs_item_catalog.catalog.localization import cross_reference
from cs_item_catalog.catalog.normalizers import strip_star
from cs_item_catalog.catalog.selection import (
    CollectionDefault,
    MinIdDefault,
    SelectionCriteria,
    SelectionPolicy,
    select,
)

__all__ = [
    "CategoryDescriptor",
    "CollectionDefault",
    "ItemCategory",
    "MinIdDefault",
    "SelectionCriteria",
    "SelectionPolicy",
    "build_registry",
    "cross_reference",
    "get_descriptor",
    "numeric_id",
    "parse_numeric_id",
    "select",
    "strip_star",
]
