"""
Numeric id extraction.

Catalog ids are dash-separated strings such as ``crate-4964`` or
``sticker-1-37``; the last segment, read as a base-10 integer, is the
record's numeric id and drives range and threshold selection.
"""

import re
from collections.abc import Mapping
from typing import Any

_DIGITS = re.compile(r"\s*([0-9]+)\s*")


def parse_numeric_id(identifier: Any) -> int | None:
    """
    Parse the numeric id out of an identifier.

    Returns None when the identifier is missing or its last segment
    is not an integer. Never raises.

    Example:
        >>> parse_numeric_id("skin-1-4964")
        4964
        >>> parse_numeric_id("skin-e8c23a4ba0fc") is None
        True
    """
    if identifier is None or identifier == "":
        return None

    last = str(identifier).split("-")[-1]
    match = _DIGITS.fullmatch(last)
    if match is None:
        return None
    return int(match.group(1))


def numeric_id(record: Any) -> int | None:
    """Numeric id of a record (model instance or plain mapping)."""
    if record is None:
        return None
    if isinstance(record, Mapping):
        return parse_numeric_id(record.get("id"))
    return parse_numeric_id(getattr(record, "id", None))
