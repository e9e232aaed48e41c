"""
Record selection policies.

Exactly one policy is applied per run, chosen by fixed precedence:
crate ids, then collection ids, then id/range, then the category
default. Every policy preserves the catalog's original order.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cs_item_catalog.catalog.ids import numeric_id
from cs_item_catalog.ingestion.contracts import RawItem

R = TypeVar("R", bound=RawItem)


class SelectionPolicy(str, Enum):
    """Policy resolved from a set of criteria."""

    CRATE_IDS = "crate_ids"
    COLLECTION_IDS = "collection_ids"
    ID_RANGE = "id_range"
    DEFAULT = "default"


class SelectionCriteria(BaseModel):
    """
    Operator-supplied selection criteria.

    Several groups may be filled in; only the first non-empty group
    in precedence order is used (see `policy`).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int | None = Field(default=None, description="Exact numeric id")
    id_min: int | None = Field(default=None, alias="idMin", description="Inclusive lower bound")
    id_max: int | None = Field(default=None, alias="idMax", description="Inclusive upper bound")
    collection_ids: tuple[str, ...] = Field(default=(), alias="collectionIds")
    crate_ids: tuple[str, ...] = Field(default=(), alias="crateIds")

    @field_validator("collection_ids", "crate_ids", mode="before")
    @classmethod
    def drop_blank_ids(cls, v: Iterable[str] | None) -> tuple[str, ...]:
        """Trim ids and drop empty entries."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = v.split(",")
        return tuple(s.strip() for s in v if s and s.strip())

    @property
    def has_id_bounds(self) -> bool:
        """Whether any of id, id_min or id_max is set."""
        return self.id is not None or self.id_min is not None or self.id_max is not None

    @property
    def policy(self) -> SelectionPolicy:
        """Resolve which policy these criteria select."""
        if self.crate_ids:
            return SelectionPolicy.CRATE_IDS
        if self.collection_ids:
            return SelectionPolicy.COLLECTION_IDS
        if self.has_id_bounds:
            return SelectionPolicy.ID_RANGE
        return SelectionPolicy.DEFAULT


@dataclass(frozen=True)
class CollectionDefault:
    """Default rule: first collection id is one of a fixed set."""

    collection_ids: frozenset[str]

    def matches(self, record: RawItem) -> bool:
        first = record.first_collection
        return first is not None and first.id in self.collection_ids


@dataclass(frozen=True)
class MinIdDefault:
    """Default rule: numeric id at or above a threshold."""

    min_id: int

    def matches(self, record: RawItem) -> bool:
        n = numeric_id(record)
        return n is not None and n >= self.min_id


DefaultRule = CollectionDefault | MinIdDefault


def filter_by_id_range(
    records: Sequence[R],
    *,
    id: int | None = None,
    id_min: int | None = None,
    id_max: int | None = None,
) -> list[R]:
    """Keep records whose numeric id matches `id` and lies in [id_min, id_max]."""
    if id is None and id_min is None and id_max is None:
        return list(records)

    selected = []
    for record in records:
        n = numeric_id(record)
        if n is None:
            continue
        if id is not None and n != id:
            continue
        if id_min is not None and n < id_min:
            continue
        if id_max is not None and n > id_max:
            continue
        selected.append(record)
    return selected


def filter_by_collection_ids(records: Sequence[R], collection_ids: Iterable[str]) -> list[R]:
    """Keep records whose first collection is in `collection_ids`."""
    wanted = set(collection_ids)
    return [
        r for r in records if r.first_collection is not None and r.first_collection.id in wanted
    ]


def filter_by_crate_ids(
    records: Sequence[R],
    crate_ids: Iterable[str],
    *,
    match_own_id: bool = False,
) -> list[R]:
    """
    Keep records tied to one of `crate_ids`.

    Crates themselves are matched on their own id (`match_own_id`);
    other items on the id of their first listed crate.
    """
    wanted = set(crate_ids)
    if match_own_id:
        return [r for r in records if r.id in wanted]
    return [r for r in records if r.first_crate is not None and r.first_crate.id in wanted]


def select(
    records: Sequence[R],
    criteria: SelectionCriteria | None,
    *,
    default_rule: DefaultRule,
    match_own_crate_id: bool = False,
) -> list[R]:
    """
    Apply the policy resolved from `criteria` to `records`.

    Args:
        records: Raw records in catalog order
        criteria: Operator criteria; None means the default policy
        default_rule: Category default rule
        match_own_crate_id: Match crate ids against the record's own id

    Returns:
        list: Selected records, original order preserved
    """
    criteria = criteria or SelectionCriteria()
    policy = criteria.policy

    if policy is SelectionPolicy.CRATE_IDS:
        return filter_by_crate_ids(records, criteria.crate_ids, match_own_id=match_own_crate_id)
    if policy is SelectionPolicy.COLLECTION_IDS:
        return filter_by_collection_ids(records, criteria.collection_ids)
    if policy is SelectionPolicy.ID_RANGE:
        return filter_by_id_range(
            records,
            id=criteria.id,
            id_min=criteria.id_min,
            id_max=criteria.id_max,
        )
    return [r for r in records if default_rule.matches(r)]
