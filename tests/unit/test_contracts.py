"""Tests for data contracts."""

import pytest
from pydantic import ValidationError

from cs_item_catalog.ingestion.contracts import (
    CrateRecord,
    LocaleRecord,
    RawCrate,
    RawItem,
    RawSkin,
    SkinRecord,
)


class TestRawItem:
    """Tests for the shared raw contract."""

    def test_minimal_record(self) -> None:
        """Test that every field is optional."""
        item = RawItem.model_validate({})

        assert item.id is None
        assert item.first_collection is None
        assert item.first_crate is None

    def test_numeric_id_coercion(self) -> None:
        """Test that numeric ids are converted to strings."""
        assert RawItem.model_validate({"id": 4964}).id == "4964"

    def test_first_references(self) -> None:
        """Test first_collection and first_crate helpers."""
        item = RawItem.model_validate(
            {
                "collections": [{"id": "c-1", "name": "One"}, {"id": "c-2"}],
                "crates": [{"id": "crate-1"}],
            }
        )

        assert item.first_collection is not None
        assert item.first_collection.name == "One"
        assert item.first_crate is not None
        assert item.first_crate.id == "crate-1"

    def test_extra_fields_kept(self) -> None:
        """Test that undeclared fields survive a round trip."""
        item = RawSkin.model_validate({"id": "skin-1", "souvenir": False})
        assert item.model_dump(exclude_unset=True) == {"id": "skin-1", "souvenir": False}

    def test_malformed_collections_rejected(self) -> None:
        """Test that a non-list collections field is a contract violation."""
        with pytest.raises(ValidationError):
            RawItem.model_validate({"collections": "collection-set-1"})


class TestRawCrate:
    """Tests for RawCrate contract."""

    def test_contains_required(self) -> None:
        """Test that crates must list their contents."""
        with pytest.raises(ValidationError):
            RawCrate.model_validate({"id": "crate-1", "contains_rare": []})

    def test_contains_rare_required(self) -> None:
        """Test that crates must list their rare contents."""
        with pytest.raises(ValidationError):
            RawCrate.model_validate({"id": "crate-1", "contains": []})


class TestOutputRecords:
    """Tests for output record serialization."""

    def test_crate_aliases(self) -> None:
        """Test camelCase serialization of crate records."""
        record = CrateRecord(
            id="crate-1",
            name="Case",
            description=None,
            type="Case",
            contains=[],
            contains_rare=["skin-1"],
            image=None,
        )
        assert record.to_dict()["containsRare"] == ["skin-1"]

    def test_locale_aliases(self) -> None:
        """Test camelCase serialization of locale records."""
        record = LocaleRecord(
            id="s-1",
            market_hash_name_localized="Um",
            market_hash_name_canonical=None,
        )
        assert record.to_dict() == {
            "id": "s-1",
            "marketHashNameLocalized": "Um",
            "marketHashNameCanonical": None,
        }

    def test_skin_only_set_fields(self) -> None:
        """Test that unset skin fields are not serialized."""
        record = SkinRecord.model_validate({"id": "skin-1", "maxFloat": 0.5, "style": "x"})
        assert record.to_dict() == {"id": "skin-1", "maxFloat": 0.5, "style": "x"}
