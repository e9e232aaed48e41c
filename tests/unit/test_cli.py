"""Tests for CLI parsing and prompting."""

from collections.abc import Callable
from pathlib import Path

import pytest

from cs_item_catalog.catalog.categories import ItemCategory
from cs_item_catalog.catalog.selection import SelectionPolicy
from cs_item_catalog.cli import parse_list, parse_number, parse_run_args, prompt_selection


def answers(*replies: str) -> Callable[[str], str]:
    """Fake `input` returning canned replies in order."""
    queue = list(replies)
    return lambda _prompt: queue.pop(0)


def silent(_message: str) -> None:
    return None


class TestHelpers:
    """Tests for small parsing helpers."""

    def test_parse_number(self) -> None:
        assert parse_number(" 4964 ") == 4964
        assert parse_number("") is None
        assert parse_number("abc") is None

    def test_parse_list(self) -> None:
        assert parse_list(" crate-1, ,crate-2,") == ["crate-1", "crate-2"]
        assert parse_list("") == []


class TestPromptSelection:
    """Tests for the interactive prompt sequence."""

    def test_invalid_model_aborts(self) -> None:
        """Test that an unknown model choice returns None."""
        assert prompt_selection(answers("9"), silent) is None

    def test_default_filter(self) -> None:
        """Test model choice with the default filter."""
        result = prompt_selection(answers("3", "1"), silent)

        assert result is not None
        category, criteria = result
        assert category is ItemCategory.CRATES
        assert criteria.policy is SelectionPolicy.DEFAULT

    def test_single_id(self) -> None:
        """Test the single numeric id filter."""
        result = prompt_selection(answers("1", "2", "4964"), silent)

        assert result is not None
        assert result[1].id == 4964

    def test_invalid_id_falls_back_to_default(self) -> None:
        """Test that a bad id yields the default filter."""
        messages: list[str] = []
        result = prompt_selection(answers("1", "2", "abc"), messages.append)

        assert result is not None
        assert result[1].policy is SelectionPolicy.DEFAULT
        assert "Invalid id, falling back to default filter." in messages

    def test_range_with_blank_bound(self) -> None:
        """Test that a blank bound means no bound."""
        result = prompt_selection(answers("5", "3", "", "40"), silent)

        assert result is not None
        category, criteria = result
        assert category is ItemCategory.KEYCHAINS
        assert criteria.id_min is None
        assert criteria.id_max == 40

    def test_collection_ids(self) -> None:
        """Test the collection filter."""
        result = prompt_selection(
            answers("2", "4", "collection-set-a, collection-set-b"), silent
        )

        assert result is not None
        assert result[1].collection_ids == ("collection-set-a", "collection-set-b")

    def test_crate_ids(self) -> None:
        """Test the crate filter."""
        result = prompt_selection(answers("4", "5", "crate-4940,crate-4964"), silent)

        assert result is not None
        assert result[0] is ItemCategory.GRAFFITI
        assert result[1].crate_ids == ("crate-4940", "crate-4964")


class TestParseRunArgs:
    """Tests for `run` flag parsing."""

    def test_no_flags(self) -> None:
        criteria, options = parse_run_args([])

        assert criteria.policy is SelectionPolicy.DEFAULT
        assert options == {"use_local_file": None, "output_dir": None}

    def test_all_flags(self) -> None:
        criteria, options = parse_run_args(
            [
                "--id-min",
                "10",
                "--id-max",
                "20",
                "--collections",
                "a,b",
                "--remote",
                "--output-dir",
                "out",
            ]
        )

        assert criteria.id_min == 10
        assert criteria.id_max == 20
        assert criteria.collection_ids == ("a", "b")
        assert criteria.policy is SelectionPolicy.COLLECTION_IDS
        assert options == {"use_local_file": False, "output_dir": Path("out")}

    def test_invalid_number(self) -> None:
        with pytest.raises(ValueError, match="Invalid number"):
            parse_run_args(["--id", "x"])

    def test_missing_value(self) -> None:
        with pytest.raises(ValueError, match="Missing value"):
            parse_run_args(["--crates"])

    def test_unknown_flag(self) -> None:
        with pytest.raises(ValueError, match="Unknown option"):
            parse_run_args(["--verbose"])
