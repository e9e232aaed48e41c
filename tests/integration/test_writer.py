"""Integration tests for the result writer."""

import json
from pathlib import Path

import pytest

from cs_item_catalog.ingestion.contracts import LocaleRecord
from cs_item_catalog.output.writer import ResultWriteError, ResultWriter


class TestResultWriter:
    """Tests for ResultWriter."""

    def test_write_records(self, tmp_path: Path) -> None:
        """Test that records are written as formatted JSON."""
        writer = ResultWriter(output_dir=tmp_path / "nested")
        records = [
            LocaleRecord(
                id="skin-1",
                market_hash_name_localized="Faca Kukri",
                market_hash_name_canonical="Kukri Knife",
            )
        ]

        path = writer.write(records, "item_names.json")

        assert path == tmp_path / "nested" / "item_names.json"
        text = path.read_text(encoding="utf-8")
        assert '\n  {\n    "id": "skin-1"' in text
        assert json.loads(text) == [
            {
                "id": "skin-1",
                "marketHashNameLocalized": "Faca Kukri",
                "marketHashNameCanonical": "Kukri Knife",
            }
        ]

    def test_non_ascii_preserved(self, tmp_path: Path) -> None:
        """Test that localized text is written verbatim."""
        path = ResultWriter(output_dir=tmp_path).write([{"name": "Degradê"}], "x.json")
        assert "Degradê" in path.read_text(encoding="utf-8")

    def test_empty_collection(self, tmp_path: Path) -> None:
        """Test that an empty selection still produces an artifact."""
        path = ResultWriter(output_dir=tmp_path).write([], "empty.json")
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_write_failure(self, tmp_path: Path) -> None:
        """Test that an unwritable target raises ResultWriteError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(ResultWriteError) as exc_info:
            ResultWriter(output_dir=blocker).write([], "items.json")

        assert exc_info.value.path == blocker / "items.json"

    def test_explicit_arguments_skip_settings(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that a fully configured writer never reads the environment."""

        def broken_settings() -> None:
            raise AssertionError("settings should not be read")

        monkeypatch.setattr("cs_item_catalog.output.writer.get_settings", broken_settings)
        path = ResultWriter(output_dir=tmp_path, indent=0).write([{"id": "a"}], "x.json")

        assert json.loads(path.read_text(encoding="utf-8")) == [{"id": "a"}]
