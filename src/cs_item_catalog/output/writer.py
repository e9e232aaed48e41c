"""
Result writer for persisting pipeline output.

Serializes a record collection to a formatted JSON document.
A failed write is reported but never touches the in-memory results.
"""

import json
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from cs_item_catalog.config import get_settings
from cs_item_catalog.ingestion.contracts import OutputRecord
from cs_item_catalog.logger import get_logger


class ResultWriteError(Exception):
    """Raised when an artifact cannot be written."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.original_error = original_error
        self.timestamp = datetime.now(timezone.utc)


class ResultWriter:
    """
    Writes record collections as JSON artifacts.

    Example:
        >>> writer = ResultWriter(output_dir=Path("out"))
        >>> writer.write(records, "items.json")
        PosixPath('out/items.json')
    """

    def __init__(
        self,
        *,
        output_dir: Path | None = None,
        indent: int | None = None,
    ) -> None:
        """
        Initialize writer.

        Args:
            output_dir: Directory for artifacts (defaults to OUTPUT_OUTPUT_DIR)
            indent: JSON indentation (defaults to OUTPUT_INDENT)
        """
        if output_dir is None or indent is None:
            settings = get_settings()
            output_dir = output_dir or settings.output.output_dir
            indent = settings.output.indent if indent is None else indent
        self._output_dir = Path(output_dir)
        self._indent = indent
        self._logger = get_logger(__name__, component="result_writer")

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def write(self, records: Sequence[OutputRecord | dict[str, Any]], name: str) -> Path:
        """
        Write records to ``<output_dir>/<name>``.

        Args:
            records: Normalized records (models or plain dicts)
            name: Artifact file name

        Returns:
            Path: Path where data was written

        Raises:
            ResultWriteError: If the directory or file cannot be written
        """
        output_path = self._output_dir / name
        payload = [r.to_dict() if isinstance(r, OutputRecord) else r for r in records]

        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            with output_path.open("w", encoding="utf-8") as f:
                json.dump(payload, f, indent=self._indent, ensure_ascii=False)
                f.write("\n")
        except (OSError, TypeError, ValueError) as e:
            self._logger.error(
                "Error writing file",
                output_path=str(output_path),
                error=str(e),
            )
            raise ResultWriteError(
                f"Could not write {output_path}: {e}",
                path=output_path,
                original_error=e,
            ) from e

        self._logger.info(
            "File written",
            output_path=str(output_path),
            records_written=len(payload),
        )
        return output_path
