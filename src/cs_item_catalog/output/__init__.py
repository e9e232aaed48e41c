"""Output artifacts."""

from cs_item_catalog.output.writer import ResultWriteError, ResultWriter

__all__ = [
    "ResultWriteError",
    "ResultWriter",
]
