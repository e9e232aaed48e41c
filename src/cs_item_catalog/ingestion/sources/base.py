"""
Base catalog source and load errors.

A catalog source returns the raw record list for one
(category, locale) pair. Any failure to do so is a load error and
aborts the run; no partial results are produced.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from cs_item_catalog.catalog.categories import ItemCategory
from cs_item_catalog.ingestion.contracts import RawItem
from cs_item_catalog.logger import get_logger

M = TypeVar("M", bound=RawItem)


class CatalogLoadError(Exception):
    """Base exception for catalog load errors."""

    def __init__(
        self,
        message: str,
        *,
        category: str | None = None,
        locale: str | None = None,
        location: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.locale = locale
        self.location = location
        self.status_code = status_code
        self.original_error = original_error
        self.timestamp = datetime.now(timezone.utc)


class SnapshotNotFoundError(CatalogLoadError):
    """Raised when a local snapshot file does not exist."""

    pass


class CatalogFormatError(CatalogLoadError):
    """Raised when catalog content is not a JSON array."""

    pass


class RemoteFetchError(CatalogLoadError):
    """Raised when the remote catalog cannot be fetched."""

    pass


class CatalogValidationError(CatalogLoadError):
    """Raised when a record violates its category contract."""

    def __init__(self, message: str, *, record_index: int | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.record_index = record_index


class CatalogSource(ABC):
    """
    Abstract base class for catalog sources.

    Subclasses implement `_fetch` for one storage strategy; `load`
    adds logging and the array-shape check shared by all of them.
    """

    def __init__(self) -> None:
        self._logger = get_logger(
            self.__class__.__name__,
            component="catalog_source",
            source=self.source_name,
        )

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return identifier for this source strategy."""
        ...

    @abstractmethod
    def location(self, category: ItemCategory, locale: str) -> str:
        """Path or URL the catalog is read from."""
        ...

    @abstractmethod
    async def _fetch(self, category: ItemCategory, locale: str) -> Any:
        """Return the decoded JSON document for a catalog."""
        ...

    async def load(self, category: ItemCategory | str, locale: str) -> list[dict[str, Any]]:
        """
        Load the raw record list for a category and locale.

        Raises:
            CatalogLoadError: If the catalog is missing, unreadable or
                not a JSON array of objects
        """
        category = ItemCategory(category)
        location = self.location(category, locale)
        self._logger.debug("Loading catalog", category=category.value, locale=locale)

        data = await self._fetch(category, locale)

        if not isinstance(data, list):
            raise CatalogFormatError(
                f"Expected a JSON array, got {type(data).__name__}",
                category=category.value,
                locale=locale,
                location=location,
            )

        self._logger.info(
            "Loaded catalog",
            category=category.value,
            locale=locale,
            location=location,
            records_loaded=len(data),
        )
        return data

    async def close(self) -> None:
        """Release resources (no-op by default)."""
        return None

    async def __aenter__(self) -> "CatalogSource":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()


def parse_records(
    raw_records: list[Any],
    model: type[M],
    *,
    category: ItemCategory | str | None = None,
    locale: str | None = None,
) -> list[M]:
    """
    Validate raw records against a category contract.

    Args:
        raw_records: Decoded JSON array
        model: Raw record model for the category

    Returns:
        list: Parsed records in input order

    Raises:
        CatalogValidationError: On the first record that does not fit
    """
    category_value = ItemCategory(category).value if category is not None else None
    parsed: list[M] = []
    for index, raw in enumerate(raw_records):
        try:
            parsed.append(model.model_validate(raw))
        except PydanticValidationError as e:
            record_id = raw.get("id") if isinstance(raw, dict) else None
            raise CatalogValidationError(
                f"Record {index} ({record_id}) does not match {model.__name__}: "
                f"{e.error_count()} error(s)",
                category=category_value,
                locale=locale,
                record_index=index,
                original_error=e,
            ) from e
    return parsed
