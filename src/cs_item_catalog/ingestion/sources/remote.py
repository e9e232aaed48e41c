"""
Remote catalog source.

Fetches ``<remote_base_url>/<locale>/<category>.json`` over HTTP with
retries and exponential backoff on transient failures.
"""

import json
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from cs_item_catalog.catalog.categories import ItemCategory
from cs_item_catalog.config import RetryConfig, get_settings
from cs_item_catalog.ingestion.sources.base import (
    CatalogFormatError,
    CatalogSource,
    RemoteFetchError,
)


class TransientFetchError(RemoteFetchError):
    """Raised for responses worth retrying (429 and 5xx)."""

    pass


class RemoteCatalogSource(CatalogSource):
    """
    Catalog source backed by the remote catalog API.

    Example:
        >>> async with RemoteCatalogSource() as source:
        ...     crates = await source.load(ItemCategory.CRATES, "en")
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        retry_config: RetryConfig | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize remote source.

        Args:
            base_url: Catalog base URL (defaults to CATALOG_REMOTE_BASE_URL)
            retry_config: Custom retry configuration (uses defaults if None)
            timeout: HTTP request timeout in seconds
        """
        if base_url is None or retry_config is None or timeout is None:
            settings = get_settings()
            base_url = base_url or settings.source.remote_base_url
            retry_config = retry_config or settings.retry
            timeout = timeout or settings.source.timeout_seconds
        self._base_url = base_url.rstrip("/")
        self._retry_config = retry_config
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        super().__init__()

    @property
    def source_name(self) -> str:
        """Return source identifier."""
        return "remote_api"

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                headers={
                    "User-Agent": "CSItemCatalog/0.1",
                    "Accept": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def location(self, category: ItemCategory, locale: str) -> str:
        return f"{self._base_url}/{locale}/{ItemCategory(category).value}.json"

    def _create_retry_decorator(self) -> Any:
        """Create retry decorator with current configuration."""
        return retry(
            retry=retry_if_exception_type((httpx.TransportError, TransientFetchError)),
            stop=stop_after_attempt(self._retry_config.max_attempts),
            wait=wait_exponential(
                multiplier=self._retry_config.base_delay_seconds,
                max=self._retry_config.max_delay_seconds,
                exp_base=self._retry_config.exponential_base,
            ),
            before_sleep=self._log_retry_attempt,
            reraise=True,
        )

    def _log_retry_attempt(self, retry_state: Any) -> None:
        """Log retry attempts for observability."""
        self._logger.warning(
            "Retrying request",
            attempt=retry_state.attempt_number,
            wait_seconds=retry_state.next_action.sleep if retry_state.next_action else 0,
            exception=str(retry_state.outcome.exception()) if retry_state.outcome else None,
        )

    async def _fetch(self, category: ItemCategory, locale: str) -> Any:
        url = self.location(category, locale)
        context = {"category": category.value, "locale": locale, "location": url}

        @self._create_retry_decorator()
        async def _request() -> httpx.Response:
            self._logger.debug("Making request", url=url)
            response = await self.client.get(url)

            if response.status_code == 429 or response.status_code >= 500:
                raise TransientFetchError(
                    f"Transient API error: {response.status_code}",
                    status_code=response.status_code,
                    **context,
                )
            if response.status_code >= 400:
                raise RemoteFetchError(
                    f"API error: {response.status_code}",
                    status_code=response.status_code,
                    **context,
                )
            return response

        try:
            response = await _request()
        except httpx.HTTPError as e:
            self._logger.error(
                "Request failed after retries",
                url=url,
                attempts=self._retry_config.max_attempts,
            )
            raise RemoteFetchError(
                f"Request failed after {self._retry_config.max_attempts} attempts: {e}",
                original_error=e,
                **context,
            ) from e

        try:
            return response.json()
        except json.JSONDecodeError as e:
            raise CatalogFormatError(
                f"Invalid JSON from {url}: {e.msg}",
                original_error=e,
                **context,
            ) from e
        except UnicodeDecodeError as e:
            raise CatalogFormatError(
                f"Response from {url} is not valid UTF-8: {e.reason}",
                original_error=e,
                **context,
            ) from e
