"""
Catalog pipeline orchestrator.

Runs one category end to end: load the primary-locale catalog, select
and normalize it, then load the secondary-locale catalog and
cross-reference it against the primary result. Artifacts are written
only once both catalogs have loaded.
All intermediate state lives on a single `RunContext`.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from cs_item_catalog.catalog.categories import (
    CategoryDescriptor,
    ItemCategory,
    build_registry,
)
from cs_item_catalog.catalog.localization import cross_reference
from cs_item_catalog.catalog.selection import SelectionCriteria, SelectionPolicy
from cs_item_catalog.config import Settings, get_settings
from cs_item_catalog.ingestion.contracts import ItemRecord, LocaleRecord, OutputRecord, RawItem
from cs_item_catalog.ingestion.sources import CatalogSource, create_source, parse_records
from cs_item_catalog.logger import get_logger, run_context
from cs_item_catalog.output.writer import ResultWriteError, ResultWriter


@dataclass
class RunContext:
    """State of a single pipeline run."""

    category: ItemCategory
    criteria: SelectionCriteria
    primary_locale: str
    secondary_locale: str
    run_id: UUID = field(default_factory=uuid4)
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: datetime | None = None
    records_loaded: int = 0
    records: list[ItemRecord] = field(default_factory=list)
    locale_records: list[LocaleRecord] = field(default_factory=list)
    artifacts: list[str] = field(default_factory=list)
    errors: list[dict[str, Any]] = field(default_factory=list)

    @property
    def policy(self) -> SelectionPolicy:
        """Selection policy applied in this run."""
        return self.criteria.policy

    @property
    def success(self) -> bool:
        """True when every artifact was written."""
        return not self.errors

    @property
    def duration_seconds(self) -> float | None:
        """Get total duration in seconds."""
        if self.completed_at is None:
            return None
        return (self.completed_at - self.started_at).total_seconds()

    def summary(self) -> dict[str, Any]:
        """JSON-friendly run summary."""
        return {
            "run_id": str(self.run_id),
            "category": self.category.value,
            "policy": self.policy.value,
            "primary_locale": self.primary_locale,
            "secondary_locale": self.secondary_locale,
            "records_loaded": self.records_loaded,
            "records_selected": len(self.records),
            "locale_records": len(self.locale_records),
            "artifacts": self.artifacts,
            "errors": self.errors,
            "duration_seconds": self.duration_seconds,
        }


class CatalogPipeline:
    """
    Generic selection-and-normalization pipeline.

    The same code path serves every category; what differs lives in
    the category descriptors.

    Example:
        >>> pipeline = CatalogPipeline()
        >>> ctx = await pipeline.run(ItemCategory.CRATES, SelectionCriteria(id_min=4900))
        >>> [Path(p).name for p in ctx.artifacts]
        ['crates.json', 'crates_names.json']
    """

    def __init__(
        self,
        *,
        source: CatalogSource | None = None,
        writer: ResultWriter | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._source = source or create_source(self._settings)
        self._writer = writer or ResultWriter(
            output_dir=self._settings.output.output_dir,
            indent=self._settings.output.indent,
        )
        self._registry = build_registry(self._settings.selection)
        self._logger = get_logger(__name__, component="pipeline")

    def descriptor(self, category: ItemCategory | str) -> CategoryDescriptor:
        return self._registry[ItemCategory(category)]

    def process_primary(
        self,
        descriptor: CategoryDescriptor,
        raw_records: list[Any],
        criteria: SelectionCriteria | None = None,
        *,
        locale: str | None = None,
    ) -> list[ItemRecord]:
        """Parse, select and normalize primary-locale records."""
        parsed = parse_records(
            raw_records,
            descriptor.raw_model,
            category=descriptor.category,
            locale=locale,
        )
        selected = descriptor.select(parsed, criteria)
        return descriptor.normalize(selected)

    def process_secondary(
        self,
        descriptor: CategoryDescriptor,
        raw_records: list[Any],
        primary: list[ItemRecord],
        *,
        locale: str | None = None,
    ) -> list[LocaleRecord]:
        """Cross-reference secondary-locale records against the primary result."""
        # Only id and name are read here, so the secondary catalog is held
        # to the shared contract rather than the category's.
        parsed = parse_records(
            raw_records,
            RawItem,
            category=descriptor.category,
            locale=locale,
        )
        return cross_reference(parsed, primary)

    async def run(
        self,
        category: ItemCategory | str,
        criteria: SelectionCriteria | None = None,
    ) -> RunContext:
        """
        Run the pipeline for one category.

        Args:
            category: Category to process
            criteria: Selection criteria (category default if None)

        Returns:
            RunContext: Results, artifacts and write errors of the run

        Raises:
            CatalogLoadError: If either catalog cannot be loaded; nothing
                further is produced for the category
        """
        descriptor = self.descriptor(category)
        ctx = RunContext(
            category=descriptor.category,
            criteria=criteria or SelectionCriteria(),
            primary_locale=self._settings.source.primary_locale,
            secondary_locale=self._settings.source.secondary_locale,
        )
        with run_context(run_id=str(ctx.run_id), category=ctx.category.value):
            await self._run(descriptor, ctx)
        return ctx

    async def _run(self, descriptor: CategoryDescriptor, ctx: RunContext) -> None:
        self._logger.info(
            "Starting run", policy=ctx.policy.value, source=self._source.source_name
        )

        async with self._source:
            raw = await self._source.load(ctx.category, ctx.primary_locale)
            ctx.records_loaded = len(raw)
            ctx.records = self.process_primary(
                descriptor, raw, ctx.criteria, locale=ctx.primary_locale
            )
            self._logger.info(
                "Selected records",
                policy=ctx.policy.value,
                records_loaded=ctx.records_loaded,
                records_selected=len(ctx.records),
            )

            raw_secondary = await self._source.load(ctx.category, ctx.secondary_locale)
            ctx.locale_records = self.process_secondary(
                descriptor, raw_secondary, ctx.records, locale=ctx.secondary_locale
            )
            self._logger.info(
                "Cross-referenced locale names",
                locale=ctx.secondary_locale,
                locale_records=len(ctx.locale_records),
            )

        # Both catalogs are loaded before anything is written, so a load
        # error leaves no artifact behind for the category.
        self._write(ctx, ctx.records, descriptor.records_artifact)
        self._write(ctx, ctx.locale_records, descriptor.names_artifact)

        ctx.completed_at = datetime.now(timezone.utc)
        self._logger.info(
            "Run complete",
            duration_seconds=ctx.duration_seconds,
            artifacts=len(ctx.artifacts),
            total_errors=len(ctx.errors),
        )

    def _write(self, ctx: RunContext, records: Sequence[OutputRecord], name: str) -> None:
        """Write an artifact, recording failures on the run instead of raising."""
        try:
            path = self._writer.write(records, name)
        except ResultWriteError as e:
            ctx.errors.append({"artifact": name, "error": str(e)})
            return
        ctx.artifacts.append(str(path))
