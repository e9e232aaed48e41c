"""
Structured logging for catalog runs.

Log lines are rendered as JSON or for the console and always go to
stderr, leaving stdout to the CLI's JSON output. Run-scoped values
(run id, category) are carried in structlog context variables so that
sources and writers log them without being handed a bound logger.
"""

import logging
import sys
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any, TextIO

import structlog

if TYPE_CHECKING:
    from structlog.types import Processor

from cs_item_catalog.config import LoggingConfig, get_settings


def _renderer(config: LoggingConfig, stream: TextIO) -> "Processor":
    if config.format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=stream.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def setup_logging(config: LoggingConfig | None = None, *, stream: TextIO | None = None) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        config: Logging section (read from settings if None)
        stream: Destination for log lines (stderr if None)
    """
    config = config or get_settings().logging
    stream = stream or sys.stderr

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if config.include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))
    processors.append(_renderer(config, stream))

    level = logging.getLevelName(config.level)
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=stream, level=level, force=True)


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Get a logger, optionally bound to initial context.

    Example:
        >>> logger = get_logger(__name__, component="selector")
        >>> logger.info("Selected records", category="skins", count=12)
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger


def run_context(run_id: str, category: str) -> AbstractContextManager[Any]:
    """
    Attach a run's id and category to every log line emitted inside the block.

    Example:
        >>> with run_context(run_id="3f2a...", category="crates"):
        ...     await source.load(ItemCategory.CRATES, "en")
    """
    return structlog.contextvars.bound_contextvars(run_id=run_id, category=category)
