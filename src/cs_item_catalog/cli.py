"""
Command-line interface for CS Item Catalog.

Provides commands to run the pipeline for a category, either from
flags or through the interactive prompt sequence.
"""

import asyncio
import json
import sys
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from cs_item_catalog.catalog.categories import ItemCategory
from cs_item_catalog.catalog.selection import SelectionCriteria
from cs_item_catalog.config import get_settings
from cs_item_catalog.ingestion.orchestrator import CatalogPipeline
from cs_item_catalog.ingestion.sources import create_source
from cs_item_catalog.logger import get_logger, setup_logging
from cs_item_catalog.output.writer import ResultWriter

# Initialize logging
setup_logging()
logger = get_logger(__name__, component="cli")

MODEL_CHOICES: dict[str, ItemCategory] = {
    "1": ItemCategory.SKINS,
    "2": ItemCategory.STICKERS,
    "3": ItemCategory.CRATES,
    "4": ItemCategory.GRAFFITI,
    "5": ItemCategory.KEYCHAINS,
}


class CLIOutput(BaseModel):
    """Structured output for CLI commands."""

    success: bool
    command: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: dict[str, Any] | list[Any] | None = None
    error: str | None = None


def print_json(output: CLIOutput) -> None:
    """Print output as formatted JSON."""
    print(json.dumps(output.model_dump(), indent=2, default=str))


def parse_number(text: str) -> int | None:
    """Parse an integer, returning None for blank or invalid input."""
    try:
        return int(text.strip())
    except ValueError:
        return None


def parse_list(text: str) -> list[str]:
    """Split a comma-separated list, dropping blanks."""
    return [s.strip() for s in text.split(",") if s.strip()]


def prompt_selection(
    ask: Callable[[str], str] = input,
    say: Callable[[str], None] = print,
) -> tuple[ItemCategory, SelectionCriteria] | None:
    """
    Ask the operator for a category and a filter.

    Returns None when the category choice is invalid.
    """
    say("Select model:")
    for key, category in MODEL_CHOICES.items():
        say(f"  {key}) {category.value}")

    category = MODEL_CHOICES.get(ask("Enter option (1-5): ").strip())
    if category is None:
        say("Invalid model option.")
        return None

    say("\nFilter type:")
    say("  1) default")
    say("  2) by single numeric id")
    say("  3) by id range (min / max)")
    say("  4) by collection id(s)")
    say("  5) by crate id(s)")

    filter_choice = ask("Enter option (1-5): ").strip()
    options: dict[str, Any] = {}

    if filter_choice == "2":
        item_id = parse_number(ask("Enter numeric id (e.g. 4964, numeric part only): "))
        if item_id is None:
            say("Invalid id, falling back to default filter.")
        else:
            options["id"] = item_id
    elif filter_choice == "3":
        min_text = ask("Enter minimum numeric id (leave blank for no minimum): ")
        max_text = ask("Enter maximum numeric id (leave blank for no maximum): ")
        options["id_min"] = parse_number(min_text)
        options["id_max"] = parse_number(max_text)
    elif filter_choice == "4":
        options["collection_ids"] = parse_list(
            ask("Enter collection id(s), comma-separated (e.g. collection-set-overpass-2024): ")
        )
    elif filter_choice == "5":
        options["crate_ids"] = parse_list(
            ask("Enter crate id(s), comma-separated (e.g. crate-4940,crate-4964): ")
        )

    return category, SelectionCriteria(**options)


def parse_run_args(args: list[str]) -> tuple[SelectionCriteria, dict[str, Any]]:
    """
    Parse `run` command flags.

    Returns:
        tuple: Selection criteria and pipeline options
            (`use_local_file`, `output_dir`)

    Raises:
        ValueError: On unknown flags, missing or non-numeric values
    """
    criteria: dict[str, Any] = {}
    options: dict[str, Any] = {"use_local_file": None, "output_dir": None}
    numeric_flags = {"--id": "id", "--id-min": "id_min", "--id-max": "id_max"}
    list_flags = {"--collections": "collection_ids", "--crates": "crate_ids"}

    i = 0
    while i < len(args):
        flag = args[i]
        if flag == "--remote":
            options["use_local_file"] = False
            i += 1
            continue
        if flag == "--local":
            options["use_local_file"] = True
            i += 1
            continue

        if flag not in numeric_flags and flag not in list_flags and flag != "--output-dir":
            raise ValueError(f"Unknown option: {flag}")
        if i + 1 >= len(args):
            raise ValueError(f"Missing value for {flag}")
        value = args[i + 1]

        if flag in numeric_flags:
            number = parse_number(value)
            if number is None:
                raise ValueError(f"Invalid number for {flag}: {value}")
            criteria[numeric_flags[flag]] = number
        elif flag in list_flags:
            criteria[list_flags[flag]] = parse_list(value)
        else:
            options["output_dir"] = Path(value)
        i += 2

    return SelectionCriteria(**criteria), options


async def cmd_run(
    category: ItemCategory,
    criteria: SelectionCriteria,
    *,
    use_local_file: bool | None = None,
    output_dir: Path | None = None,
) -> bool:
    """Run the pipeline for one category and print the run summary."""
    settings = get_settings()
    source = create_source(settings, use_local_file=use_local_file)
    writer = ResultWriter(
        output_dir=output_dir or settings.output.output_dir,
        indent=settings.output.indent,
    )

    logger.info(
        "Running pipeline",
        category=category.value,
        policy=criteria.policy.value,
        source=source.source_name,
    )

    pipeline = CatalogPipeline(source=source, writer=writer, settings=settings)
    ctx = await pipeline.run(category, criteria)

    output = CLIOutput(
        success=ctx.success,
        command="run",
        data=ctx.summary(),
        error="; ".join(e["error"] for e in ctx.errors) or None,
    )
    print_json(output)
    return ctx.success


async def cmd_interactive() -> bool:
    """Prompt for category and filter, then run the pipeline."""
    selection = prompt_selection()
    if selection is None:
        return False
    category, criteria = selection

    settings = get_settings()
    where = (
        settings.source.api_dir
        if settings.source.use_local_file
        else settings.source.remote_base_url
    )
    print(f"\nUsing catalogs under: {where}")
    print("Running...")

    return await cmd_run(category, criteria)


async def cmd_test_config() -> None:
    """Test configuration loading."""
    settings = get_settings()

    output = CLIOutput(
        success=True,
        command="test-config",
        data={
            "use_local_file": settings.source.use_local_file,
            "api_dir": str(settings.source.api_dir),
            "remote_base_url": settings.source.remote_base_url,
            "primary_locale": settings.source.primary_locale,
            "secondary_locale": settings.source.secondary_locale,
            "output_dir": str(settings.output.output_dir),
            "selection_defaults": settings.selection.model_dump(),
        },
    )
    print_json(output)


def print_usage() -> None:
    """Print CLI usage information."""
    usage = """
CS Item Catalog CLI
===================

Usage: cs-item-catalog <command> [arguments]

Commands:
  run <category> [options]    Select, normalize and localize one category
  interactive                 Prompt for category and filter, then run
  test-config                 Show the loaded configuration

Categories:
  skins, stickers, crates, graffiti, keychains

Options (run):
  --id <n>                    Exact numeric id
  --id-min <n>                Inclusive lower numeric id bound
  --id-max <n>                Inclusive upper numeric id bound
  --collections <a,b>         First collection id in this list
  --crates <a,b>              First crate id (or own id for crates) in this list
  --remote | --local          Fetch the remote catalog or read local snapshots
  --output-dir <dir>          Directory for the output artifacts

Examples:
  cs-item-catalog run crates --id-min 4964
  cs-item-catalog run skins --collections collection-set-overpass-2024 --remote
"""
    print(usage)


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print_usage()
        sys.exit(1)

    command = sys.argv[1]

    try:
        if command == "run":
            if len(sys.argv) < 3:
                print("Error: category required")
                sys.exit(1)
            try:
                category = ItemCategory(sys.argv[2].lower())
            except ValueError:
                print(f"Error: Invalid category '{sys.argv[2]}'.")
                sys.exit(1)
            criteria, options = parse_run_args(sys.argv[3:])
            ok = asyncio.run(cmd_run(category, criteria, **options))
            sys.exit(0 if ok else 1)

        elif command == "interactive":
            ok = asyncio.run(cmd_interactive())
            sys.exit(0 if ok else 1)

        elif command == "test-config":
            asyncio.run(cmd_test_config())

        elif command in ("help", "--help", "-h"):
            print_usage()

        else:
            print(f"Unknown command: {command}")
            print_usage()
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.exception("CLI error", error=str(e))
        output = CLIOutput(
            success=False,
            command=command,
            error=str(e),
        )
        print_json(output)
        sys.exit(1)


if __name__ == "__main__":
    main()
