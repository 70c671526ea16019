"""Distribute clients from CSV files and write the result as JSON.

Usage:
    python -m distributor.tools.distribute
    python -m distributor.tools.distribute --data-dir data --output result.json
    python -m distributor.tools.distribute --provider nominatim
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from distributor.adapters.csv_loader.loader import load_clients, load_managers, load_offices
from distributor.adapters.output.json_writer import write_allocations
from distributor.application.use_cases.distribute_clients import (
    DistributeClientsUseCase,
    DistributionResult,
)
from distributor.config import settings
from distributor.domain.errors import ConfigurationError
from distributor.infrastructure.api.dependencies import build_distribute_uc, build_geocoder

logger = logging.getLogger(__name__)

CLIENT_HINTS = ["clients", "клиенты"]
MANAGER_HINTS = ["managers", "менеджеры", "сотрудники"]
OFFICE_HINTS = ["offices", "офисы", "отделы", "business_units"]


def _find_csv(data_dir: Path, name_hints: list[str]) -> Path | None:
    """Find a CSV file matching any of the name hints."""
    for f in sorted(data_dir.glob("*.csv")):
        fname_lower = f.stem.lower()
        for hint in name_hints:
            if hint in fname_lower:
                logger.info("Found CSV: %s (matched hint '%s')", f.name, hint)
                return f
    return None


def _require_csv(data_dir: Path, name_hints: list[str], what: str) -> Path:
    path = _find_csv(data_dir, name_hints)
    if path is None:
        raise FileNotFoundError(
            f"No {what} CSV found in {data_dir}. Expected something like {name_hints[0]}.csv"
        )
    return path


async def run_distribution(
    data_dir: Path,
    use_case: DistributeClientsUseCase,
    output: Path | None = None,
) -> DistributionResult:
    """Load the three tables from ``data_dir``, distribute, optionally write JSON.

    Raises:
        FileNotFoundError: if the directory or one of the tables is missing.
        ConfigurationError: if the data cannot be distributed.
    """
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found: {data_dir}")

    clients = load_clients(_require_csv(data_dir, CLIENT_HINTS, "clients"))
    managers = load_managers(_require_csv(data_dir, MANAGER_HINTS, "managers"))
    offices = load_offices(_require_csv(data_dir, OFFICE_HINTS, "offices"))

    result = await use_case.execute(clients, managers, offices)
    if output is not None:
        write_allocations(result.allocations, output)
    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Distribute clients among managers")
    parser.add_argument(
        "--data-dir", type=str, default=settings.csv_data_path,
        help=f"Directory containing CSV files (default: {settings.csv_data_path})",
    )
    parser.add_argument(
        "--output", type=str, default=settings.result_path,
        help=f"Where to write the JSON result (default: {settings.result_path})",
    )
    parser.add_argument(
        "--provider", choices=["yandex", "nominatim"], default=None,
        help="Override the geocoder provider from settings",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every routing decision")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or settings.debug else logging.INFO,
        format="%(levelname)s | %(name)s | %(message)s",
    )

    config = settings
    if args.provider:
        config = settings.model_copy(update={"geocoder_provider": args.provider})
    use_case = build_distribute_uc(build_geocoder(config), config)

    try:
        result = asyncio.run(run_distribution(Path(args.data_dir), use_case, Path(args.output)))
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except ConfigurationError as e:
        logger.error("Distribution aborted: %s", e)
        return 2

    logger.info(
        "Done: %d allocations (%s)",
        len(result.allocations),
        ", ".join(f"{tier}={count}" for tier, count in result.tier_counts.items()),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
