# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from airac_updater.app import run_update
from airac_updater.config import (
    ConfigurationError,
    configure_logging,
    get_catalog_config,
    get_reconciliation_config,
    parse_log_level,
)
from airac_updater.config.env import env_str

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from airac_updater.app import UpdateSummary

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="airac-updater",
        description="Update a EuroScope controller pack from DFS AIXM datasets",
    )
    parser.add_argument(
        "directory",
        type=Path,
        help="Directory holding the .sct files and isec.txt to update",
    )
    parser.add_argument(
        "--amendment",
        type=int,
        help="Amendment id to read from the dataset catalog (defaults to config)",
    )
    parser.add_argument(
        "--release-type",
        type=str,
        help="Release type to download, e.g. 'AIXM 5.1' (defaults to config)",
    )
    parser.add_argument(
        "--dataset",
        action="append",
        dest="datasets",
        metavar="NAME",
        help="Dataset to ingest; repeat for several (defaults to config)",
    )
    parser.add_argument(
        "--aixm-file",
        action="append",
        dest="aixm_files",
        type=Path,
        metavar="PATH",
        help="Read an AIXM file from disk instead of the catalog; repeat for several",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="trace, debug, info, warn or error (defaults to AIRAC_UPDATER_LOG or info)",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    configure_logging()
    signal(SIGINT, sigint_handler)
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        level = parse_log_level(parsed_args.log_level or env_str("AIRAC_UPDATER_LOG", "info"))
        catalog_config = get_catalog_config()
        if parsed_args.amendment is not None:
            if parsed_args.amendment < 0:
                raise ValueError("Amendment id must not be negative")  # noqa: TRY301
            catalog_config = replace(catalog_config, amendment_id=parsed_args.amendment)
        if parsed_args.release_type:
            catalog_config = replace(catalog_config, release_type=parsed_args.release_type)
        if parsed_args.datasets:
            catalog_config = replace(catalog_config, datasets=tuple(parsed_args.datasets))
        reconciliation_config = get_reconciliation_config()
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=level, force=True)
    try:
        summary = run_update(
            parsed_args.directory,
            catalog_config=catalog_config,
            reconciliation_config=reconciliation_config,
            aixm_files=parsed_args.aixm_files,
        )
    except Exception:
        log.exception("Fatal error during update")
        sys.exit(1)

    _print_summary(summary)


def _print_summary(summary: UpdateSummary) -> None:
    print(f"Datasets: {summary.datasets} ({summary.records} records)")
    print(
        f"Files: {summary.files_loaded} loaded, {summary.files_changed} changed, "
        f"{summary.files_written} written"
    )
    for path, result in sorted(summary.results.items()):
        print(
            f"  {path.name}: updated {result.updated}, inserted {result.inserted}, "
            f"ignored {result.ignored}"
        )
    print(f"Errors: {summary.error_messages}")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    main()
