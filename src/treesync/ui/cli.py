from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from treesync.app import DEFAULT_EXCLUDED_SOURCE, check_tree_locations, sync_source
from treesync.config import configure_logging
from treesync.domain.data_integration import SyncRequest
from treesync.domain.ports.loading import LoadingStrategy

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _add_sync_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--source",
        type=str,
        required=True,
        help="Source tag stored with every tree of this run (e.g. 'ls', 'sfm')",
    )
    parser.add_argument(
        "--swap-coordinates",
        action="store_true",
        help="Exchange latitude and longitude of the loaded trees",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute and report the changes without writing them",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synchronise municipal tree inventories")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Reconcile one source with the tree database")
    strategies = sync.add_subparsers(dest="strategy", required=True)

    magdeburg = strategies.add_parser(
        LoadingStrategy.MAGDEBURG.value,
        help="Load a Magdeburg tree cadastre CSV export",
    )
    _add_sync_flags(magdeburg)
    magdeburg.add_argument(
        "--version",
        type=str,
        required=True,
        help="Export format year (2022 or 2023)",
    )
    magdeburg.add_argument("--path", type=Path, required=True, help="Path to the CSV export")

    sheet = strategies.add_parser(
        LoadingStrategy.GOOGLE_SHEET.value,
        help="Load a spreadsheet published as CSV",
    )
    _add_sync_flags(sheet)
    sheet.add_argument("--url", type=str, required=True, help="Published CSV URL")

    fixture = strategies.add_parser(
        LoadingStrategy.FIXTURE.value,
        help="Load three fixed test trees",
    )
    _add_sync_flags(fixture)

    check = subparsers.add_parser(
        "check-locations",
        help="Measure OpenStreetMap trees against the stored trees",
    )
    check.add_argument("--osm-file", type=Path, required=True, help="Overpass JSON export")
    check.add_argument("--output", type=Path, required=True, help="Where to write the JSON")
    check.add_argument(
        "--exclude-source",
        type=str,
        default=DEFAULT_EXCLUDED_SOURCE,
        help="Source whose trees are not compared (default: %(default)s)",
    )
    check.add_argument(
        "--max-distance",
        type=float,
        help="Only keep trees with a stored tree within this many meters",
    )

    return parser.parse_args(list(argv))


def _load_options(args: argparse.Namespace) -> dict[str, str]:
    if args.strategy == LoadingStrategy.MAGDEBURG:
        return {"version": args.version, "path": str(args.path)}
    if args.strategy == LoadingStrategy.GOOGLE_SHEET:
        return {"url": args.url}
    return {}


def _build_request(args: argparse.Namespace) -> SyncRequest:
    return SyncRequest(
        source=args.source,
        options=_load_options(args),
        swap_coordinates=args.swap_coordinates,
        dry_run=args.dry_run,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        if parsed_args.verbose:
            configure_logging(level=logging.DEBUG, force=True)
        request = _build_request(parsed_args) if parsed_args.command == "sync" else None
        if parsed_args.command == "check-locations" and (parsed_args.max_distance or 0) < 0:
            raise ValueError("Maximum distance must be non-negative")  # noqa: TRY301
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if request is not None:
            result = sync_source(parsed_args.strategy, request)
            log.info(
                "Deleted: %s, Updated: %s, Added: %s",
                result.deleted,
                result.updated,
                result.added,
            )
        elif parsed_args.command == "check-locations":
            check_tree_locations(
                parsed_args.osm_file,
                parsed_args.output,
                exclude_source=parsed_args.exclude_source,
                max_distance=parsed_args.max_distance,
            )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during %s", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
