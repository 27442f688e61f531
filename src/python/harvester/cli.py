"""
Command-line interface for harvester.

Usage:
    harvester /srv/downloads /srv/media [--dry] [--config harvester.yaml]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from harvester.config import get_logging_config, get_paths, load_config
from harvester.organizer import organize_library
from harvester.report import actions_to_dataframe, inventory_to_dataframe
from harvester.utils import setup_logging

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="harvester",
        description="Hardlink incoming media files into a movies/shows library.",
    )
    parser.add_argument(
        "incoming",
        nargs="?",
        type=Path,
        help="Directory holding the downloaded media files",
    )
    parser.add_argument(
        "library",
        nargs="?",
        type=Path,
        help="Library directory to keep in sync",
    )
    parser.add_argument(
        "--dry",
        action="store_true",
        help="Show what would be linked and removed without touching the library",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--inventory-csv",
        type=Path,
        help="Write the scanned inventory to this CSV file",
    )
    parser.add_argument(
        "--actions-csv",
        type=Path,
        help="Write the performed (or previewed) actions to this CSV file",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    paths_given = args.incoming is not None and args.library is not None

    try:
        config = load_config(args.config)
        default_incoming, default_library = get_paths(config)
        log_config = get_logging_config(config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"[harvester] config error: {e}", file=sys.stderr)
        if not paths_given:
            parser.print_usage(sys.stderr)
            return 2
        return 1

    incoming = args.incoming or default_incoming
    library = args.library or default_library
    if incoming is None or library is None:
        parser.print_usage(sys.stderr)
        return 2

    if args.quiet:
        log_level = "WARNING"
    elif args.verbose:
        log_level = "DEBUG"
    else:
        log_level = log_config["level"]
    setup_logging(log_level, args.log_file or log_config["file"])

    if args.dry:
        print("DRY RUN: the library will not be modified.")

    try:
        result = organize_library(incoming, library, config=config, dry_run=args.dry)
    except (OSError, ValueError) as e:
        logger.error("Harvest failed: %s", e)
        return 1

    for source, link in result.created:
        print(f"{link} <- {source}")
    print(result)

    if args.inventory_csv:
        inventory_to_dataframe(result.entries).to_csv(args.inventory_csv, index=False)
        print(f"Wrote inventory: {args.inventory_csv}")
    if args.actions_csv:
        actions_to_dataframe(result.actions).to_csv(args.actions_csv, index=False)
        print(f"Wrote actions: {args.actions_csv}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
