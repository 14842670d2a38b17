#!/usr/bin/env python3
"""
List the template and request data files with a short summary of each.

Usage:
    python -m scripts.list_data_files [--data-dir data]
"""

import argparse
import sys
from typing import List, Optional

from services.data_files import (
    DataFileError,
    describe_request,
    describe_template,
    list_data_files,
)
from scripts.common import add_verbose_flag, configure


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="list-data-files",
        description="List available template and request data files",
    )
    parser.add_argument(
        "--data-dir", default=None,
        help="Directory holding the data files (default: PENALTY_DATA_DIR or 'data')",
    )
    add_verbose_flag(parser)
    return parser


def _print_entries(entries, describe) -> None:
    for entry in entries:
        if entry.error:
            print(f"Error reading {entry.name}: {entry.error}")
            continue
        if not isinstance(entry.content, dict):
            print(f"Error reading {entry.name}: expected a JSON object")
            continue
        print(entry.name)
        for label, value in describe(entry.content).items():
            print(f"   {label}: {value}")
        print()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = configure(args.verbose)
    data_dir = args.data_dir or config.data_dir

    print("Available Data Files\n")

    try:
        listing = list_data_files(data_dir)
    except DataFileError:
        print("Data directory not found!")
        return 1

    if not listing.templates and not listing.requests:
        print("No JSON files found in data directory!")
        return 0

    print("Template Data Files:")
    print("─" * 50)
    _print_entries(listing.templates, describe_template)

    print("Request Data Files:")
    print("─" * 50)
    _print_entries(listing.requests, describe_request)

    print("Example Commands:")
    print("─" * 50)
    print(f"trigger {data_dir}/template-basic.json {data_dir}/request-basic.json")
    print(f"generate-json {data_dir}/template-high-penalty.json {data_dir}/request-low-value.json")
    print(f"generate-report {data_dir}/template-basic.json {data_dir}/request-high-value.json --format pdf")
    print("\nFor more help: trigger --help")
    return 0


if __name__ == "__main__":
    sys.exit(main())
