#!/usr/bin/env python3
"""
Evaluate the built-in demonstration scenarios and print a summary table.

Usage:
    python -m scripts.run_scenarios [--csv output/scenarios.csv]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from models.clause import PenaltyClauseError
from services.penalty import DEMO_SCENARIOS, run_scenarios
from scripts.common import add_verbose_flag, configure


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run-scenarios",
        description="Evaluate the demonstration scenarios",
    )
    parser.add_argument("--csv", default=None, help="Also write the table as CSV")
    add_verbose_flag(parser)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure(args.verbose)

    print(f"Testing with Different Values ({len(DEMO_SCENARIOS)} scenarios)...\n")

    try:
        results = run_scenarios()
    except PenaltyClauseError as e:
        print(f"Error in test scenarios: {e}", file=sys.stderr)
        return 1

    print(results.to_string(index=False))

    if args.csv:
        csv_path = Path(args.csv)
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        results.to_csv(csv_path, index=False)
        print(f"\nWrote {len(results)} rows to {csv_path}")

    print("\nAll test scenarios completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
