#!/usr/bin/env python3
"""
Generate the JSON decision for a template and a request data file.

Usage:
    python -m scripts.generate_json data/template-basic.json data/request-basic.json [output.json]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from models.clause import PenaltyClauseError
from models.reports import ReportFormat
from services.data_files import load_inputs
from services.penalty import evaluate
from services.reports import build_report, get_formatter, write_output
from scripts.common import add_verbose_flag, configure, data_file_epilog


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate-json",
        description="Generate the JSON penalty decision from template and request data",
        epilog=data_file_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("template", help="Template data file (clause parameters)")
    parser.add_argument("request", help="Request data file (goods value and delay)")
    parser.add_argument(
        "output", nargs="?", default=None,
        help="JSON output file (default: <output dir>/response.json)",
    )
    parser.add_argument(
        "--include-inputs", action="store_true",
        help="Also write the template and request data",
    )
    add_verbose_flag(parser)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = configure(args.verbose)
    output_file = Path(args.output) if args.output else config.output_dir / "response.json"

    print("Generating JSON business logic response...")
    print("_" * 50)

    try:
        print(f"Loading template data from: {args.template}")
        print(f"Loading request data from: {args.request}")
        _, _, params, request = load_inputs(args.template, args.request)

        print("Executing business logic...")
        decision = evaluate(params, request)

        report = build_report(
            params, request, decision,
            template_source=args.template, request_source=args.request,
        )
        content = get_formatter(ReportFormat.JSON).format(
            report, {"include_inputs": args.include_inputs}
        )
        size = write_output(output_file, content)
    except (PenaltyClauseError, ValueError, OSError) as e:
        print(f"Error generating JSON response: {e}", file=sys.stderr)
        return 1

    print("_" * 50)
    print("JSON Response Generation Results:")
    print(f"✓ Template data: {args.template}")
    print(f"✓ Request data: {args.request}")
    print(f"✓ JSON output: {output_file}")
    print(f"✓ File size: {size / 1024:.1f} KB")
    print(f"✓ Penalty calculated: {decision.penalty_amount} ({decision.applied_percent}%)")
    print("")
    print("JSON response generation completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
