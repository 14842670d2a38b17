#!/usr/bin/env python3
"""
Render the decision report as markdown, PDF or JSON.

Usage:
    python -m scripts.generate_report data/template-basic.json data/request-basic.json
    python -m scripts.generate_report data/template-basic.json data/request-basic.json out.pdf --format pdf
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
        prog="generate-report",
        description="Render the late delivery penalty decision report",
        epilog=data_file_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("template", help="Template data file (clause parameters)")
    parser.add_argument("request", help="Request data file (goods value and delay)")
    parser.add_argument(
        "output", nargs="?", default=None,
        help="Output file (default: <output dir>/decision.<ext>)",
    )
    parser.add_argument(
        "--format", "-f", dest="file_format",
        choices=[fmt.value for fmt in ReportFormat],
        default=ReportFormat.MARKDOWN.value,
        help="Output format (default: markdown)",
    )
    parser.add_argument("--title", default=None, help="Report heading")
    add_verbose_flag(parser)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = configure(args.verbose)

    print(f"Generating {args.file_format} decision report...")
    print("_" * 50)

    try:
        formatter = get_formatter(ReportFormat(args.file_format))
        output_file = (
            Path(args.output) if args.output
            else config.output_dir / formatter.get_filename("decision")
        )

        _, _, params, request = load_inputs(args.template, args.request)
        decision = evaluate(params, request)
        report = build_report(
            params, request, decision,
            template_source=args.template, request_source=args.request,
        )

        template_config = {"currency_symbol": config.currency_symbol}
        if args.title:
            template_config["title"] = args.title

        content = formatter.format(report, template_config)
        size = write_output(output_file, content)
    except (PenaltyClauseError, ValueError, OSError) as e:
        print(f"Error generating report: {e}", file=sys.stderr)
        return 1

    print("Report Generation Results:")
    print(f"✓ Template data: {args.template}")
    print(f"✓ Request data: {args.request}")
    print(f"✓ Output: {output_file}")
    print(f"✓ File size: {size / 1024:.1f} KB")
    print("")
    print("Report generation completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
