#!/usr/bin/env python3
"""
Run the late delivery clause against a template and a request data file.

Prints the input data, the decision and the calculation details.

Usage:
    python -m scripts.trigger data/template-basic.json data/request-basic.json
"""

import argparse
import json
import sys
from typing import List, Optional

from models.clause import PenaltyClauseError
from services.data_files import load_inputs
from services.penalty import evaluate
from utils.jinja_filters import format_currency, format_percent
from scripts.common import add_verbose_flag, configure, data_file_epilog


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trigger",
        description="Evaluate the late delivery and penalty clause",
        epilog=data_file_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("template", help="Template data file (clause parameters)")
    parser.add_argument("request", help="Request data file (goods value and delay)")
    add_verbose_flag(parser)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = configure(args.verbose)
    currency = config.currency_symbol

    print("Running TRIGGER operation:")
    print(f"   Template data: {args.template}")
    print(f"   Request data:  {args.request}\n")

    try:
        template_data, request_data, params, request = load_inputs(
            args.template, args.request
        )
        decision = evaluate(params, request)
    except PenaltyClauseError as e:
        print(f"Error in trigger operation: {e}", file=sys.stderr)
        return 1

    print("Input Data:")
    print("=" * 50)
    print("Template Data:", json.dumps(template_data, indent=2))
    print("\nRequest Data:", json.dumps(request_data, indent=2))

    print("\nBusiness Logic Response:")
    print("=" * 50)
    print(json.dumps(decision.to_response(), indent=2))

    print("\nCalculation Details:")
    print(f"Penalty Rate: {format_percent(params.penalty_rate_percent)} per {params.penalty_duration}")
    print(f"Goods Value: {format_currency(request.goods_value, currency)}")
    print(f"Complete Periods: {decision.periods}")
    print(
        f"Applied Percentage: {format_percent(decision.applied_percent)}"
        f"{' (capped)' if decision.cap_reached else ''}"
    )
    print(f"Calculated Penalty: {format_currency(decision.penalty_amount, currency)}")
    print(f"Buyer May Terminate: {str(decision.buyer_may_terminate).lower()}")
    if decision.force_majeure_applied:
        print("Force majeure in effect: penalty and termination waived")

    print("\nTrigger operation completed successfully!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
