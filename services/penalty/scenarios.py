"""
Built-in demonstration scenarios.

Each scenario pairs template data with request data in the raw JSON shape
and is evaluated through the same validating constructors the CLI uses.
Results are tabulated in a pandas DataFrame.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
import logging

import pandas as pd

from models.clause import ClauseParameters, EvaluationRequest
from .evaluator import evaluate, Clock

logger = logging.getLogger(__name__)

TEMPLATE_CLASS = "io.clause.latedeliveryandpenalty@0.1.0.TemplateModel"
DURATION_CLASS = "org.accordproject.time@0.3.0.Duration"

SCENARIO_COLUMNS = [
    "scenario",
    "force_majeure",
    "penalty_percent",
    "cap_percent",
    "goods_value",
    "delay",
    "periods",
    "applied_percent",
    "penalty",
    "buyer_may_terminate",
]


@dataclass(frozen=True)
class Scenario:
    """A named template/request pair."""
    name: str
    template_data: Dict[str, Any]
    request_data: Dict[str, Any] = field(default_factory=dict)


def _duration(amount: int, unit: str) -> Dict[str, Any]:
    return {"$class": DURATION_CLASS, "amount": amount, "unit": unit}


DEMO_SCENARIOS: List[Scenario] = [
    Scenario(
        name="Low Value Goods",
        template_data={
            "$class": TEMPLATE_CLASS,
            "forceMajeure": False,
            "penaltyDuration": _duration(1, "days"),
            "penaltyPercentage": 5.0,
            "capPercentage": 25,
            "termination": _duration(30, "days"),
            "fractionalPart": "days",
            "clauseId": "test-1",
            "$identifier": "test-1",
        },
        request_data={"goodsValue": 50, "delay": {"amount": 3, "unit": "days"}},
    ),
    Scenario(
        name="High Value Goods",
        template_data={
            "$class": TEMPLATE_CLASS,
            "forceMajeure": True,
            "penaltyDuration": _duration(3, "days"),
            "penaltyPercentage": 15.0,
            "capPercentage": 50,
            "termination": _duration(7, "days"),
            "fractionalPart": "hours",
            "clauseId": "test-2",
            "$identifier": "test-2",
        },
        request_data={"goodsValue": 1000, "delay": {"amount": 10, "unit": "days"}},
    ),
    Scenario(
        name="Zero Value Test",
        template_data={
            "$class": TEMPLATE_CLASS,
            "forceMajeure": False,
            "penaltyDuration": _duration(2, "weeks"),
            "penaltyPercentage": 20.0,
            "capPercentage": 75,
            "termination": _duration(1, "months"),
            "fractionalPart": "weeks",
            "clauseId": "test-3",
            "$identifier": "test-3",
        },
        request_data={"goodsValue": 0, "delay": {"amount": 12, "unit": "weeks"}},
    ),
]


def run_scenarios(
    scenarios: Optional[Sequence[Scenario]] = None,
    clock: Optional[Clock] = None,
) -> pd.DataFrame:
    """
    Evaluate scenarios and tabulate the decisions.

    Args:
        scenarios: Scenarios to run (defaults to DEMO_SCENARIOS)
        clock: Optional clock passed through to the evaluator

    Returns:
        DataFrame with one row per scenario, columns SCENARIO_COLUMNS

    Raises:
        ValidationError: If a scenario's data is invalid
    """
    scenarios = DEMO_SCENARIOS if scenarios is None else scenarios
    rows = []

    for scenario in scenarios:
        params = ClauseParameters.from_payload(
            scenario.template_data, source=f"scenario '{scenario.name}' template"
        )
        request = EvaluationRequest.from_payload(
            scenario.request_data, source=f"scenario '{scenario.name}' request"
        )
        decision = evaluate(params, request, clock=clock)

        delay = str(request.delay) if request.delay is not None else (
            f"{decision.delay_hours} hours" if decision.delay_hours is not None else "-"
        )
        rows.append({
            "scenario": scenario.name,
            "force_majeure": params.force_majeure_active,
            "penalty_percent": float(params.penalty_rate_percent),
            "cap_percent": float(params.cap_percent),
            "goods_value": float(request.goods_value),
            "delay": delay,
            "periods": decision.periods,
            "applied_percent": float(decision.applied_percent),
            "penalty": float(decision.penalty_amount),
            "buyer_may_terminate": decision.buyer_may_terminate,
        })

    logger.info(f"Evaluated {len(rows)} scenarios")
    return pd.DataFrame(rows, columns=SCENARIO_COLUMNS)
