"""
Late delivery penalty evaluation.

The evaluator is a pure function over validated clause parameters and a
request; scenarios provides the built-in demonstration set.
"""

from .evaluator import evaluate, utc_now, resolve_delay_hours, timedelta_to_hours, Clock
from .scenarios import Scenario, DEMO_SCENARIOS, run_scenarios

__all__ = [
    "evaluate",
    "utc_now",
    "resolve_delay_hours",
    "timedelta_to_hours",
    "Clock",
    "Scenario",
    "DEMO_SCENARIOS",
    "run_scenarios",
]
