"""
Pydantic models for the late delivery and penalty clause.

This module exports the clause data model, the evaluation decision and
the report models used by the output formatters.
"""

from .clause import (
    PenaltyClauseError,
    ValidationError,
    TimeUnit,
    HOURS_PER_UNIT,
    Duration,
    ClauseDuration,
    ClauseParameters,
    EvaluationRequest,
    Decision,
)

from .reports import (
    ReportFormat,
    DecisionReport,
)

__all__ = [
    # Errors
    "PenaltyClauseError",
    "ValidationError",
    # Clause models
    "TimeUnit",
    "HOURS_PER_UNIT",
    "Duration",
    "ClauseDuration",
    "ClauseParameters",
    "EvaluationRequest",
    "Decision",
    # Report models
    "ReportFormat",
    "DecisionReport",
]
