"""
Pydantic models for decision report output.

A DecisionReport bundles the clause parameters, the request and the decision
so formatters can render a self-contained summary.
"""

from enum import Enum
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .clause import ClauseParameters, EvaluationRequest, Decision


class ReportFormat(str, Enum):
    """Supported output file formats."""
    JSON = "json"
    MARKDOWN = "markdown"
    PDF = "pdf"


class DecisionReport(BaseModel):
    """Everything needed to render one evaluation."""

    parameters: ClauseParameters
    request: EvaluationRequest
    decision: Decision
    template_source: Optional[str] = Field(
        None, description="Template data file the parameters were loaded from"
    )
    request_source: Optional[str] = Field(
        None, description="Request data file the request was loaded from"
    )
    generated_at: datetime = Field(..., description="When the report was rendered")

    model_config = ConfigDict(frozen=True)
