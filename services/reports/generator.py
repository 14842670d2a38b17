"""
Decision report assembly and output writing.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from models.clause import ClauseParameters, EvaluationRequest, Decision
from models.reports import DecisionReport

logger = logging.getLogger(__name__)


def build_report(
    params: ClauseParameters,
    request: EvaluationRequest,
    decision: Decision,
    template_source: Optional[str] = None,
    request_source: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> DecisionReport:
    """Bundle one evaluation into a DecisionReport."""
    return DecisionReport(
        parameters=params,
        request=request,
        decision=decision,
        template_source=template_source,
        request_source=request_source,
        generated_at=generated_at or datetime.now(timezone.utc),
    )


def write_output(path: Union[str, Path], content: bytes) -> int:
    """
    Write output bytes, creating parent directories as needed.

    Returns:
        Size of the written file in bytes
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(content)
    size = output_path.stat().st_size
    logger.info(f"Wrote {size} bytes to {output_path}")
    return size
