"""
JSON output formatter.

Serializes the decision in the camelCase response shape, optionally with
the input data it was computed from.
"""

import json
import logging
from typing import Dict, Any

from models.reports import DecisionReport, ReportFormat
from .base import BaseFormatter

logger = logging.getLogger(__name__)


class JSONFormatter(BaseFormatter):
    """
    Formatter that outputs the decision as JSON.

    Supports:
    - Pretty printing (configurable indent)
    - Decision only (default) or decision plus inputs
    - Decimals and timestamps as strings (pydantic JSON mode)
    """

    def get_file_format(self) -> ReportFormat:
        """Return JSON file format."""
        return ReportFormat.JSON

    def get_content_type(self) -> str:
        """Return JSON MIME type."""
        return "application/json"

    def get_file_extension(self) -> str:
        """Return json extension."""
        return "json"

    def format(
        self,
        report: DecisionReport,
        template_config: Dict[str, Any]
    ) -> bytes:
        """
        Format a decision report as JSON.

        Args:
            report: The evaluation to render
            template_config: Configuration options:
                - pretty_print (bool): Enable indented output (default: True)
                - indent (int): Indentation level (default: 2)
                - include_inputs (bool): Add template and request data (default: False)

        Returns:
            JSON-encoded bytes

        Raises:
            ValueError: If serialization fails
        """
        logger.info(
            f"Formatting decision for clause {report.decision.clause_id or '-'} as JSON"
        )

        pretty_print = template_config.get('pretty_print', True)
        indent = template_config.get('indent', 2) if pretty_print else None

        output: Dict[str, Any] = report.decision.to_response()

        if template_config.get('include_inputs', False):
            output = {
                'template': report.parameters.model_dump(mode='json', by_alias=True),
                'request': report.request.model_dump(
                    mode='json', by_alias=True, exclude_none=True
                ),
                'response': output,
                'generatedAt': report.generated_at.isoformat(),
            }

        try:
            json_str = json.dumps(
                output,
                indent=indent,
                ensure_ascii=False
            )
            return json_str.encode('utf-8')
        except (TypeError, ValueError) as e:
            logger.error(f"JSON serialization failed: {e}")
            raise ValueError(f"Failed to serialize decision to JSON: {e}")

