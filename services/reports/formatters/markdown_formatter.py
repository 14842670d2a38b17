"""
Markdown output formatter using Jinja2 templates.

Renders a human-readable decision summary: clause terms, request facts,
and the calculated penalty.
"""

import logging
from pathlib import Path
from typing import Dict, Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from models.reports import DecisionReport, ReportFormat
from utils.jinja_filters import register_filters
from .base import BaseFormatter

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


def build_environment() -> Environment:
    """Jinja2 environment over the report templates, with shared filters."""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(['html', 'xml']),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    register_filters(env)
    return env


def build_report_context(
    report: DecisionReport,
    template_config: Dict[str, Any]
) -> Dict[str, Any]:
    """Build the template context dictionary shared by markdown and PDF."""
    params = report.parameters
    request = report.request
    decision = report.decision

    return {
        'title': template_config.get('title', 'Late Delivery and Penalty Decision'),
        'currency_symbol': template_config.get('currency_symbol', '$'),
        'generated_at': report.generated_at,
        'template_source': report.template_source,
        'request_source': report.request_source,

        # Clause terms
        'clause_id': params.clause_id or '-',
        'force_majeure': params.force_majeure_active,
        'penalty_rate': params.penalty_rate_percent,
        'penalty_duration': str(params.penalty_duration),
        'cap_percent': params.cap_percent,
        'termination': str(params.termination_threshold),
        'fractional_unit': params.fractional_unit.value,

        # Request facts
        'goods_value': request.goods_value,
        'delay': str(request.delay) if request.delay is not None else None,
        'agreed_delivery': request.agreed_delivery,
        'delivered_at': request.delivered_at,

        # Decision
        'decision': decision,
        'delay_hours': decision.delay_hours,
        'delay_days': (
            decision.delay_hours / 24 if decision.delay_hours is not None else None
        ),
    }


class MarkdownFormatter(BaseFormatter):
    """Formatter that outputs the decision report as markdown."""

    TEMPLATE_NAME = "decision_report.md"

    def __init__(self):
        self._env = build_environment()

    def get_file_format(self) -> ReportFormat:
        """Return markdown file format."""
        return ReportFormat.MARKDOWN

    def get_content_type(self) -> str:
        """Return markdown MIME type."""
        return "text/markdown"

    def get_file_extension(self) -> str:
        """Return md extension."""
        return "md"

    def render(self, report: DecisionReport, template_config: Dict[str, Any]) -> str:
        """Render the report to a markdown string."""
        template = self._env.get_template(self.TEMPLATE_NAME)
        return template.render(**build_report_context(report, template_config))

    def format(
        self,
        report: DecisionReport,
        template_config: Dict[str, Any]
    ) -> bytes:
        """
        Format a decision report as markdown.

        Args:
            report: The evaluation to render
            template_config: Configuration options:
                - title (str): Report heading
                - currency_symbol (str): Symbol for amounts (default: '$')

        Returns:
            UTF-8 markdown bytes

        Raises:
            ValueError: If rendering fails
        """
        logger.info(
            f"Formatting decision for clause {report.decision.clause_id or '-'} as markdown"
        )
        try:
            return self.render(report, template_config).encode('utf-8')
        except Exception as e:
            logger.error(f"Markdown formatting failed: {e}")
            raise ValueError(f"Failed to format decision as markdown: {e}")
