"""
PDF output formatter using WeasyPrint and Jinja2 templates.

Renders the HTML decision report and converts it to PDF.
"""

import logging
from typing import Dict, Any

from weasyprint import HTML, CSS

from models.reports import DecisionReport, ReportFormat
from .base import BaseFormatter
from .markdown_formatter import TEMPLATES_DIR, build_environment, build_report_context

logger = logging.getLogger(__name__)


class PDFFormatter(BaseFormatter):
    """
    Formatter that outputs the decision report as PDF using WeasyPrint.

    Supports:
    - Jinja2 HTML template
    - CSS styling (A4, 2cm margins)
    - Custom header/footer text
    """

    TEMPLATE_NAME = "decision_report.html"

    def __init__(self):
        self._env = build_environment()

    def get_file_format(self) -> ReportFormat:
        """Return PDF file format."""
        return ReportFormat.PDF

    def get_content_type(self) -> str:
        """Return PDF MIME type."""
        return "application/pdf"

    def get_file_extension(self) -> str:
        """Return pdf extension."""
        return "pdf"

    def render_html(self, report: DecisionReport, template_config: Dict[str, Any]) -> str:
        """Render the HTML that is converted to PDF."""
        context = build_report_context(report, template_config)
        context['footer_text'] = template_config.get(
            'footer_text', 'Generated by the late delivery penalty evaluator'
        )
        return self._env.get_template(self.TEMPLATE_NAME).render(**context)

    def format(
        self,
        report: DecisionReport,
        template_config: Dict[str, Any]
    ) -> bytes:
        """
        Format a decision report as PDF.

        Args:
            report: The evaluation to render
            template_config: Configuration options:
                - title (str): Report heading
                - currency_symbol (str): Symbol for amounts
                - footer_text (str): Custom footer text

        Returns:
            PDF file as bytes

        Raises:
            ValueError: If formatting fails
        """
        logger.info(
            f"Formatting decision for clause {report.decision.clause_id or '-'} as PDF"
        )

        try:
            html_content = self.render_html(report, template_config)

            stylesheets = []
            css_path = TEMPLATES_DIR / "styles.css"
            if css_path.exists():
                stylesheets.append(CSS(filename=str(css_path)))

            html = HTML(string=html_content, base_url=str(TEMPLATES_DIR))
            pdf_bytes = html.write_pdf(stylesheets=stylesheets)

            logger.info(f"Generated PDF: {len(pdf_bytes)} bytes")
            return pdf_bytes

        except Exception as e:
            logger.error(f"PDF formatting failed: {e}")
            raise ValueError(f"Failed to format decision as PDF: {e}")
