"""
Decision report formatters package.

Provides format-specific output generators for JSON, markdown and PDF.
Each formatter transforms a DecisionReport into the appropriate output bytes.
"""

from models.reports import ReportFormat
from .base import BaseFormatter
from .json_formatter import JSONFormatter
from .markdown_formatter import MarkdownFormatter


def _get_pdf_formatter():
    """Lazy import PDF formatter; weasyprint loads native libraries on import."""
    from .pdf_formatter import PDFFormatter
    return PDFFormatter


# Registry mapping file formats to formatter factories
_FORMATTER_REGISTRY = {
    ReportFormat.JSON: JSONFormatter,
    ReportFormat.MARKDOWN: MarkdownFormatter,
    ReportFormat.PDF: _get_pdf_formatter,
}


def get_formatter(file_format: ReportFormat) -> BaseFormatter:
    """
    Factory function to get the appropriate formatter for a file format.

    Args:
        file_format: The output format desired

    Returns:
        An instance of the appropriate formatter class

    Raises:
        ValueError: If file_format is not supported

    Example:
        >>> formatter = get_formatter(ReportFormat.MARKDOWN)
        >>> md_bytes = formatter.format(report, {})
    """
    formatter_factory = _FORMATTER_REGISTRY.get(file_format)

    if formatter_factory is None:
        supported = [fmt.value for fmt in _FORMATTER_REGISTRY.keys()]
        raise ValueError(
            f"Unsupported file format: {file_format}. "
            f"Supported formats: {supported}"
        )

    # Handle lazy imports (functions that return classes)
    if callable(formatter_factory) and not isinstance(formatter_factory, type):
        formatter_class = formatter_factory()
    else:
        formatter_class = formatter_factory

    return formatter_class()


def get_formatter_by_name(format_name: str) -> BaseFormatter:
    """
    Factory function to get a formatter by format name string.

    Args:
        format_name: String name of the format (e.g., 'json', 'markdown', 'md')

    Returns:
        An instance of the appropriate formatter class

    Raises:
        ValueError: If format_name is not recognized
    """
    name = format_name.lower()
    if name == "md":
        name = ReportFormat.MARKDOWN.value
    try:
        file_format = ReportFormat(name)
    except ValueError:
        supported = [fmt.value for fmt in ReportFormat]
        raise ValueError(
            f"Unknown file format: '{format_name}'. "
            f"Supported formats: {supported}"
        )

    return get_formatter(file_format)


__all__ = [
    'BaseFormatter',
    'JSONFormatter',
    'MarkdownFormatter',
    'get_formatter',
    'get_formatter_by_name',
]
