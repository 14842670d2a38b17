"""
Decision report generation.

Output formatters for JSON, markdown and PDF, plus a helper that builds the
report for one evaluation.
"""

from .formatters import (
    BaseFormatter,
    JSONFormatter,
    MarkdownFormatter,
    get_formatter,
    get_formatter_by_name,
)
from .generator import build_report, write_output

__all__ = [
    'BaseFormatter',
    'JSONFormatter',
    'MarkdownFormatter',
    'get_formatter',
    'get_formatter_by_name',
    'build_report',
    'write_output',
]
