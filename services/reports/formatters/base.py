"""
Base formatter interface for decision report output.

Defines the abstract interface that all output formatters must implement.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Any

from models.reports import DecisionReport, ReportFormat

logger = logging.getLogger(__name__)


class BaseFormatter(ABC):
    """
    Abstract base class for decision report formatters.

    Each output format (JSON, markdown, PDF) has a concrete implementation
    that transforms a DecisionReport into the appropriate output bytes.
    """

    @abstractmethod
    def get_file_format(self) -> ReportFormat:
        """
        Return the file format this formatter produces.

        Returns:
            ReportFormat enum value
        """
        pass

    @abstractmethod
    def get_content_type(self) -> str:
        """
        Return the MIME content type for the output.

        Returns:
            MIME type string (e.g., 'application/json')
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """
        Return the file extension for the output.

        Returns:
            File extension without dot (e.g., 'json')
        """
        pass

    @abstractmethod
    def format(
        self,
        report: DecisionReport,
        template_config: Dict[str, Any]
    ) -> bytes:
        """
        Format a decision report into output bytes.

        Args:
            report: The evaluation to render
            template_config: Rendering options (currency_symbol, title, ...)

        Returns:
            Formatted output as bytes

        Raises:
            ValueError: If the report cannot be formatted
        """
        pass

    def get_filename(
        self,
        base_name: str,
        include_extension: bool = True
    ) -> str:
        """
        Generate a filename for the output.

        Args:
            base_name: Base name for the file (without extension)
            include_extension: Whether to include the file extension

        Returns:
            Filename string
        """
        if include_extension:
            return f"{base_name}.{self.get_file_extension()}"
        return base_name
