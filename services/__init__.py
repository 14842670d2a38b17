"""
Services for late delivery penalty evaluation, data file loading and
decision report generation.
"""

from .penalty import evaluate, run_scenarios
from .data_files import (
    DataFileError,
    load_json_file,
    load_clause_parameters,
    load_request,
    load_inputs,
    list_data_files,
)

__all__ = [
    "evaluate",
    "run_scenarios",
    "DataFileError",
    "load_json_file",
    "load_clause_parameters",
    "load_request",
    "load_inputs",
    "list_data_files",
]
