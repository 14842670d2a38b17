"""
Template and request data file loading.

Data files live in the configured data directory:
- template-*.json: clause parameters (TemplateModel shape)
- request-*.json: request facts (goodsValue plus a delay fact)
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from models.clause import ClauseParameters, EvaluationRequest, PenaltyClauseError

logger = logging.getLogger(__name__)

TEMPLATE_PREFIX = "template-"
REQUEST_PREFIX = "request-"

PathLike = Union[str, Path]


class DataFileError(PenaltyClauseError):
    """Raised when a data file is missing or is not valid JSON."""

    def __init__(self, path: PathLike, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Error loading JSON file '{self.path}': {reason}")


@dataclass
class DataFileEntry:
    """A data file found in the data directory, with its parsed content."""
    name: str
    path: Path
    content: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


@dataclass
class DataFileListing:
    """Template and request files found in a data directory."""
    data_dir: Path
    templates: List[DataFileEntry] = field(default_factory=list)
    requests: List[DataFileEntry] = field(default_factory=list)


def load_json_file(path: PathLike) -> Any:
    """
    Read and decode a JSON file.

    Raises:
        DataFileError: If the file cannot be read or decoded
    """
    file_path = Path(path)
    try:
        with file_path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise DataFileError(path, "file not found")
    except json.JSONDecodeError as e:
        raise DataFileError(path, f"invalid JSON ({e})")
    except OSError as e:
        raise DataFileError(path, str(e))


def load_clause_parameters(path: PathLike) -> ClauseParameters:
    """Load and validate clause parameters from a template data file."""
    return ClauseParameters.from_payload(load_json_file(path), source=str(path))


def load_request(path: PathLike) -> EvaluationRequest:
    """Load and validate an evaluation request from a request data file."""
    return EvaluationRequest.from_payload(load_json_file(path), source=str(path))


def load_inputs(
    template_path: PathLike,
    request_path: PathLike,
) -> Tuple[Dict[str, Any], Dict[str, Any], ClauseParameters, EvaluationRequest]:
    """
    Load both data files, returning raw data and validated models.

    Raw data is returned alongside so callers can echo the input.

    Raises:
        DataFileError: If either file cannot be read
        ValidationError: If either file violates the data model
    """
    template_data = load_json_file(template_path)
    request_data = load_json_file(request_path)
    params = ClauseParameters.from_payload(template_data, source=str(template_path))
    request = EvaluationRequest.from_payload(request_data, source=str(request_path))
    return template_data, request_data, params, request


def _collect(data_dir: Path, prefix: str) -> List[DataFileEntry]:
    entries = []
    for path in sorted(data_dir.glob(f"{prefix}*.json")):
        entry = DataFileEntry(name=path.name, path=path)
        try:
            entry.content = load_json_file(path)
        except DataFileError as e:
            logger.warning(f"Skipping data file {path.name}: {e.reason}")
            entry.error = e.reason
        entries.append(entry)
    return entries


def list_data_files(data_dir: PathLike) -> DataFileListing:
    """
    Find template and request data files.

    Unreadable files are still listed, with error set instead of content.

    Raises:
        DataFileError: If the data directory does not exist
    """
    directory = Path(data_dir)
    if not directory.is_dir():
        raise DataFileError(directory, "data directory not found")

    listing = DataFileListing(
        data_dir=directory,
        templates=_collect(directory, TEMPLATE_PREFIX),
        requests=_collect(directory, REQUEST_PREFIX),
    )
    logger.debug(
        f"Found {len(listing.templates)} template and "
        f"{len(listing.requests)} request files in {directory}"
    )
    return listing


def describe_template(content: Dict[str, Any]) -> Dict[str, str]:
    """Short human-readable summary of raw template data."""
    termination = content.get("termination") or {}
    duration = content.get("penaltyDuration") or {}
    return {
        "Penalty": f"{content.get('penaltyPercentage')}%",
        "Termination": f"{termination.get('amount')} {termination.get('unit')}",
        "Force Majeure": str(content.get("forceMajeure")),
        "Penalty Duration": f"{duration.get('amount')} {duration.get('unit')}",
        "Cap": f"{content.get('capPercentage')}%",
    }


def describe_request(content: Dict[str, Any]) -> Dict[str, str]:
    """Short human-readable summary of raw request data."""
    summary = {"Goods Value": f"${content.get('goodsValue')}"}
    delay = content.get("delay")
    if isinstance(delay, dict):
        summary["Delay"] = f"{delay.get('amount')} {delay.get('unit')}"
    if content.get("agreedDelivery"):
        summary["Agreed Delivery"] = str(content["agreedDelivery"])
        summary["Delivered At"] = str(content.get("deliveredAt") or "not delivered")
    return summary
