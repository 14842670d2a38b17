"""
Penalty Clause Configuration

Environment variables and defaults shared by the CLI scripts and the API.
Entry points call load_dotenv() before building the config.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Config:
    """Configuration for data files, output and logging."""

    # Where template-*.json and request-*.json live
    data_dir: Path = field(default_factory=lambda: Path(os.getenv("PENALTY_DATA_DIR", "data")))

    # Default directory for generated files
    output_dir: Path = field(default_factory=lambda: Path(os.getenv("PENALTY_OUTPUT_DIR", "output")))

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    # Report rendering
    currency_symbol: str = field(default_factory=lambda: os.getenv("PENALTY_CURRENCY_SYMBOL", "$"))

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        return cls()
