"""
Setup shared by the command-line scripts.
"""

import argparse
import logging
from typing import Optional

from dotenv import load_dotenv

from config import Config


def configure(verbose: bool = False) -> Config:
    """Load .env, build the config and set up logging."""
    load_dotenv()
    config = Config.from_env()
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return config


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")


def data_file_epilog(data_dir: Optional[str] = None) -> str:
    data_dir = data_dir or "data"
    return (
        "Examples:\n"
        f"  %(prog)s {data_dir}/template-basic.json {data_dir}/request-basic.json\n"
        f"  %(prog)s {data_dir}/template-low-penalty.json {data_dir}/request-high-value.json\n"
        "\n"
        "Run list-data-files to see the available data files."
    )
