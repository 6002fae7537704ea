"""Centralized logging configuration for RangeLink."""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Configure logging for the RangeLink CLI.

    Args:
        level: Logging level (default INFO)
        log_file: Optional path to log file (default ~/.rangelink/rangelink.log)
        format_string: Optional custom format string
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    if log_file is None:
        from .api.config.get_home_dir import get_home_dir

        log_file = get_home_dir("rangelink.log")

    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Only warnings and above reach the terminal; the file gets everything at `level`.
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(max(level, logging.WARNING))

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[
            logging.FileHandler(log_file),
            stream_handler,
        ],
        force=True,
    )
