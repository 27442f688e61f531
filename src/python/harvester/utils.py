"""
Utility functions for harvester.

Functions:
    setup_logging: Configure logging for the command-line tool
    safe_int: Parse a captured number without raising
"""

import logging
import sys
from pathlib import Path
from typing import Any, Optional, Union


def setup_logging(
    level: Union[str, int] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    format_string: Optional[str] = None,
) -> None:
    """Set up logging configuration for the application.

    Diagnostics go to stderr so stdout stays reserved for the run summary.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file, written in addition to stderr
        format_string: Custom format string for log messages

    Example:
        >>> setup_logging('DEBUG', 'harvester.log')
        >>> setup_logging(logging.WARNING)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    if format_string is None:
        format_string = "%(levelname)s - %(message)s"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(format_string)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(file_handler)


def safe_int(value: Any) -> Optional[int]:
    """
    Convert a regex capture to int, returning None if it is not a number.

    Args:
        value: The captured text (or None for an unmatched group)

    Returns:
        The parsed integer, or None
    """
    try:
        if value is None:
            return None
        return int(value)
    except (TypeError, ValueError):
        return None
