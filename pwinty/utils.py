# file: pwinty/utils.py
"""
Utility functions for the Pwinty client.
Provides logging configuration and header value helpers.
"""

import logging
import re
import sys
from typing import Optional, Union

from . import config

# Visible ASCII, space and horizontal tab
_HEADER_VALUE_RE = re.compile(r"[\t\x20-\x7e]*")


def setup_logging(
    level: Optional[Union[int, str]] = None, log_file: Optional[str] = None
) -> None:
    """
    Configure logging for console and optional file output.

    The client never calls this itself; applications opt in.

    Args:
        level: Logging level (default: config.LOG_LEVEL).
        log_file: Path of a log file to append to (default: config.LOG_FILE).
            No file handler is added when neither is set.
    """
    root = logging.getLogger()

    if root.handlers:
        return

    root.setLevel(level if level is not None else config.LOG_LEVEL)
    log_file = log_file or config.LOG_FILE

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def is_valid_header_value(value: str) -> bool:
    """
    Check whether a string can be sent verbatim as an HTTP header value.

    Args:
        value: Candidate header value.

    Returns:
        True if every character is visible ASCII, space or tab.
    """
    return isinstance(value, str) and _HEADER_VALUE_RE.fullmatch(value) is not None


def mask_secret(value: str, visible: int = 4) -> str:
    """
    Mask a credential for display, keeping only its last few characters.

    Args:
        value: Secret to mask.
        visible: Number of trailing characters left readable.

    Returns:
        Masked string, e.g. "****abcd".
    """
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
