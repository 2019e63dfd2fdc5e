"""Logging configuration for CLARA.

All modules log under the ``clara`` namespace via ``get_logger(__name__)``.
"""

import logging
import sys
from typing import Optional

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", format_string: Optional[str] = None) -> logging.Logger:
    """Set up the ``clara`` logger with a single console handler.

    Safe to call on every Streamlit rerun: existing handlers are replaced.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Optional custom format string

    Returns:
        The configured ``clara`` logger
    """
    logger = logging.getLogger("clara")
    logger.setLevel(LOG_LEVELS.get(str(level).upper(), logging.INFO))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    logger.addHandler(handler)

    # Suppress noisy third-party loggers
    for name in ("httpx", "httpcore", "google_genai"):
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``clara`` namespace."""
    if not name:
        return logging.getLogger("clara")
    if name == "clara" or name.startswith("clara."):
        return logging.getLogger(name)
    return logging.getLogger(f"clara.{name}")
