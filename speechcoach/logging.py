"""
speechcoach.logging - Centralized logging configuration.

Provides the package logger and a switch for verbose debugging output.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("speechcoach")


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the speechcoach package.

    Args:
        verbose: If True, enable DEBUG level logging; otherwise WARNING level
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
    logger.setLevel(level)
