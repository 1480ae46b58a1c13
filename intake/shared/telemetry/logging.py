"""Logging configuration for the intake service."""

import logging
import sys

from intake.core.config import get_settings


def setup_logging() -> None:
    """Configure process-wide logging once.

    DEBUG when settings.debug is True (catalog leniency and dropped checkout
    messages are only visible at that level), otherwise INFO. Output to stdout.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
