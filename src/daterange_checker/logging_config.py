"""Logging configuration for daterange-checker."""

import logging
import sys

_configured = False

LOGGER_NAME = "daterange_checker"


def setup_logging(level: int | None = None) -> None:
    """Configure logging for the daterange-checker package.

    - Output to stderr
    - Format: HH:MM:SS LEVEL [module.name] message
    - Level defaults to CheckerConfig.log_level
    - Idempotent: safe to call multiple times
    """
    global _configured
    if _configured:
        return
    _configured = True

    if level is None:
        from daterange_checker.config import get_config

        level = get_config().log_level_value

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-5s [%(name)s] %(message)s", datefmt="%H:%M:%S")
    )

    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    root.addHandler(handler)


def reset_logging() -> None:
    """Reset logging state. For testing only."""
    global _configured
    _configured = False
    root = logging.getLogger(LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.WARNING)
