"""Logging configuration."""

import logging
import os

from rich.logging import RichHandler

LOG_LEVEL_ENV = "THROTTLERATE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

_configured = False


def setup_logging(level: str | int = DEFAULT_LOG_LEVEL) -> None:
    """Configure the root logger once with a rich handler."""
    global _configured
    if not _configured:
        logging.basicConfig(
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        )
        _configured = True
    logging.getLogger().setLevel(level)


def setup_logging_from_env() -> None:
    """Configure logging from THROTTLERATE_LOG_LEVEL."""
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if level not in logging.getLevelNamesMapping():
        level = DEFAULT_LOG_LEVEL
    setup_logging(level)
