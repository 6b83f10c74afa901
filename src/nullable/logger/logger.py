"""Package logger for nullable, configured from ``nullable.core.config.settings``."""

import logging
import sys

from nullable.core.config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "nullable",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Return the named logger, attaching a stdout handler on first use.

    Args:
        name: Logger name; children of ``nullable`` share its namespace
        level: Level name, case-insensitive. Defaults to ``NULLABLE_LOG_LEVEL``
        format_string: Record format. Defaults to ``NULLABLE_LOG_FORMAT``

    Returns:
        The logger. A logger that already has handlers is returned untouched.
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or settings.LOG_FORMAT

    logger = logging.getLogger(name)

    # Handlers present means an earlier call (or the host application) owns it
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


# Shared by every nullable module
logger = setup_logger()
