"""Logging setup for TextForge."""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

from textforge.config import get_settings

LOGGER_NAME = "textforge"


def setup_logging(
    level: Union[int, str, None] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Configure the package logger to write through Rich.

    Calling this again replaces the handler installed by a previous call.

    Args:
        level: Log level name or number (default: settings.log_level)
        console: Console to log to (default: a stderr console)

    Returns:
        The configured package logger
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
