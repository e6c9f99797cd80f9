"""Logging configuration.

Records go to stderr through rich so stdout stays free for the MCP stdio
transport and for machine-readable CLI output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "writing_tools"

_configured = False


def setup_logging(level: str | int = "WARNING", force: bool = False) -> logging.Logger:
    """Attach a RichHandler to the package logger (once, unless force=True)."""
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if _configured and not force:
        return logger

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False

    _configured = True
    return logger
