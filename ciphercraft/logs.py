"""
ciphercraft.logs
Optional console logging for applications embedding ciphercraft.
"""

import logging
from typing import Any, Mapping, Optional

from rich.console import Console
from rich.logging import RichHandler

from .errors import InvalidArgument

LOGGER_NAME = "ciphercraft"


def configure_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """
    Attach a RichHandler to the package logger at ``level``.
    Calling it again replaces the previous handler.
    """
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        raise InvalidArgument(f"unknown log level: {level!r}")

    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, RichHandler):
            logger.removeHandler(h)
    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger


def configure_logging_from_config(cfg: Mapping[str, Any], console: Optional[Console] = None) -> logging.Logger:
    """configure_logging() at the ``log_level`` of a ciphercraft.config settings dict."""
    return configure_logging(cfg.get("log_level", "WARNING"), console=console)
