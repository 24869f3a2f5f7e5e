"""Logging setup for the dsconv command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging"]


def configure_logging(console: Console, verbose: bool = False) -> logging.Logger:
    """Route the package's log records to a rich console.

    Only the ``dsconv`` logger is configured; the root logger is left
    alone so embedding applications keep their own handlers.

    Args:
        console: Diagnostics console (standard error).
        verbose: Emit DEBUG records instead of WARNING and above.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("dsconv")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(console=console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
