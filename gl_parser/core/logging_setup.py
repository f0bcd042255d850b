"""Logging setup for the command-line interface."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def log_level_for(verbose: bool, quiet: bool) -> int:
    """Commands print diagnostics themselves, so logs stay at ERROR unless verbose."""
    if quiet:
        return logging.CRITICAL
    if verbose:
        return logging.DEBUG
    return logging.ERROR


def setup_logging(level: int = logging.ERROR, console: Optional[Console] = None) -> None:
    """
    Route the ``gl_parser`` loggers through a rich handler on stderr.
    """
    logger = logging.getLogger("gl_parser")
    logger.setLevel(level)
    if any(isinstance(handler, RichHandler) for handler in logger.handlers):
        return  # already configured
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
