"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_PACKAGE_LOGGER = "tempconv"


def configure_logging(verbose: bool) -> None:
    """Route ``tempconv.*`` log records to stderr via Rich when *verbose*.

    Without *verbose* the package logger stays at WARNING.  Calling this
    more than once never stacks handlers.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    if not verbose:
        logger.setLevel(logging.WARNING)
        return

    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
