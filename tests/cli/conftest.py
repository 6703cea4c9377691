"""Shared fixtures for CLI execution tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host TEMPCONV_* settings from leaking into CLI runs."""
    for var in ("TEMPCONV_OUTPUT_FORMAT", "TEMPCONV_PRECISION", "TEMPCONV_VERBOSE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Undo level and handler changes the CLI makes to the ``tempconv`` logger."""
    logger = logging.getLogger("tempconv")
    level = logger.level
    handlers = list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
