"""Shared fixtures: isolate tests from FILESCRATCH_* variables and logger state."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FILESCRATCH_ENCODING", "FILESCRATCH_LOG_LEVEL", "FILESCRATCH_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """setup_logging binds handlers to the current sys.stderr; drop them between tests."""
    yield
    logger = logging.getLogger("filescratch")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
