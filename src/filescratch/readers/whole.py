"""Whole-file reader: slurp a file's complete text in one operation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from filescratch.config import default_encoding
from filescratch.readers.models import READ_ERRORS, ReadResult, Success, classify_os_error

logger = logging.getLogger(__name__)


def read_all(
    path: Path | str,
    handler: Callable[[str], object],
    *,
    encoding: str | None = None,
) -> ReadResult[str]:
    """
    Read the full content of path as text and pass it to handler once.

    Content is returned exactly as stored (no newline translation). On failure
    the handler is not called and a classified Failure is returned.
    """
    encoding = encoding or default_encoding()
    logger.debug("read_all %s (encoding=%s)", path, encoding)
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            content = f.read()
    except READ_ERRORS as e:
        failure = classify_os_error(e)
        logger.info("read_all failed for %s: %s", path, failure.kind.value)
        return failure
    handler(content)
    return Success(content)
