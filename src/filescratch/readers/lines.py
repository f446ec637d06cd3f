"""Line stream reader: walk a file one trimmed line at a time."""

from __future__ import annotations

import logging
import os
from contextlib import closing
from pathlib import Path
from typing import Callable, Iterator

from filescratch.config import default_encoding
from filescratch.readers.models import READ_ERRORS, ReadResult, Success, classify_os_error

logger = logging.getLogger(__name__)


def iter_lines(path: Path | str, *, encoding: str | None = None) -> Iterator[str]:
    """
    Lazily yield the lines of path with trailing whitespace stripped.

    Lines are split on "\\n" only, so a "\\r\\n" ending leaves "\\r" to the strip.
    The file is opened on the first next() and closed when the generator is
    exhausted or closed. Open and read errors are raised to the caller.
    """
    encoding = encoding or default_encoding()
    with open(path, "r", encoding=encoding, newline="\n") as f:
        for line in f:
            yield line.rstrip()


def read_lines(
    path: Path | str,
    handler: Callable[[str], object],
    *,
    encoding: str | None = None,
) -> ReadResult[list[str]]:
    """
    Stream path line by line, calling handler with each trimmed line.

    The path is stat'ed first so a missing or inaccessible file yields a
    classified Failure without opening a stream. A path that stats but cannot
    be streamed (e.g. a directory) or fails mid-stream also yields a Failure;
    lines already passed to handler stay passed. On success the trimmed lines
    are returned in file order.
    """
    logger.debug("read_lines %s", path)
    try:
        os.stat(path)
    except READ_ERRORS as e:
        failure = classify_os_error(e)
        logger.info("read_lines check failed for %s: %s", path, failure.kind.value)
        return failure

    lines: list[str] = []
    with closing(iter_lines(path, encoding=encoding)) as stream:
        while True:
            try:
                line = next(stream)
            except StopIteration:
                break
            except READ_ERRORS as e:
                failure = classify_os_error(e)
                logger.info(
                    "read_lines stream failed for %s after %d line(s): %s",
                    path,
                    len(lines),
                    failure.kind.value,
                )
                return failure
            handler(line)
            lines.append(line)
    return Success(lines)
