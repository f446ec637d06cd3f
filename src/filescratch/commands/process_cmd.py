"""Process a file: echo it with the whole-file reader, then with the line stream reader."""

from __future__ import annotations

import logging
import sys
from argparse import Namespace

from filescratch.readers import Failure, describe_error, read_all, read_lines

logger = logging.getLogger(__name__)


def _echo(text: str) -> None:
    print(text)


def _report_failure(path: str, failure: Failure) -> int:
    print(f"Error reading file '{path}': {describe_error(failure)}", file=sys.stderr)
    return 1


def run(args: Namespace) -> int:
    """Run both read strategies on args.path. Returns the exit code (0 ok, 1 read error)."""
    path = args.path

    result = read_all(path, _echo)
    if isinstance(result, Failure):
        return _report_failure(path, result)
    print("Finished read_all")

    result = read_lines(path, _echo)
    if isinstance(result, Failure):
        return _report_failure(path, result)
    print("Finished read_line_by_line")

    logger.debug("Processed %s: %d line(s)", path, len(result.payload))
    return 0
