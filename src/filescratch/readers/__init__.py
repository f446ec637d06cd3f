"""File readers (whole-file slurp, line stream) and their result models."""

from filescratch.readers.lines import iter_lines, read_lines
from filescratch.readers.models import (
    ErrorKind,
    Failure,
    ReadResult,
    Success,
    classify_os_error,
    describe_error,
)
from filescratch.readers.whole import read_all

__all__ = [
    "ErrorKind",
    "Failure",
    "ReadResult",
    "Success",
    "classify_os_error",
    "describe_error",
    "iter_lines",
    "read_all",
    "read_lines",
]
