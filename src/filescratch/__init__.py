"""filescratch: read a text file whole or line by line and hand it to a callback."""

from filescratch.readers import (
    ErrorKind,
    Failure,
    ReadResult,
    Success,
    describe_error,
    iter_lines,
    read_all,
    read_lines,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "Failure",
    "ReadResult",
    "Success",
    "__version__",
    "describe_error",
    "iter_lines",
    "read_all",
    "read_lines",
]
