"""Result types for file reads (Success, Failure) and OS error classification."""

from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Classification of a file-access failure."""

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IS_A_DIRECTORY = "is_a_directory"
    NOT_A_DIRECTORY = "not_a_directory"
    OUT_OF_MEMORY = "out_of_memory"
    OTHER = "other"


_ERRNO_KINDS: dict[int, ErrorKind] = {
    errno.ENOENT: ErrorKind.NOT_FOUND,
    errno.EACCES: ErrorKind.PERMISSION_DENIED,
    errno.EPERM: ErrorKind.PERMISSION_DENIED,
    errno.EISDIR: ErrorKind.IS_A_DIRECTORY,
    errno.ENOTDIR: ErrorKind.NOT_A_DIRECTORY,
    errno.ENOMEM: ErrorKind.OUT_OF_MEMORY,
}

_PHRASES: dict[ErrorKind, str] = {
    ErrorKind.NOT_FOUND: "file not found",
    ErrorKind.PERMISSION_DENIED: "permission denied",
    ErrorKind.IS_A_DIRECTORY: "is a directory",
    ErrorKind.NOT_A_DIRECTORY: "not a directory",
    ErrorKind.OUT_OF_MEMORY: "not enough memory",
}


@dataclass(frozen=True)
class Success(Generic[T]):
    """A read that completed; payload is the text (read_all) or list of lines (read_lines)."""

    payload: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A read that failed. Carries no payload, only the classified error."""

    kind: ErrorKind
    code: Optional[int] = None  # raw errno, when the failure came from the OS
    reason: Optional[str] = None  # extra detail for OTHER (e.g. decode errors)

    @property
    def ok(self) -> bool:
        return False


ReadResult = Union[Success[T], Failure]

# Exceptions a read primitive can raise for a bad path, file or encoding.
# Anything else (including errors from a handler) propagates to the caller.
READ_ERRORS = (OSError, MemoryError, ValueError, LookupError)


def classify_os_error(exc: BaseException) -> Failure:
    """
    Translate an exception raised by a filesystem primitive into a Failure.

    OSError is mapped by errno; MemoryError becomes OUT_OF_MEMORY. A
    UnicodeDecodeError becomes OTHER with the offending encoding as reason;
    any other ValueError (e.g. a NUL byte in the path) or a LookupError
    (unknown encoding) becomes OTHER with the exception text as reason.
    """
    if isinstance(exc, MemoryError):
        return Failure(ErrorKind.OUT_OF_MEMORY)
    if isinstance(exc, UnicodeDecodeError):
        return Failure(ErrorKind.OTHER, reason=f"invalid {exc.encoding} data")
    if isinstance(exc, (ValueError, LookupError)):
        return Failure(ErrorKind.OTHER, reason=str(exc))
    code = getattr(exc, "errno", None)
    kind = _ERRNO_KINDS.get(code, ErrorKind.OTHER) if code is not None else ErrorKind.OTHER
    return Failure(kind, code=code)


def describe_error(failure: Failure) -> str:
    """Short human phrase for a Failure, as printed by the CLI."""
    phrase = _PHRASES.get(failure.kind)
    if phrase is not None:
        return phrase
    if failure.reason:
        return failure.reason
    if failure.code is not None:
        return errno.errorcode.get(failure.code, f"error {failure.code}").lower()
    return "unknown error"
