"""Exception hierarchy for msgbin.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from MsgbinError for easy catching of any msgbin-specific error.
"""

from __future__ import annotations

from pathlib import Path


class MsgbinError(Exception):
    """Base exception for all msgbin errors."""

    pass


class UsageError(MsgbinError):
    """Raised when the command line cannot be acted upon.

    Examples:
        - Unknown verb
        - Wrong number of arguments
        - Input path that is neither a file nor a directory
    """

    pass


class MalformedInputError(MsgbinError):
    """Raised when a binary buffer or text document is structurally invalid.

    Examples:
        - Buffer shorter than the offset table it declares
        - Offset pointing outside the buffer
        - String span with no room for its terminator
        - Document Count not matching its entries
        - Duplicate or out-of-range entry index
    """

    pass


class InvalidTableError(MsgbinError):
    """Raised when an in-memory table cannot be encoded.

    Examples:
        - Entry indices not a dense 0-based sequence
        - Count not matching the number of entries
        - Text that cannot be represented as UTF-16LE
    """

    pass


class FileProcessingError(MsgbinError):
    """Raised when a single file in a batch fails.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, action: str, path: Path, cause: BaseException) -> None:
        self.action = action
        self.path = path
        self.cause = cause
        super().__init__(f"Error {action} {path}: {cause}")
