"""Exceptions for fskit.

Every error derives from :class:`FsKitError` and also from the built-in
exception a caller would naturally catch (``FileNotFoundError``,
``NotADirectoryError``, ``OSError``, ``ValueError``), so code written
against plain ``os`` semantics keeps working.
"""


class FsKitError(Exception):
    """Base class for all fskit errors."""


class PathNotFoundError(FsKitError, FileNotFoundError):
    """Raised when a path does not exist."""


class NotADirError(FsKitError, NotADirectoryError):
    """Raised when an operation expects a directory but gets something else."""


class NotAFileError(FsKitError, OSError):
    """Raised when an operation expects a regular file but gets something else."""


class UnreadableError(FsKitError, OSError):
    """Raised when a file cannot be opened or read."""


class WriteError(FsKitError, OSError):
    """Raised when writing a part, copying a file, or creating a directory fails.

    Output written before the failure is left in place.
    """


class InvalidArgumentError(FsKitError, ValueError):
    """Raised for a non-positive chunk size, an empty pattern, or a bad handle."""
