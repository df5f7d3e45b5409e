"""Single-file inspection: metadata, hashing, MIME type, encodings."""

from __future__ import annotations

import base64
import datetime
import hashlib
import mimetypes
import os
from typing import IO

from .exceptions import (
    InvalidArgumentError,
    NotAFileError,
    PathNotFoundError,
    UnreadableError,
)
from .mime import mime_type_for_extension

_HASH_CHUNK_SIZE = 65536

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _format_time(ts: float) -> str:
    return datetime.datetime.fromtimestamp(ts).strftime(_TIME_FORMAT)


class FileInfo:
    """A handle on an existing regular file.

    The handle stores only the path; size and times are read from disk
    on every access, so they reflect the file's current state.

    Raises:
        PathNotFoundError: *path* does not exist.
        NotAFileError: *path* exists but is not a regular file.
    """

    def __init__(self, path: str | os.PathLike):
        path = os.fspath(path)
        if not os.path.exists(path):
            raise PathNotFoundError(f"File not found at path: {path}")
        if not os.path.isfile(path):
            raise NotAFileError(f"The path provided is not a valid file: {path}")
        self._path = path

    def __repr__(self) -> str:
        return f"FileInfo({self._path!r})"

    def __fspath__(self) -> str:
        return self._path

    def __eq__(self, other) -> bool:
        if not isinstance(other, FileInfo):
            return NotImplemented
        return self.real_path == other.real_path

    def __hash__(self) -> int:
        return hash(self.real_path)

    # -- path properties ----------------------------------------------------

    @property
    def path(self) -> str:
        """The path as given to the constructor."""
        return self._path

    @property
    def real_path(self) -> str:
        """Absolute path with symlinks resolved."""
        return os.path.realpath(self._path)

    @property
    def name(self) -> str:
        return os.path.basename(self._path)

    @property
    def extension(self) -> str:
        """Extension without the leading dot (``""`` when there is none)."""
        return os.path.splitext(self._path)[1].lstrip(".")

    # -- stat properties ----------------------------------------------------

    def _stat(self) -> os.stat_result:
        try:
            return os.stat(self._path)
        except FileNotFoundError as exc:
            raise PathNotFoundError(f"File not found at path: {self._path}") from exc

    @property
    def size(self) -> int:
        return self._stat().st_size

    @property
    def mtime(self) -> float:
        return self._stat().st_mtime

    # -- content ------------------------------------------------------------

    def open(self, mode: str = "r") -> IO:
        """Open the file; the caller owns (and must close) the returned stream.

        Raises:
            InvalidArgumentError: *mode* is not a valid ``open()`` mode.
            UnreadableError: the file cannot be opened.
        """
        try:
            return open(self._path, mode)
        except ValueError as exc:
            raise InvalidArgumentError(f"Invalid file mode: {mode!r}") from exc
        except OSError as exc:
            raise UnreadableError(f"Cannot open {self._path}: {exc}") from exc

    def to_binary(self) -> bytes:
        try:
            with open(self._path, "rb") as f:
                return f.read()
        except OSError as exc:
            raise UnreadableError(f"Cannot read {self._path}: {exc}") from exc

    def to_base64(self) -> str:
        return base64.b64encode(self.to_binary()).decode("ascii")

    def to_data_url(self) -> str:
        mime = self.mime_type() or "application/octet-stream"
        return f"data:{mime};base64,{self.to_base64()}"

    def mime_type(self) -> str | None:
        """Return the MIME type inferred from the extension, or ``None``."""
        if self.extension:
            mime = mime_type_for_extension(self.extension)
            if mime:
                return mime
        mime, _ = mimetypes.guess_type(self._path)
        return mime

    def checksum(self, algorithm: str = "sha256") -> str:
        """Hex digest of the file content, streamed in 64 KiB chunks."""
        try:
            h = hashlib.new(algorithm)
        except ValueError as exc:
            raise InvalidArgumentError(f"Unknown hash algorithm: {algorithm}") from exc
        try:
            with open(self._path, "rb") as f:
                while True:
                    chunk = f.read(_HASH_CHUNK_SIZE)
                    if not chunk:
                        break
                    h.update(chunk)
        except OSError as exc:
            raise UnreadableError(f"Cannot read {self._path}: {exc}") from exc
        return h.hexdigest()

    def compare_with(self, other: FileInfo) -> bool:
        """``True`` if *other* has byte-identical content (SHA-256)."""
        return self.checksum() == other.checksum()

    def metadata(self) -> dict:
        st = self._stat()
        return {
            "path": self.real_path,
            "size": st.st_size,
            "size_in_kb": round(st.st_size / 1024, 2),
            "size_in_mb": round(st.st_size / 1024 / 1024, 2),
            "mime_type": self.mime_type(),
            "extension": self.extension,
            "basename": self.name,
            "last_modified": _format_time(st.st_mtime),
            "creation_date": _format_time(st.st_ctime),
        }

    def delete(self) -> None:
        """Remove the file from disk."""
        try:
            os.unlink(self._path)
        except FileNotFoundError as exc:
            raise PathNotFoundError(f"File not found at path: {self._path}") from exc
