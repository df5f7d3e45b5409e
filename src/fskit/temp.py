"""Temporary files with scoped ownership.

A :class:`TempFile` is removed when its ``with`` block exits (normally
or by exception) or when :meth:`TempFile.close` is called.  Nothing is
deferred to interpreter exit: whoever creates a temporary file releases
it.
"""

from __future__ import annotations

import base64
import binascii
import logging
import os
import shutil
import tempfile
import urllib.parse

from .exceptions import InvalidArgumentError, WriteError
from .fileinfo import FileInfo

logger = logging.getLogger(__name__)

_PREFIX = "tmp_"


def _decode_data_url(url: str) -> bytes:
    header, sep, payload = url.partition(",")
    if not sep:
        raise InvalidArgumentError("Unable to decode data URL: missing ','")
    if header.endswith(";base64"):
        return _decode_base64(payload)
    return urllib.parse.unquote_to_bytes(payload)


def _decode_base64(data: str) -> bytes:
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidArgumentError("Unable to decode base64 data.") from exc


class TempFile:
    """An owned temporary file on disk.

    Use the ``from_*`` constructors::

        with TempFile.from_bytes(b"payload") as tmp:
            FileSplitter(tmp.info).split_kb(1)
    """

    def __init__(self, path: str):
        self._path = path
        self._closed = False

    @classmethod
    def _create(cls, directory: str | None = None) -> TempFile:
        fd, path = tempfile.mkstemp(prefix=_PREFIX, dir=directory)
        os.close(fd)
        logger.debug("Created temporary file %s", path)
        return cls(path)

    @classmethod
    def from_bytes(cls, data: bytes, *, directory: str | None = None) -> TempFile:
        """Create a temporary file holding *data*."""
        tmp = cls._create(directory)
        try:
            with open(tmp._path, "wb") as f:
                f.write(data)
        except OSError as exc:
            tmp.close()
            raise WriteError(f"Unable to write data to temporary file: {exc}") from exc
        except BaseException:
            tmp.close()
            raise
        return tmp

    @classmethod
    def from_base64(cls, data: str, *, directory: str | None = None) -> TempFile:
        """Create a temporary file from base64 text or a ``data:`` URL."""
        if data.startswith("data:"):
            decoded = _decode_data_url(data)
        else:
            decoded = _decode_base64(data)
        return cls.from_bytes(decoded, directory=directory)

    @classmethod
    def from_stream(cls, stream, *, directory: str | None = None) -> TempFile:
        """Create a temporary file from the remaining bytes of a binary *stream*."""
        readable = getattr(stream, "readable", None)
        if not callable(getattr(stream, "read", None)) or (
            callable(readable) and not readable()
        ):
            raise InvalidArgumentError(
                f"Expected a readable binary stream, got {type(stream).__name__}"
            )
        tmp = cls._create(directory)
        try:
            with open(tmp._path, "wb") as f:
                shutil.copyfileobj(stream, f)
        except TypeError as exc:
            tmp.close()
            raise InvalidArgumentError("Stream must yield bytes") from exc
        except OSError as exc:
            tmp.close()
            raise WriteError(f"Unable to write data to temporary file: {exc}") from exc
        except BaseException:
            tmp.close()
            raise
        return tmp

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def info(self) -> FileInfo:
        """A :class:`FileInfo` for the temporary file (must not be closed)."""
        if self._closed:
            raise InvalidArgumentError(f"Temporary file already removed: {self._path}")
        return FileInfo(self._path)

    def close(self) -> None:
        """Remove the file.  Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        try:
            os.unlink(self._path)
        except FileNotFoundError:
            pass
        logger.debug("Removed temporary file %s", self._path)

    def __enter__(self) -> TempFile:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __fspath__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"TempFile({self._path!r}, {state})"
