"""Split a file into fixed-size part files, and join them back.

Parts are named ``<name>.part<N>`` with N counting up from 0 and are
written next to the source unless another directory is given.  Each
part holds exactly ``chunk_size`` bytes except possibly the last one;
concatenating the parts in index order reproduces the source.
"""

from __future__ import annotations

import logging
import os
import shutil
from typing import Iterable

from .exceptions import (
    FsKitError,
    InvalidArgumentError,
    NotADirError,
    PathNotFoundError,
    UnreadableError,
    WriteError,
)
from .fileinfo import FileInfo

logger = logging.getLogger(__name__)

# Parts are streamed in blocks of this size so a large chunk_size does
# not require holding a whole chunk in memory.
_BLOCK_SIZE = 65536

KB = 1024
MB = 1024 * 1024


def part_name(name: str, index: int) -> str:
    """Return the file name of part *index* of *name*."""
    return f"{name}.part{index}"


def _read(src, size: int, path: str) -> bytes:
    try:
        return src.read(size)
    except OSError as exc:
        raise UnreadableError(f"Cannot read {path}: {exc}") from exc


class FileSplitter:
    """Split one file into ``.partN`` files.

    Args:
        source: The file to split (a path or a :class:`FileInfo`).
        directory: Where parts are written; defaults to the source's
            own directory.

    Raises:
        PathNotFoundError: *source* or *directory* does not exist.
        NotAFileError: *source* is not a regular file.
        NotADirError: *directory* is not a directory.
    """

    def __init__(self, source: FileInfo | str | os.PathLike,
                 directory: str | os.PathLike | None = None):
        self.source = source if isinstance(source, FileInfo) else FileInfo(source)
        if directory is None:
            directory = os.path.dirname(self.source.real_path)
        else:
            directory = os.fspath(directory)
            if not os.path.exists(directory):
                raise PathNotFoundError(f"Directory not found: {directory}")
            if not os.path.isdir(directory):
                raise NotADirError(f"The path provided is not a valid directory: {directory}")
        self.directory = directory.rstrip(os.sep) or directory

    def __repr__(self) -> str:
        return f"FileSplitter({self.source.path!r}, {self.directory!r})"

    def split_mb(self, mb_size: int) -> list[FileInfo]:
        return self.split(mb_size * MB)

    def split_kb(self, kb_size: int) -> list[FileInfo]:
        return self.split(kb_size * KB)

    def split(self, chunk_size: int) -> list[FileInfo]:
        """Write the source out as parts of *chunk_size* bytes.

        Returns the parts in index order.  A failure leaves any parts
        already written on disk.

        Raises:
            InvalidArgumentError: *chunk_size* is not positive.
            UnreadableError: the source cannot be opened or read.
            WriteError: a part file cannot be written.
        """
        if chunk_size <= 0:
            raise InvalidArgumentError(f"Chunk size must be positive, got {chunk_size}")

        src_path = self.source.real_path
        name = os.path.basename(src_path)
        try:
            src = open(src_path, "rb")
        except OSError as exc:
            raise UnreadableError(f"File is not readable: {src_path}") from exc

        parts: list[FileInfo] = []
        with src:
            index = 0
            while True:
                block = _read(src, min(chunk_size, _BLOCK_SIZE), src_path)
                if not block:
                    break
                part_path = os.path.join(self.directory, part_name(name, index))
                written = self._write_part(src, src_path, part_path, block, chunk_size)
                logger.info("Wrote %s (%d bytes)", part_path, written)
                parts.append(FileInfo(part_path))
                index += 1
        return parts

    @staticmethod
    def _write_part(src, src_path: str, part_path: str, first: bytes, chunk_size: int) -> int:
        try:
            with open(part_path, "wb") as out:
                out.write(first)
                remaining = chunk_size - len(first)
                while remaining > 0:
                    block = _read(src, min(remaining, _BLOCK_SIZE), src_path)
                    if not block:
                        break
                    out.write(block)
                    remaining -= len(block)
        except FsKitError:
            raise
        except OSError as exc:
            raise WriteError(f"Cannot write part {part_path}: {exc}") from exc
        return chunk_size - remaining


def join_parts(parts: Iterable[FileInfo | str | os.PathLike],
               destination: str | os.PathLike) -> FileInfo:
    """Concatenate *parts* in the order given into *destination*.

    *destination* is created or truncated.  Every part is checked to
    exist before anything is written.
    """
    infos = [p if isinstance(p, FileInfo) else FileInfo(p) for p in parts]
    if not infos:
        raise InvalidArgumentError("No parts to join")
    destination = os.fspath(destination)
    try:
        out = open(destination, "wb")
    except OSError as exc:
        raise WriteError(f"Cannot write {destination}: {exc}") from exc
    with out:
        for info in infos:
            with info.open("rb") as f:
                try:
                    shutil.copyfileobj(f, out, _BLOCK_SIZE)
                except OSError as exc:
                    raise WriteError(f"Cannot append {info.path} to {destination}: {exc}") from exc
            logger.debug("Appended %s to %s", info.path, destination)
    return FileInfo(destination)
