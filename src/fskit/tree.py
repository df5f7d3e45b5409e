"""Directory listing and glob search over local directory trees.

Entries are built fresh on every call.  Listing order is whatever
``os.scandir`` yields (filesystem-native) unless the explorer was
created with ``sort=True``, in which case each directory's entries are
ordered by name.

A symlink to a regular file is reported as a file (size and time of the
file it points to).  Symlinked directories and dangling links are
reported as :attr:`EntryType.OTHER` and are never descended into.
"""

from __future__ import annotations

import datetime
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from ._glob import compile_pattern
from .exceptions import NotADirError, PathNotFoundError, UnreadableError

logger = logging.getLogger(__name__)


class EntryType(str, Enum):
    """Entry type enum.

    Members: ``FILE``, ``DIRECTORY``, ``OTHER`` (symlinks, sockets, fifos).
    """
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"

    def __str__(self) -> str:          # noqa: D105
        return self.value


@dataclass
class Entry:
    """One node of a directory listing.

    Attributes:
        path: Full path (the listed directory joined with *name*).
        name: Final path component.
        type: :class:`EntryType` of the entry.
        mtime: Modification time as epoch seconds.
        size: Size in bytes; ``None`` unless *type* is ``FILE``.
        children: Child entries.  Only populated for directories listed
            recursively; empty otherwise.
    """
    path: str
    name: str
    type: EntryType
    mtime: float
    size: int | None = None
    children: list[Entry] = field(default_factory=list)

    @property
    def is_dir(self) -> bool:
        return self.type == EntryType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.type == EntryType.FILE

    @property
    def modified_time(self) -> datetime.datetime:
        return datetime.datetime.fromtimestamp(self.mtime)

    @property
    def size_in_kb(self) -> float | None:
        return round(self.size / 1024, 2) if self.size is not None else None

    @property
    def size_in_mb(self) -> float | None:
        return round(self.size / 1024 / 1024, 2) if self.size is not None else None

    def to_dict(self) -> dict:
        """Plain-dict form (recursive), suitable for ``json.dumps``."""
        return {
            "path": self.path,
            "name": self.name,
            "is_directory": self.is_dir,
            "size": self.size,
            "size_in_kb": self.size_in_kb,
            "size_in_mb": self.size_in_mb,
            "modified_time": self.modified_time.strftime("%Y-%m-%d %H:%M:%S"),
            "files": [c.to_dict() for c in self.children],
        }


def _entry_from_dirent(de: os.DirEntry) -> Entry:
    if de.is_dir(follow_symlinks=False):
        st = de.stat(follow_symlinks=False)
        kind, size = EntryType.DIRECTORY, None
    elif de.is_file():
        # Follows links: a link to a file lists as that file.
        st = de.stat()
        kind, size = EntryType.FILE, st.st_size
    else:
        st = de.stat(follow_symlinks=False)
        kind, size = EntryType.OTHER, None
    return Entry(path=de.path, name=de.name, type=kind, mtime=st.st_mtime, size=size)


def _check_directory(directory: str) -> None:
    if not os.path.exists(directory):
        raise PathNotFoundError(f"Directory not found: {directory}")
    if not os.path.isdir(directory):
        raise NotADirError(f"The path provided is not a valid directory: {directory}")


class FileExplorer:
    """List and search the contents of one directory.

    Raises:
        PathNotFoundError: *directory* does not exist.
        NotADirError: *directory* is not a directory.
    """

    def __init__(self, directory: str | os.PathLike, *, sort: bool = False):
        directory = os.fspath(directory)
        _check_directory(directory)
        # Keep a bare root ("/") intact.
        self.directory = directory.rstrip(os.sep) or directory
        self.sort = sort

    def __repr__(self) -> str:
        return f"FileExplorer({self.directory!r})"

    def _scan(self, path: str) -> list[Entry]:
        """Immediate children of *path* as entries without children."""
        try:
            with os.scandir(path) as it:
                entries = [_entry_from_dirent(de) for de in it]
        except OSError as exc:
            raise UnreadableError(f"Cannot read directory {path}: {exc}") from exc
        if self.sort:
            entries.sort(key=lambda e: e.name)
        return entries

    def _list(self, path: str, recursive: bool) -> list[Entry]:
        entries = self._scan(path)
        if recursive:
            for entry in entries:
                if entry.is_dir:
                    entry.children = self._list(entry.path, True)
        return entries

    def list_all(self, recursive: bool = False) -> list[Entry]:
        """Return the directory's entries, nesting subdirectories when *recursive*."""
        logger.debug("Listing %s (recursive=%s)", self.directory, recursive)
        return self._list(self.directory, recursive)

    def iter_tree(self) -> Iterator[Entry]:
        """Yield every entry below the directory, parents before children.

        Uses an explicit stack, so arbitrarily deep trees do not hit the
        recursion limit.  Yielded entries carry no ``children``.
        """
        stack = [iter(self._scan(self.directory))]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue
            yield entry
            if entry.is_dir:
                stack.append(iter(self._scan(entry.path)))

    def search(self, pattern: str, recursive: bool = False) -> list[Entry]:
        """Return files whose full path matches the glob *pattern*.

        The pattern is matched case-insensitively against the whole path
        string (``*`` spans separators), so ``"*.txt"`` finds text files
        at any depth when *recursive* is true.
        """
        matcher = compile_pattern(pattern)
        candidates = self.iter_tree() if recursive else self._scan(self.directory)
        return [e for e in candidates if e.is_file and matcher.matches(e.path)]

    def search_by_extension(self, extension: str, recursive: bool = False) -> list[Entry]:
        """Return files ending in ``.<extension>``."""
        return self.search(f"*.{extension}", recursive)


def list_dir(directory: str | os.PathLike, recursive: bool = False, *,
             sort: bool = False) -> list[Entry]:
    """Shorthand for ``FileExplorer(directory, sort=sort).list_all(recursive)``."""
    return FileExplorer(directory, sort=sort).list_all(recursive)


def search(directory: str | os.PathLike, pattern: str, recursive: bool = False, *,
           sort: bool = False) -> list[Entry]:
    """Shorthand for ``FileExplorer(directory, sort=sort).search(pattern, recursive)``."""
    return FileExplorer(directory, sort=sort).search(pattern, recursive)
