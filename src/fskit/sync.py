"""One-way directory mirroring.

:class:`FileSynchronizer` copies files from a source tree into a target
tree when the target copy is missing or older (strictly smaller
modification time).  Nothing in the target is ever deleted, and file
content is never compared.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .exceptions import InvalidArgumentError, NotADirError, PathNotFoundError, WriteError
from .tree import Entry, FileExplorer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncEvent:
    """A file visited during :meth:`FileSynchronizer.sync`.

    One event is emitted per source file whether or not it was copied.

    Attributes:
        source: Path of the source file.
        target: Path the file maps to in the target tree.
        copied: ``True`` if bytes were written, ``False`` if the target
            was already current.
        action: Always ``"copy"``.
    """
    source: str
    target: str
    copied: bool = True
    action: str = "copy"

    def to_dict(self) -> dict:
        return {"action": self.action, "source": self.source, "target": self.target}


SyncLog = Callable[[SyncEvent], None]


def _check_directory(path: str) -> None:
    if not os.path.exists(path):
        raise PathNotFoundError(f"Directory not found: {path}")
    if not os.path.isdir(path):
        raise NotADirError(f"Both source and target must be valid directories: {path}")


def needs_copy(source: str, target: str) -> bool:
    """``True`` if *target* is missing or older than *source*."""
    try:
        target_ns = os.stat(target).st_mtime_ns
    except FileNotFoundError:
        return True
    return os.stat(source).st_mtime_ns > target_ns


class FileSynchronizer:
    """Mirror *source_dir* into *target_dir*.

    Args:
        source_dir: Existing directory to copy from.
        target_dir: Existing directory to copy into.
        log: Optional callable receiving a :class:`SyncEvent` per file.
            It runs in-line; anything it raises propagates out of
            :meth:`sync`.
    """

    def __init__(self, source_dir: str | os.PathLike, target_dir: str | os.PathLike,
                 log: Optional[SyncLog] = None):
        source_dir = os.fspath(source_dir)
        target_dir = os.fspath(target_dir)
        _check_directory(source_dir)
        _check_directory(target_dir)
        self.source_dir = source_dir.rstrip(os.sep) or source_dir
        self.target_dir = target_dir.rstrip(os.sep) or target_dir
        self.log = log

    def __repr__(self) -> str:
        return f"FileSynchronizer({self.source_dir!r}, {self.target_dir!r})"

    def target_path(self, source_path: str) -> str:
        """Map *source_path* into the target tree by swapping the directory prefix.

        The prefix only matches on a path-component boundary, so
        ``/data/src2/x`` is not under ``/data/src`` and a source of ``/``
        maps ``/etc`` to ``<target>/etc``.
        """
        if source_path == self.source_dir:
            return self.target_dir
        prefix = self.source_dir
        if not prefix.endswith(os.sep):
            prefix += os.sep
        if not source_path.startswith(prefix):
            raise InvalidArgumentError(f"{source_path} is not under {self.source_dir}")
        return os.path.join(self.target_dir, source_path[len(prefix):])

    def sync(self, recursive: bool = False) -> None:
        """Copy new and updated files from source to target.

        Without *recursive* only the top-level files are considered and
        subdirectories are ignored.  With it, missing target directories
        are created and each subtree is synchronized in turn.

        Raises:
            WriteError: a directory could not be created or a file copied.
        """
        entries = FileExplorer(self.source_dir).list_all(recursive)
        self._sync_entries(entries, recursive)

    def _sync_entries(self, entries: Iterable[Entry], recursive: bool) -> None:
        for entry in entries:
            target = self.target_path(entry.path)
            if entry.is_dir:
                if not recursive:
                    continue
                if not os.path.isdir(target):
                    try:
                        os.mkdir(target)
                    except OSError as exc:
                        raise WriteError(f"Cannot create directory {target}: {exc}") from exc
                    logger.info("Created directory %s", target)
                sub = FileSynchronizer(entry.path, target, self.log)
                sub._sync_entries(entry.children, True)
            elif entry.is_file:
                self._copy_file(entry.path, target)
            else:
                logger.debug("Skipping %s (%s)", entry.path, entry.type)

    def _copy_file(self, source: str, target: str) -> None:
        copied = needs_copy(source, target)
        if copied:
            try:
                shutil.copyfile(source, target)
            except OSError as exc:
                raise WriteError(f"Cannot copy {source} to {target}: {exc}") from exc
            logger.info("Copied %s -> %s", source, target)
        else:
            logger.debug("Up to date: %s", target)
        # Fires for skipped files too.
        if self.log is not None:
            self.log(SyncEvent(source=source, target=target, copied=copied))


def sync_dirs(source_dir: str | os.PathLike, target_dir: str | os.PathLike, *,
              recursive: bool = False, log: Optional[SyncLog] = None) -> None:
    """Shorthand for ``FileSynchronizer(source_dir, target_dir, log).sync(recursive)``."""
    FileSynchronizer(source_dir, target_dir, log).sync(recursive)
