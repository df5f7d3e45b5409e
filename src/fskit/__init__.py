from .exceptions import (
    FsKitError,
    PathNotFoundError,
    NotADirError,
    NotAFileError,
    UnreadableError,
    WriteError,
    InvalidArgumentError,
)
from ._glob import PatternMatcher, compile_pattern, glob_match
from .tree import Entry, EntryType, FileExplorer, list_dir, search
from .split import FileSplitter, join_parts, part_name
from .sync import FileSynchronizer, SyncEvent, sync_dirs
from .fileinfo import FileInfo
from .temp import TempFile
from .mime import mime_type_for_extension, extension_for_mime_type

__all__ = [
    "FsKitError", "PathNotFoundError", "NotADirError", "NotAFileError",
    "UnreadableError", "WriteError", "InvalidArgumentError",
    "PatternMatcher", "compile_pattern", "glob_match",
    "Entry", "EntryType", "FileExplorer", "list_dir", "search",
    "FileSplitter", "join_parts", "part_name",
    "FileSynchronizer", "SyncEvent", "sync_dirs",
    "FileInfo", "TempFile",
    "mime_type_for_extension", "extension_for_mime_type",
]
