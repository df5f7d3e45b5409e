"""Static extension <-> MIME type table.

Python's :mod:`mimetypes` reads the host's ``mime.types`` files, so its
answers differ between machines.  This table is fixed; it is consulted
first and :mod:`mimetypes` is only a fallback (see
:meth:`fskit.fileinfo.FileInfo.mime_type`).
"""

from __future__ import annotations

# First extension listed for a MIME type wins the reverse lookup.
_MIME_TYPES: dict[str, str] = {
    # text
    "txt": "text/plain",
    "log": "text/plain",
    "csv": "text/csv",
    "tsv": "text/tab-separated-values",
    "html": "text/html",
    "htm": "text/html",
    "css": "text/css",
    "md": "text/markdown",
    "xml": "text/xml",
    "ics": "text/calendar",
    # code
    "php": "text/x-php",
    "py": "text/x-python",
    "c": "text/x-c",
    "h": "text/x-c",
    "java": "text/x-java-source",
    "sh": "application/x-sh",
    "js": "application/javascript",
    "mjs": "application/javascript",
    "json": "application/json",
    "geojson": "application/geo+json",
    "yaml": "application/yaml",
    "yml": "application/yaml",
    "wasm": "application/wasm",
    # documents
    "pdf": "application/pdf",
    "rtf": "application/rtf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "odt": "application/vnd.oasis.opendocument.text",
    "ods": "application/vnd.oasis.opendocument.spreadsheet",
    "epub": "application/epub+zip",
    # archives
    "zip": "application/zip",
    "gz": "application/gzip",
    "tgz": "application/gzip",
    "tar": "application/x-tar",
    "bz2": "application/x-bzip2",
    "xz": "application/x-xz",
    "7z": "application/x-7z-compressed",
    "rar": "application/vnd.rar",
    # images
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "bmp": "image/bmp",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "ico": "image/vnd.microsoft.icon",
    "tif": "image/tiff",
    "tiff": "image/tiff",
    # audio / video
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "ogg": "audio/ogg",
    "flac": "audio/flac",
    "mp4": "video/mp4",
    "webm": "video/webm",
    "avi": "video/x-msvideo",
    "mov": "video/quicktime",
    "mkv": "video/x-matroska",
    # fonts
    "woff": "font/woff",
    "woff2": "font/woff2",
    "ttf": "font/ttf",
    "otf": "font/otf",
    # misc
    "bin": "application/octet-stream",
    "exe": "application/x-msdownload",
    "iso": "application/x-iso9660-image",
    "sql": "application/sql",
}

_EXTENSIONS: dict[str, str] = {}
for _ext, _mime in _MIME_TYPES.items():
    _EXTENSIONS.setdefault(_mime, _ext)
del _ext, _mime


def _normalize_extension(extension: str) -> str:
    return extension.lstrip(".").lower()


def mime_type_for_extension(extension: str) -> str | None:
    """Return the MIME type for *extension* (``"php"`` or ``".php"``), or ``None``."""
    return _MIME_TYPES.get(_normalize_extension(extension))


def extension_for_mime_type(mime_type: str) -> str | None:
    """Return the preferred extension (no leading dot) for *mime_type*, or ``None``."""
    return _EXTENSIONS.get(mime_type.strip().lower())
