"""
In-memory ZIP packaging for generated sites.

build_archive() takes ordered (path, content) entries and returns the bytes
of a complete archive. Folder entries ("css/", "js/") are written once per
prefix. The whole archive is assembled in a BytesIO buffer; on any failure
ArchiveError is raised and no bytes are returned.
"""

from __future__ import annotations

import io
import zipfile
from typing import Iterable, List, Mapping, NamedTuple, Union

from portfolio_builder.export.errors import ArchiveError

Content = Union[str, bytes]

# Fixed timestamp so identical entries give identical archive bytes
ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)


class ArchiveEntry(NamedTuple):
    path: str
    content: Content


def _normalize_path(raw: str) -> str:
    path = (raw or "").replace("\\", "/").strip()
    if not path or path.endswith("/"):
        raise ArchiveError(f"Invalid archive path: {raw!r}")
    if path.startswith("/") or ":" in path.split("/", 1)[0]:
        raise ArchiveError(f"Archive paths must be relative: {raw!r}")
    parts = path.split("/")
    if any(p in ("", ".", "..") for p in parts):
        raise ArchiveError(f"Invalid archive path: {raw!r}")
    return path


def _coerce_entry(entry: Union[ArchiveEntry, Mapping]) -> ArchiveEntry:
    if isinstance(entry, ArchiveEntry):
        return entry
    if isinstance(entry, Mapping):
        try:
            return ArchiveEntry(entry["path"], entry["content"])
        except KeyError as e:
            raise ArchiveError(f"Archive entry missing {e.args[0]!r}") from e
    if isinstance(entry, tuple) and len(entry) == 2:
        return ArchiveEntry(*entry)
    raise ArchiveError(f"Unsupported archive entry: {entry!r}")


def _payload(entry: ArchiveEntry) -> bytes:
    content = entry.content
    if isinstance(content, str):
        return content.encode("utf-8")
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    raise ArchiveError(f"Unsupported content type for {entry.path!r}: {type(content).__name__}")


def _folder_prefixes(path: str) -> List[str]:
    """'a/b/c.txt' -> ['a/', 'a/b/']"""
    parts = path.split("/")[:-1]
    return ["/".join(parts[: i + 1]) + "/" for i in range(len(parts))]


def _zip_info(name: str, *, is_dir: bool) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(name, date_time=ZIP_DATE_TIME)
    if is_dir:
        info.external_attr = (0o40755 << 16) | 0x10
        info.compress_type = zipfile.ZIP_STORED
    else:
        info.external_attr = 0o644 << 16
        info.compress_type = zipfile.ZIP_DEFLATED
    return info


def build_archive(entries: Iterable[Union[ArchiveEntry, Mapping]]) -> bytes:
    """
    Entries may be ArchiveEntry tuples or {"path": ..., "content": ...}
    mappings; str content is written as UTF-8, bytes as-is.
    Duplicate file paths are rejected.
    """
    buf = io.BytesIO()
    written_dirs = set()
    written_files = set()

    try:
        with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
            for raw in entries:
                entry = _coerce_entry(raw)
                path = _normalize_path(entry.path)
                if path in written_files:
                    raise ArchiveError(f"Duplicate archive path: {path!r}")
                data = _payload(entry)

                for folder in _folder_prefixes(path):
                    if folder not in written_dirs:
                        zf.writestr(_zip_info(folder, is_dir=True), b"")
                        written_dirs.add(folder)

                zf.writestr(_zip_info(path, is_dir=False), data)
                written_files.add(path)
    except ArchiveError:
        raise
    except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError, ValueError, MemoryError) as e:
        raise ArchiveError(f"Archive build failed: {e}") from e

    return buf.getvalue()


__all__ = ["ArchiveEntry", "ZIP_DATE_TIME", "build_archive"]
