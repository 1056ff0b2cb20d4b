"""Archive entry listing on top of :mod:`zipfile`."""

from __future__ import annotations

import re
import zipfile
from dataclasses import dataclass
from typing import Iterator

__all__ = ["JarError", "JarEntry", "enclosed_name", "iter_jar_entries", "read_entry"]

_DRIVE = re.compile(r"^[A-Za-z]:")


class JarError(OSError):
    """Raised when an archive cannot be opened, parsed or read.

    The underlying exception is kept as ``error`` and chained as ``__cause__``.
    ``entry`` names the archive member being read, if any.
    """

    def __init__(self, path: str, error: BaseException, entry: str | None = None):
        self.path = path
        self.error = error
        self.entry = entry
        where = f"{path}!{entry}" if entry else path
        super().__init__(f"{where}: {error}")


@dataclass(slots=True)
class JarEntry:
    """One central directory record."""

    name: str | None  # None when the raw name is unsafe
    raw_name: str
    is_dir: bool
    info: zipfile.ZipInfo

    @property
    def size(self) -> int:
        return self.info.file_size


def enclosed_name(raw_name: str) -> str | None:
    """Return ``raw_name`` as a normalized relative path, or ``None`` if unsafe.

    Unsafe names contain a NUL byte, are absolute, carry a drive prefix or
    climb out of the archive root through ``..``. Backslashes are treated as
    separators, ``.`` and empty segments are dropped and ``..`` inside the
    root is resolved. A trailing ``/`` is kept.

    >>> enclosed_name("java/./lang/../lang/Object.class")
    'java/lang/Object.class'
    >>> enclosed_name("../evil.class") is None
    True
    """
    if "\0" in raw_name:
        return None
    name = raw_name.replace("\\", "/")
    if name.startswith("/") or _DRIVE.match(name):
        return None

    parts: list[str] = []
    for part in name.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if not parts:
                return None
            parts.pop()
            continue
        parts.append(part)

    if not parts:
        return None
    normalized = "/".join(parts)
    if name.endswith("/"):
        normalized += "/"
    return normalized


def iter_jar_entries(zf: zipfile.ZipFile) -> Iterator[JarEntry]:
    """Yield every entry of ``zf`` in central directory order."""
    for info in zf.infolist():
        raw_name = info.filename
        yield JarEntry(
            name=enclosed_name(raw_name),
            raw_name=raw_name,
            is_dir=raw_name.endswith(("/", "\\")),
            info=info,
        )


def read_entry(zf: zipfile.ZipFile, entry: JarEntry) -> bytes:
    # Reading through the ZipInfo keeps duplicate names apart.
    return zf.read(entry.info)
