"""Extract archive entries into memory.

``jar`` reads every accepted entry into a dict keyed by its normalized path;
``iter_jar`` yields the same entries one at a time so the caller decides what
to keep in memory.
"""

from __future__ import annotations

import os
import zipfile
import zlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Union

from loguru import logger

from .archive import JarError, iter_jar_entries, read_entry
from .option import JarOption, default_option

__all__ = ["Jar", "jar", "iter_jar"]

# Everything zipfile raises for unreadable files, broken directories and
# corrupt or unsupported member data. RuntimeError is what zipfile raises for
# encrypted members; its subclass NotImplementedError covers unsupported
# compression methods.
_READ_ERRORS = (
    OSError,
    EOFError,
    zipfile.BadZipFile,
    zlib.error,
    UnicodeDecodeError,
    RuntimeError,
)

PathLike = Union[str, bytes, os.PathLike]


@dataclass
class Jar:
    """Extracted entries: normalized path -> content."""

    files: dict[str, bytes] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.files)

    def __contains__(self, name: object) -> bool:
        return name in self.files

    def __iter__(self) -> Iterator[str]:
        return iter(self.files)

    def names(self) -> list[str]:
        return sorted(self.files)

    def total_size(self) -> int:
        return sum(len(data) for data in self.files.values())


def iter_jar(path: PathLike, option: Optional[JarOption] = None) -> Iterator[tuple[str, bytes]]:
    """Yield ``(name, content)`` for each accepted entry in directory order.

    Unsafe names, directories and entries rejected by ``option`` are skipped
    without reading their data. The archive stays open until the generator is
    exhausted or closed.

    Raises:
        JarError: the file cannot be opened, is not a zip archive, or an
            accepted entry cannot be decompressed.
    """
    if option is None:
        option = default_option()
    archive_path = Path(os.fsdecode(path))

    try:
        zf = zipfile.ZipFile(archive_path)
    except _READ_ERRORS as e:
        raise JarError(str(archive_path), e) from e

    with zf:
        for entry in iter_jar_entries(zf):
            if entry.name is None:
                logger.debug(f"跳过不安全路径: {entry.raw_name!r}")
                continue
            if entry.is_dir or not option.accepts(entry.name):
                continue
            try:
                data = read_entry(zf, entry)
            except _READ_ERRORS as e:
                raise JarError(str(archive_path), e, entry=entry.raw_name) from e
            yield entry.name, data


def jar(path: PathLike, option: Optional[JarOption] = None) -> Jar:
    """Extract ``path`` into a :class:`Jar` according to ``option``.

    ``option`` defaults to :func:`default_option`, which keeps every file.
    When two entries normalize to the same name the later one wins.

    Example::

        result = jar("sample/rt.jar", JarOptionBuilder.builder().target("java/lang").build())
        for name, content in result.files.items():
            ...
    """
    files: dict[str, bytes] = {}
    for name, data in iter_jar(path, option):
        files[name] = data
    logger.debug(f"{path}: 提取 {len(files)} 个条目")
    return Jar(files)
