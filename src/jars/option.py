"""Extraction filters: which archive entries ``jar`` keeps."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

__all__ = [
    "CombineMode",
    "ExtensionMatch",
    "JarOption",
    "JarOptionBuilder",
    "default_option",
    "META_INF",
]

META_INF = "META-INF"


class CombineMode(str, Enum):
    """How the path and extension dimensions are combined."""

    ALL = "all"  # both dimensions must accept
    ANY = "any"  # either dimension may accept


class ExtensionMatch(str, Enum):
    """How an entry's extension is compared with the registered ones."""

    EXACT = "exact"
    SUFFIX = "suffix"


def _normalize_extension(ext: str) -> str:
    return ext.strip().lstrip(".")


@dataclass(frozen=True)
class JarOption:
    """Immutable extraction filter.

    An empty ``targets`` or ``extensions`` set does not constrain its
    dimension. With ``CombineMode.ANY`` that means an empty dimension accepts
    every entry on its own, so a prefix-only filter keeps everything.
    """

    targets: frozenset[str] = field(default_factory=frozenset)
    extensions: frozenset[str] = field(default_factory=frozenset)
    combine: CombineMode = CombineMode.ALL
    extension_match: ExtensionMatch = ExtensionMatch.EXACT

    def __post_init__(self) -> None:
        object.__setattr__(self, "targets", frozenset(self.targets))
        object.__setattr__(self, "extensions", frozenset(self.extensions))
        object.__setattr__(self, "combine", CombineMode(self.combine))
        object.__setattr__(self, "extension_match", ExtensionMatch(self.extension_match))

    def path_matches(self, path: str) -> bool:
        if not self.targets:
            return True
        return any(path.startswith(target) for target in self.targets)

    def extension_matches(self, path: str) -> bool:
        if not self.extensions:
            return True
        _, dot, extension = path.rpartition(".")
        if not dot:
            return False
        if self.extension_match is ExtensionMatch.SUFFIX:
            return any(extension.endswith(ext) for ext in self.extensions)
        return extension in self.extensions

    def accepts(self, path: str) -> bool:
        if self.combine is CombineMode.ANY:
            return self.path_matches(path) or self.extension_matches(path)
        return self.path_matches(path) and self.extension_matches(path)

    def is_accept_all(self) -> bool:
        return not self.targets and not self.extensions


class JarOptionBuilder:
    """Accumulates targets and extensions, then freezes them into a ``JarOption``.

    Every mutator returns the builder so calls can be chained::

        option = JarOptionBuilder.builder().target("java/lang").ext("class").build()

    ``build()`` consumes the builder; using it afterwards raises ``RuntimeError``.
    """

    def __init__(self) -> None:
        self._targets: set[str] = set()
        self._extensions: set[str] = set()
        self._combine = CombineMode.ALL
        self._extension_match = ExtensionMatch.EXACT
        self._consumed = False

    @classmethod
    def builder(cls) -> "JarOptionBuilder":
        return cls()

    @staticmethod
    def default() -> JarOption:
        """Option that extracts every file entry."""
        return JarOption()

    def _check(self) -> None:
        if self._consumed:
            raise RuntimeError("JarOptionBuilder has already been built")

    def add_path_prefix(self, prefix: str) -> "JarOptionBuilder":
        self._check()
        if prefix:
            self._targets.add(prefix)
        return self

    def add_path_prefixes(self, prefixes: Iterable[str]) -> "JarOptionBuilder":
        for prefix in prefixes:
            self.add_path_prefix(prefix)
        return self

    def add_extension(self, ext: str) -> "JarOptionBuilder":
        self._check()
        ext = _normalize_extension(ext)
        if ext:
            self._extensions.add(ext)
        return self

    def add_extensions(self, exts: Iterable[str]) -> "JarOptionBuilder":
        for ext in exts:
            self.add_extension(ext)
        return self

    # Short names.
    target = add_path_prefix
    targets = add_path_prefixes
    ext = add_extension
    exts = add_extensions

    def keep_meta_info(self) -> "JarOptionBuilder":
        """Also keep everything under ``META-INF``."""
        return self.add_path_prefix(META_INF)

    def combine(self, mode: CombineMode | str) -> "JarOptionBuilder":
        self._check()
        self._combine = CombineMode(mode)
        return self

    def extension_match(self, mode: ExtensionMatch | str) -> "JarOptionBuilder":
        self._check()
        self._extension_match = ExtensionMatch(mode)
        return self

    def legacy(self) -> "JarOptionBuilder":
        """OR-combined dimensions with suffix extension matching."""
        return self.combine(CombineMode.ANY).extension_match(ExtensionMatch.SUFFIX)

    def build(self) -> JarOption:
        self._check()
        self._consumed = True
        return JarOption(
            targets=frozenset(self._targets),
            extensions=frozenset(self._extensions),
            combine=self._combine,
            extension_match=self._extension_match,
        )


def default_option() -> JarOption:
    return JarOptionBuilder.default()
