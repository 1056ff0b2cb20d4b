"""Configuration loading utilities for the jars package."""

from __future__ import annotations

import os
import textwrap
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - Python <3.11 fallback
    import tomli as tomllib  # type: ignore

from .option import CombineMode, ExtensionMatch, JarOptionBuilder

__all__ = [
    "Config",
    "load_config",
    "write_default_config",
    "default_config_path",
    "DEFAULT_CONFIG_TOML",
    "CONFIG_ENV",
]

CONFIG_ENV = "JARS_CONFIG"

DEFAULT_CONFIG_TOML = textwrap.dedent(
    """
    [filter]
    # 路径前缀，为空时不限制
    targets = []
    # 扩展名（不带点号），为空时不限制
    extensions = []
    keep_meta_info = false
    # "all": 前缀与扩展名都需匹配；"any": 任一匹配即可
    combine = "all"
    # "exact": 扩展名完全相等；"suffix": 扩展名以给定字符串结尾
    extension_match = "exact"
    """
)


@dataclass(slots=True)
class Config:
    """Default extraction filter for the jars command."""

    targets: list[str] = field(default_factory=list)
    extensions: list[str] = field(default_factory=list)
    keep_meta_info: bool = False
    combine: CombineMode = CombineMode.ALL
    extension_match: ExtensionMatch = ExtensionMatch.EXACT

    def builder(self) -> JarOptionBuilder:
        """Return a builder preloaded with this configuration."""
        builder = (
            JarOptionBuilder.builder()
            .add_path_prefixes(self.targets)
            .add_extensions(self.extensions)
            .combine(self.combine)
            .extension_match(self.extension_match)
        )
        if self.keep_meta_info:
            builder.keep_meta_info()
        return builder


def default_config_path() -> Path:
    return Path.home() / ".config" / "jars" / "config.toml"


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a candidate list of paths.

    Resolution order:
        1. explicit ``config_path`` argument
        2. ``JARS_CONFIG`` environment variable
        3. ``~/.config/jars/config.toml``
        4. packaged default configuration

    An explicit ``config_path`` that does not exist raises ``FileNotFoundError``.
    """

    if config_path:
        path = Path(config_path).expanduser()
        if not path.is_file():
            raise FileNotFoundError(f"配置文件不存在: {path}")
        return _parse(path.read_text(encoding="utf-8"))

    candidates: list[Path] = []
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        candidates.append(Path(env_path).expanduser())
    candidates.append(default_config_path())

    for candidate in candidates:
        if candidate.is_file():
            return _parse(candidate.read_text(encoding="utf-8"))

    return _parse(DEFAULT_CONFIG_TOML)


def _parse(content: str) -> Config:
    section = tomllib.loads(content).get("filter", {})
    return Config(
        targets=_strings(section.get("targets")),
        extensions=_strings(section.get("extensions")),
        keep_meta_info=bool(section.get("keep_meta_info", False)),
        combine=CombineMode(section.get("combine", CombineMode.ALL.value)),
        extension_match=ExtensionMatch(section.get("extension_match", ExtensionMatch.EXACT.value)),
    )


def _strings(values: Iterable[str] | str | None) -> list[str]:
    # A bare string is one filter, not a list of characters.
    if values is None:
        return []
    if isinstance(values, str):
        return [values]
    return [str(item) for item in values]


def write_default_config(target_path: str | Path, overwrite: bool = False) -> Path:
    """Write the default ``[filter]`` table to ``target_path`` and return its absolute path.

    An existing file is left alone unless ``overwrite`` is set.
    """
    target = Path(target_path).expanduser()
    if target.exists() and not overwrite:
        raise FileExistsError(f"配置文件已存在: {target}")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
    return target.resolve()
