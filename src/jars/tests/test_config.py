"""配置加载测试"""

import textwrap

import pytest

from jars.config import (
    CONFIG_ENV,
    DEFAULT_CONFIG_TOML,
    Config,
    load_config,
    write_default_config,
)
from jars.option import CombineMode, ExtensionMatch


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """隔离 HOME 与环境变量，避免读到真实配置"""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    return home


def write_toml(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_packaged_default():
    cfg = load_config()
    assert cfg == Config()
    assert cfg.builder().build().is_accept_all()


def test_explicit_path(tmp_path):
    path = write_toml(tmp_path / "jars.toml", """
        [filter]
        targets = ["java/lang"]
        extensions = [".class"]
        keep_meta_info = true
        combine = "any"
        extension_match = "suffix"
    """)
    cfg = load_config(path)
    assert cfg.targets == ["java/lang"]
    assert cfg.combine is CombineMode.ANY
    assert cfg.extension_match is ExtensionMatch.SUFFIX

    option = cfg.builder().build()
    assert option.targets == frozenset({"java/lang", "META-INF"})
    assert option.extensions == frozenset({"class"})


def test_explicit_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.toml")


def test_env_variable(tmp_path, monkeypatch):
    path = write_toml(tmp_path / "env.toml", """
        [filter]
        targets = "com/example"
    """)
    monkeypatch.setenv(CONFIG_ENV, str(path))
    assert load_config().targets == ["com/example"]


def test_home_config(isolated_home):
    write_toml(isolated_home / ".config" / "jars" / "config.toml", """
        [filter]
        extensions = ["class", "MF"]
    """)
    assert load_config().extensions == ["class", "MF"]


def test_invalid_mode(tmp_path):
    path = write_toml(tmp_path / "bad.toml", """
        [filter]
        combine = "both"
    """)
    with pytest.raises(ValueError):
        load_config(path)


def test_write_default_config(tmp_path):
    target = write_default_config(tmp_path / "nested" / "config.toml")
    assert target.read_text(encoding="utf-8") == DEFAULT_CONFIG_TOML
    assert load_config(target) == Config()


def test_write_default_config_keeps_existing(tmp_path):
    target = write_toml(tmp_path / "config.toml", """
        [filter]
        targets = ["java/lang"]
    """)
    with pytest.raises(FileExistsError):
        write_default_config(target)
    assert load_config(target).targets == ["java/lang"]

    write_default_config(target, overwrite=True)
    assert load_config(target) == Config()


def test_missing_lists_default_to_empty(tmp_path):
    path = write_toml(tmp_path / "partial.toml", """
        [filter]
        keep_meta_info = true
    """)
    cfg = load_config(path)
    assert cfg.targets == []
    assert cfg.extensions == []
    assert cfg.keep_meta_info
