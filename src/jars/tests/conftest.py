"""测试公共夹具：在临时目录中构造 JAR 文件"""

import warnings
import zipfile
from pathlib import Path
from typing import Callable, Iterable, Tuple, Union

import pytest

Entry = Tuple[str, Union[bytes, str]]


def write_jar(path: Path, entries: Iterable[Entry], compression: int = zipfile.ZIP_DEFLATED) -> Path:
    """按给定顺序写入条目；允许重复名称"""
    with warnings.catch_warnings():
        # 重复条目会触发 "Duplicate name" 警告
        warnings.simplefilter("ignore", UserWarning)
        with zipfile.ZipFile(path, "w", compression=compression) as zf:
            for name, content in entries:
                zf.writestr(name, content)
    return path


@pytest.fixture
def make_jar(tmp_path) -> Callable[..., Path]:
    def _make(entries: Iterable[Entry], name: str = "test.jar", compression: int = zipfile.ZIP_DEFLATED) -> Path:
        return write_jar(tmp_path / name, entries, compression)

    return _make


@pytest.fixture
def rt_jar(make_jar) -> Path:
    """rt.jar 的缩小版"""
    return make_jar([
        ("META-INF/", b""),
        ("META-INF/MANIFEST.MF", b"Manifest-Version: 1.0\n"),
        ("java/", b""),
        ("java/lang/", b""),
        ("java/lang/Object.class", b"\xca\xfe\xba\xbe object"),
        ("java/lang/String.class", b"\xca\xfe\xba\xbe string"),
        ("java/lang/package.html", b"<html></html>"),
        ("java/util/List.class", b"\xca\xfe\xba\xbe list"),
        ("LICENSE", b"GPLv2"),
    ], name="rt.jar")
