"""jars - extract selected entries of a JAR (ZIP) archive into memory.

Entries are kept by path prefix and/or file extension::

    from jars import jar, JarOptionBuilder

    result = jar("sample/rt.jar", JarOptionBuilder.builder().target("java/lang").build())
    for file_path, content in result.files.items():
        ...
"""

__version__ = "0.1.0"

from loguru import logger

from .archive import JarError
from .extract import Jar, iter_jar, jar
from .option import CombineMode, ExtensionMatch, JarOption, JarOptionBuilder, default_option

# 库默认静默，CLI 通过 setup_logger 重新启用
logger.disable(__name__)

__all__ = [
    "jar",
    "iter_jar",
    "Jar",
    "JarError",
    "JarOption",
    "JarOptionBuilder",
    "CombineMode",
    "ExtensionMatch",
    "default_option",
]
