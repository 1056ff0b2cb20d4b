"""Loguru setup for command-line use.

The library itself never configures sinks; ``jars`` disables its own logger
namespace on import and ``setup_logger`` turns it back on.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level.icon} {level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {elapsed} | {level.icon} {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: str = "INFO", log_file: str | Path | None = None, console_output: bool = True):
    """配置 Loguru 日志系统

    Args:
        level: 控制台日志级别
        log_file: 日志文件路径，为 None 时不写文件
        console_output: 是否输出到控制台（stderr）

    Returns:
        配置好的 logger 实例
    """
    logger.remove()

    if console_output:
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if log_file is not None:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level="DEBUG",
            rotation="10 MB",
            retention="30 days",
            encoding="utf-8",
            format=FILE_FORMAT,
        )

    logger.enable("jars")
    return logger
