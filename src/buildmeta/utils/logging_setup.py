"""日志配置。"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "BUILDMETA_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_configured = False


def setup_logging(level: str | int | None = None, console: Console | None = None) -> None:
    """为根 logger 配置 RichHandler（只配置一次）。

    参数：
        level：日志级别；未指定时读取 BUILDMETA_LOG_LEVEL，默认 WARNING（未知名称同样回退到 WARNING）
        console：可选的 Rich 控制台实例
    """
    global _configured
    if _configured:
        return

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, str):
        level = level.upper()
        if not isinstance(logging.getLevelName(level), int):
            # 未知的级别名称
            level = DEFAULT_LOG_LEVEL

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)
    _configured = True
