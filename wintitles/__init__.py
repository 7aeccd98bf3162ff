"""
wintitles
调用系统脚本工具列出当前所有打开窗口的标题
"""
from loguru import logger
from .exceptions import (
    WindowTitlesException,
    ConfigFileError,
    PlatformUnsupported,
    ExecuteFailed,
    NoAccessibilityPermission,
)
from .providers import Connection
from .schemas.protocols import IWindowTitles
from .utils.quoted_list import split_titles
from .utils.logger import setup_logging

# 库默认静默，应用调用 setup_logging() 或 logger.enable("wintitles") 打开
logger.disable("wintitles")

def window_titles() -> list[str]:
    """ 新建连接并取一次标题 """
    conn: IWindowTitles = Connection()
    return conn.window_titles()

__all__ = [
    "Connection",
    "IWindowTitles",
    "window_titles",
    "split_titles",
    "setup_logging",
    "WindowTitlesException",
    "ConfigFileError",
    "PlatformUnsupported",
    "ExecuteFailed",
    "NoAccessibilityPermission",
]
