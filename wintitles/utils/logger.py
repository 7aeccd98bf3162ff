""" 日志实现 """

from loguru import logger
from datetime import datetime
from pathlib import Path
from typing import Optional
import sys
from ..constants import LOG_LEVEL, LOG_DIR

_FORMAT = "{time:HH:mm:ss} | {level:<8} | {thread.name:<12} / {name} | {function}:{line:03d} | {message}"

def setup_logging(level: str = LOG_LEVEL, log_dir: Optional[Path] = LOG_DIR) -> list[int]:
    """
    打开 wintitles 的日志并按配置挂上 sink，返回 handler id 列表
    导入时不动 loguru 的全局状态，需要日志的程序自己调用这个
    """
    logger.enable("wintitles")
    handlers = [
        logger.add(
            sys.stderr,
            format=f"<level>{_FORMAT}</level>",
            level=level,
            colorize=True,
            filter="wintitles"
        )
    ]

    # 配置了日志目录才写文件
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logger.add(
            log_dir / f"runtime_{datetime.now().strftime('%Y-%m-%d')}.log",
            format=_FORMAT,
            level="DEBUG",
            rotation="1 week",
            compression="zip",
            backtrace=True,
            diagnose=True,
            filter="wintitles"
        ))
    return handlers
