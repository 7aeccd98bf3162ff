""" macOS: osascript + System Events """

import subprocess
from ..constants import OSASCRIPT_CMD, PERMISSION_ERROR, APPLE_SCRIPT
from ..exceptions import ExecuteFailed, NoAccessibilityPermission
from ..utils.quoted_list import split_titles
from ..utils.logger import logger

class AppleConnection:
    """ 通过 osascript 读取所有进程所有窗口的标题 """

    def __init__(self, executable: str = OSASCRIPT_CMD) -> None:
        self._executable = executable

    @property
    def arguments(self) -> list[str]:
        # -ss: 以可重新编译的源码形式输出，字符串带引号
        return [self._executable, "-ss", "-e", APPLE_SCRIPT]

    def window_titles(self) -> list[str]:
        logger.debug(f"执行: {self.arguments}")
        try:
            result = subprocess.run(
                self.arguments,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace"
            )
        except OSError as cause:
            raise ExecuteFailed(str(cause)) from cause

        # 无论退出码如何，先看权限
        if PERMISSION_ERROR in result.stderr:
            raise NoAccessibilityPermission()

        titles = split_titles(result.stdout)
        logger.trace(f"解析到 {len(titles)} 个窗口标题")
        return titles
