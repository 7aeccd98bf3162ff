""" Linux (X11 + wmctrl) """

import re
import subprocess
from ..constants import WMCTRL_CMD
from ..exceptions import ExecuteFailed
from ..utils.logger import logger

# 窗口ID 桌面 主机名，之后一个空格分隔标题
_LINE_RE = re.compile(r"^\s*\S+\s+\S+\s+\S+(?: (.*))?$")

def parse_wmctrl(raw: str) -> list[str]:
    """
    解析 `wmctrl -l` 输出，每行: <窗口ID> <桌面> <主机名> <标题>
    标题里的连续空格原样保留，没有标题的行给空字符串
    """
    titles: list[str] = []
    for line in raw.splitlines():
        if not line.strip():
            continue
        m = _LINE_RE.match(line)
        titles.append((m.group(1) or "") if m else "")
    return titles

class WmctrlConnection:
    """ 通过 wmctrl 读取窗口标题，Linux 下没有权限问题 """

    def __init__(self, executable: str = WMCTRL_CMD) -> None:
        self._executable = executable

    @property
    def arguments(self) -> list[str]:
        return [self._executable, "-l"]

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

        # 比如 "Cannot open display."
        if result.returncode != 0:
            raise ExecuteFailed(result.stderr.strip())

        titles = parse_wmctrl(result.stdout)
        logger.trace(f"解析到 {len(titles)} 个窗口标题")
        return titles
