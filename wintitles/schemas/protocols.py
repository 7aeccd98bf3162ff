""" 协议规范 """
from typing import Protocol

class IWindowTitles(Protocol):
    """ 每个平台一个实现，构造时不做 I/O """

    def window_titles(self) -> list[str]: ...
