""" 其他平台 """

import sys
from ..exceptions import PlatformUnsupported

class UnsupportedConnection:
    """ 不支持的平台，构造即失败 """

    def __init__(self, *args, **kwargs) -> None:
        raise PlatformUnsupported(sys.platform)

    def window_titles(self) -> list[str]: ...