
class WindowTitlesException(Exception):
    """ 框架异常基类 """

class ConfigFileError(WindowTitlesException):
    """ 配置文件出错 """

class PlatformUnsupported(WindowTitlesException):
    """ 当前平台没有实现 """
    def __init__(self, platform: str) -> None:
        super().__init__(f"Platform {platform!r} is not supported")
        self.platform = platform

class ExecuteFailed(WindowTitlesException):
    """ 外部命令无法执行 """
    def __init__(self, detail: str = "") -> None:
        msg = "Failed to execute the command"
        super().__init__(f"{msg}: {detail}" if detail else msg)
        self.detail = detail

class NoAccessibilityPermission(WindowTitlesException):
    """ 没有辅助功能权限，需要用户在系统设置里授权 """
    def __init__(self) -> None:
        super().__init__("Permission to use the accessibility API has not been granted")
