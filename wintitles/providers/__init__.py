"""
providers 子模块
按 sys.platform 在导入时选定唯一的实现，对外统一叫 Connection
"""
import sys

if sys.platform == "darwin":
    from .apple import AppleConnection as Connection

elif sys.platform.startswith("linux"):
    from .linux import WmctrlConnection as Connection

else:
    from .unsupported import UnsupportedConnection as Connection

__all__ = ["Connection"]
