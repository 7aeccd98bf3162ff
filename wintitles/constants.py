""" 常量 """
import os
import sys
import json
from pathlib import Path
from typing import Any, Optional
from .exceptions import ConfigFileError

if getattr(sys, 'frozen', False):
    # 打包后 exe 所在目录
    _BASE = Path(sys.executable).parent
else:
    # 源码目录
    _BASE = Path(__file__).parent

# 可用环境变量 WINTITLES_CONFIG 指定其他路径
_CONF_FILE = Path(os.environ.get("WINTITLES_CONFIG", _BASE / "config.json"))

# 默认配置（没有 config.json 时使用）
_DEFAULT_CONF: dict[str, dict[str, Any]] = {
    "APPLE": {
        "OSASCRIPT": "osascript",
        "PERMISSION_ERROR": "osascript is not allowed assistive access"
    },
    "LINUX": {
        "WMCTRL": "wmctrl"
    },
    "LOGGING": {
        "LEVEL": "INFO",
        "DIR": None
    }
}

def _merge(user: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """ 按段合并，用户没写的键保持默认 """
    merged = {section: dict(values) for section, values in _DEFAULT_CONF.items()}
    for section, values in user.items():
        if isinstance(values, dict):
            merged.setdefault(section, {}).update(values)
    return merged

def _cfg_init(path: Path = _CONF_FILE) -> dict[str, dict[str, Any]]:
    if not path.exists():
        return _merge({})
    try:
        user = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as cause:
        raise ConfigFileError(f"配置文件发生错误: {path}") from cause
    if not isinstance(user, dict):
        raise ConfigFileError(f"配置文件顶层必须是对象: {path}")
    return _merge(user)

_cfg = _cfg_init()

# ---------- 结构化映射 ----------
OSASCRIPT_CMD: str          = _cfg["APPLE"]["OSASCRIPT"]
PERMISSION_ERROR: str       = _cfg["APPLE"]["PERMISSION_ERROR"]
WMCTRL_CMD: str             = _cfg["LINUX"]["WMCTRL"]
LOG_LEVEL: str              = _cfg["LOGGING"]["LEVEL"]
LOG_DIR: Optional[Path]     = Path(_cfg["LOGGING"]["DIR"]) if _cfg["LOGGING"]["DIR"] else None

# System Events 脚本，固定不变
APPLE_SCRIPT = 'tell application "System Events" to get the title of every window of every process'
