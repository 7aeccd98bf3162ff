"""Tests for config loading"""

import importlib
import json
from pathlib import Path

import pytest

from wintitles import constants
from wintitles.exceptions import ConfigFileError


def test_defaults_without_file(tmp_path):
    cfg = constants._cfg_init(tmp_path / "config.json")
    assert cfg["APPLE"]["OSASCRIPT"] == "osascript"
    assert cfg["APPLE"]["PERMISSION_ERROR"] == "osascript is not allowed assistive access"
    assert cfg["LINUX"]["WMCTRL"] == "wmctrl"
    assert cfg["LOGGING"]["DIR"] is None


def test_file_overrides_single_key(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"APPLE": {"OSASCRIPT": "/usr/bin/osascript"}}), encoding="utf-8")
    cfg = constants._cfg_init(path)
    assert cfg["APPLE"]["OSASCRIPT"] == "/usr/bin/osascript"
    assert cfg["APPLE"]["PERMISSION_ERROR"] == "osascript is not allowed assistive access"
    assert cfg["LOGGING"]["LEVEL"] == "INFO"


def test_defaults_are_not_mutated(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"LINUX": {"WMCTRL": "/opt/wmctrl"}}), encoding="utf-8")
    constants._cfg_init(path)
    assert constants._DEFAULT_CONF["LINUX"]["WMCTRL"] == "wmctrl"


def test_broken_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigFileError):
        constants._cfg_init(path)


def test_top_level_array(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigFileError):
        constants._cfg_init(path)


def test_top_level_scalar(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("42", encoding="utf-8")
    with pytest.raises(ConfigFileError):
        constants._cfg_init(path)


def test_not_utf8(tmp_path):
    path = tmp_path / "config.json"
    path.write_bytes(b"\xff\xfe{")
    with pytest.raises(ConfigFileError):
        constants._cfg_init(path)


class TestConfigLocation:

    @pytest.fixture
    def reload_constants(self, monkeypatch):
        yield lambda: importlib.reload(constants)
        monkeypatch.undo()
        importlib.reload(constants)

    def test_default_is_inside_package(self, monkeypatch, reload_constants):
        monkeypatch.delenv("WINTITLES_CONFIG", raising=False)
        module = reload_constants()
        assert module._CONF_FILE == Path(module.__file__).parent / "config.json"

    def test_env_override(self, tmp_path, monkeypatch, reload_constants):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"LINUX": {"WMCTRL": "/opt/bin/wmctrl"}}), encoding="utf-8")
        monkeypatch.setenv("WINTITLES_CONFIG", str(path))
        module = reload_constants()
        assert module._CONF_FILE == path
        assert module.WMCTRL_CMD == "/opt/bin/wmctrl"
