"""配置构造测试"""

import json
import logging

import pytest
from pydantic import ValidationError

from termconfig import config
from termconfig.builder import (
    ConfigOverrides,
    build_config,
    load_overrides,
    load_overrides_from_env,
)
from termconfig.core.platform import Platform

ENV = {
    "HOME": "/home/alice",
    "SHELL": "/bin/zsh",
    "PATH": "/usr/bin",
    "TERMCONFIG_FILE": "/home/alice/.termconfig.json",
}


class TestBuildConfig:
    """build_config 测试"""

    def test_appearance_defaults(self):
        cfg = build_config(Platform.LINUX, ENV)
        assert cfg.font_family == config.FONT_FAMILY
        assert cfg.font_size == 15.5
        assert cfg.line_height == 1.1
        assert cfg.color_scheme == "ayu"
        assert cfg.window_decorations == "RESIZE"
        assert cfg.window_background_opacity == 0.9
        assert cfg.animation_fps == 60
        assert cfg.max_fps == 120

    def test_blur_only_on_darwin(self):
        assert build_config(Platform.DARWIN, ENV).macos_window_background_blur == 30
        assert build_config(Platform.LINUX, ENV).macos_window_background_blur is None

    def test_environment_variables(self):
        cfg = build_config(Platform.DARWIN, ENV)
        assert cfg.set_environment_variables == {"PATH": "/opt/homebrew/bin:/usr/bin"}
        assert build_config(Platform.WINDOWS, ENV).set_environment_variables == {}

    def test_keys_follow_platform(self):
        darwin = build_config(Platform.DARWIN, ENV)
        assert any(b.mods == "CMD" for b in darwin.keys)
        windows = build_config(Platform.WINDOWS, ENV)
        assert len(windows.keys) == len(darwin.keys) + 1

    def test_config_file_in_open_binding(self):
        cfg = build_config(Platform.LINUX, ENV)
        binding = next(b for b in cfg.keys if b.key == ",")
        assert binding.action.args[-1].endswith("/home/alice/.termconfig.json")

    def test_overrides_applied(self):
        overrides = ConfigOverrides(font_size=13, font_family="JetBrains Mono")
        cfg = build_config(Platform.LINUX, ENV, overrides)
        assert cfg.font_size == 13
        assert cfg.font_family == "JetBrains Mono"
        assert cfg.window_frame.font_family == "JetBrains Mono"
        assert cfg.color_scheme == "ayu"

    def test_frozen(self):
        cfg = build_config(Platform.LINUX, ENV)
        with pytest.raises(ValidationError):
            cfg.font_size = 10

    def test_startup_log_line(self, caplog):
        with caplog.at_level(logging.INFO, logger="termconfig.builder"):
            build_config(Platform.LINUX, ENV)
        assert any("termconfig loaded on" in r.message for r in caplog.records)


class TestToHostDict:
    """host 配置序列化测试"""

    def test_shape(self):
        data = build_config(Platform.DARWIN, ENV).to_host_dict()
        assert data["font"] == {"family": config.FONT_FAMILY}
        assert data["window_frame"] == {
            "font": {"family": config.FONT_FAMILY},
            "font_size": 12.0,
            "active_titlebar_bg": "#000000",
            "inactive_titlebar_bg": "#111111",
        }
        assert data["colors"] == {
            "tab_bar": {
                "active_tab": {"bg_color": "#000000", "fg_color": "#c0c0c0"},
                "inactive_tab": {"bg_color": "#212121", "fg_color": "#808080"},
            }
        }
        assert data["macos_window_background_blur"] == 30
        assert data["set_environment_variables"]["PATH"].startswith("/opt/homebrew/bin")

    def test_optional_keys_omitted(self):
        data = build_config(Platform.WINDOWS, ENV).to_host_dict()
        assert "macos_window_background_blur" not in data
        assert "set_environment_variables" not in data

    def test_keys_serialized(self):
        data = build_config(Platform.LINUX, ENV).to_host_dict()
        assert {"key": "F3", "mods": "CTRL", "action": "ShowLauncher"} in data["keys"]

    def test_json_serializable(self):
        data = build_config(Platform.LINUX, ENV).to_host_dict()
        assert json.loads(json.dumps(data))["color_scheme"] == "ayu"


class TestOverrides:
    """用户覆盖配置测试"""

    def test_load_valid(self, tmp_path):
        path = tmp_path / "termconfig.json"
        path.write_text(json.dumps({"font_size": 14, "color_scheme": "Gruvbox Dark"}))
        overrides = load_overrides(path)
        assert overrides.font_size == 14
        assert overrides.color_scheme == "Gruvbox Dark"

    def test_unknown_field_rejected(self, tmp_path):
        path = tmp_path / "termconfig.json"
        path.write_text(json.dumps({"fnot_size": 14}))
        with pytest.raises(ValueError, match="Invalid config overrides"):
            load_overrides(path)

    def test_out_of_range_rejected(self, tmp_path):
        path = tmp_path / "termconfig.json"
        path.write_text(json.dumps({"window_background_opacity": 1.5}))
        with pytest.raises(ValueError, match="Invalid config overrides"):
            load_overrides(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValueError, match="Cannot read"):
            load_overrides(tmp_path / "missing.json")

    def test_from_env_explicit_missing_file_raises(self, tmp_path):
        env = {"TERMCONFIG_FILE": str(tmp_path / "missing.json")}
        with pytest.raises(ValueError):
            load_overrides_from_env(env)

    def test_from_env_default_missing_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_CONFIG_FILE", str(tmp_path / "absent.json"))
        assert load_overrides_from_env({}) is None

    def test_from_env_default_present(self, tmp_path, monkeypatch):
        path = tmp_path / "termconfig.json"
        path.write_text(json.dumps({"max_fps": 60}))
        monkeypatch.setattr(config, "DEFAULT_CONFIG_FILE", str(path))
        assert load_overrides_from_env({}).max_fps == 60
