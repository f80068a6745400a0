"""CLI 测试"""

import json
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from termconfig.cli import cli
from termconfig.status.formatter import SOLID_LEFT_ARROW


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_overrides(monkeypatch, tmp_path):
    """隔离 HOME，避免读取用户配置"""
    monkeypatch.delenv("TERMCONFIG_FILE", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))


class TestConfigCommand:
    def test_prints_json(self, runner):
        result = runner.invoke(cli, ["config", "--platform", "linux"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["font"]["family"] == "0xProto Nerd Font"
        assert "set_environment_variables" in data

    def test_overrides_applied(self, runner, monkeypatch, tmp_path):
        path = tmp_path / "termconfig.json"
        path.write_text(json.dumps({"font_size": 13}))
        monkeypatch.setenv("TERMCONFIG_FILE", str(path))

        result = runner.invoke(cli, ["config", "--platform", "darwin"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["font_size"] == 13

    def test_invalid_overrides(self, runner, monkeypatch, tmp_path):
        path = tmp_path / "termconfig.json"
        path.write_text(json.dumps({"font_size": -1}))
        monkeypatch.setenv("TERMCONFIG_FILE", str(path))

        result = runner.invoke(cli, ["config"])
        assert result.exit_code == 1
        assert "Invalid config overrides" in result.output

    def test_missing_explicit_overrides(self, runner, monkeypatch, tmp_path):
        monkeypatch.setenv("TERMCONFIG_FILE", str(tmp_path / "missing.json"))
        result = runner.invoke(cli, ["config"])
        assert result.exit_code == 1
        assert "Cannot read config overrides" in result.output

    def test_unknown_platform(self, runner):
        result = runner.invoke(cli, ["config", "--platform", "beos"])
        assert result.exit_code == 2


class TestStatusCommand:
    @pytest.fixture(autouse=True)
    def fixed_host(self):
        with (
            patch("termconfig.cli.read_batteries", return_value=[]),
            patch("termconfig.cli.socket.gethostname", return_value="dev-box"),
        ):
            yield

    def test_plain(self, runner, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["status", "--format", "plain"])
        assert result.exit_code == 0, result.output
        assert result.output.endswith(f"{SOLID_LEFT_ARROW} dev-box \n")

    def test_tmux(self, runner):
        result = runner.invoke(cli, ["status", "--format", "tmux"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("#[bg=")

    def test_json(self, runner):
        result = runner.invoke(cli, ["status", "--format", "json"])
        assert result.exit_code == 0, result.output
        items = json.loads(result.output)
        assert items[-1] == {"Text": " dev-box "}

    def test_deleted_cwd_drops_directory_segment(self, runner, monkeypatch):
        monkeypatch.setattr(
            "termconfig.adapters.console.os.getcwd",
            Mock(side_effect=FileNotFoundError("deleted")),
        )
        result = runner.invoke(cli, ["status", "--format", "json"])
        assert result.exit_code == 0, result.output
        items = json.loads(result.output)
        assert items[0] == {"Background": {"Color": "#2a2a2a"}}
