"""Tests for adapter factory."""

from unittest.mock import Mock

import pytest

from termconfig.adapters import create_host_adapter, detect_host_type
from termconfig.adapters.console import ConsoleHost
from termconfig.adapters.iterm2 import ITerm2Host
from termconfig.adapters.tmux import TmuxHost
from termconfig.events import EventRegistry


class TestDetectHostType:
    """Tests for detect_host_type."""

    def test_tmux(self, monkeypatch):
        monkeypatch.setenv("TMUX", "/tmp/tmux-1000/default,1234,0")
        monkeypatch.setenv("TERM_PROGRAM", "iTerm.app")
        assert detect_host_type() == "tmux"

    def test_iterm2(self, monkeypatch):
        monkeypatch.delenv("TMUX", raising=False)
        monkeypatch.setenv("TERM_PROGRAM", "iTerm.app")
        assert detect_host_type() == "iterm2"

    def test_console(self, monkeypatch):
        monkeypatch.delenv("TMUX", raising=False)
        monkeypatch.setenv("TERM_PROGRAM", "WezTerm")
        assert detect_host_type() == "console"


class TestCreateHostAdapter:
    """Tests for create_host_adapter."""

    def test_tmux(self):
        events = EventRegistry()
        host = create_host_adapter("tmux", socket_path="/tmp/test.sock", events=events)
        assert isinstance(host, TmuxHost)
        assert host.events is events

    def test_iterm2_requires_connection(self):
        with pytest.raises(ValueError, match="requires connection"):
            create_host_adapter("iterm2")

    def test_iterm2(self):
        assert isinstance(create_host_adapter("iterm2", connection=Mock()), ITerm2Host)

    def test_console(self):
        assert isinstance(create_host_adapter("console"), ConsoleHost)

    def test_auto(self, monkeypatch):
        monkeypatch.setenv("TMUX", "/tmp/tmux-1000/default,1234,0")
        assert isinstance(create_host_adapter("auto"), TmuxHost)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown host type"):
            create_host_adapter("kitty")
