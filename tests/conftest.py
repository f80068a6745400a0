"""Pytest 配置"""

from datetime import datetime

import pytest

from termconfig.status.types import Palette, PaneSnapshot, WindowSnapshot
from termconfig.telemetry import metrics


@pytest.fixture(autouse=True)
def reset_metrics():
    """每次测试前后重置指标"""
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture(autouse=True)
def allow_color(monkeypatch):
    """Rich 遵守 NO_COLOR，测试中统一移除"""
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture
def fixed_now():
    """2024-01-01 是周一"""
    return datetime(2024, 1, 1, 0, 0)


@pytest.fixture
def window():
    return WindowSnapshot(palette=Palette(foreground="#e6e1cf", background="#0f1419"))


@pytest.fixture
def pane():
    return PaneSnapshot(cwd="/home/alice/code/wezterm")
