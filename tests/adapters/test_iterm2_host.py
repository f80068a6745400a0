"""iTerm2 Host Adapter 测试"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock, patch

import pytest

from termconfig import config
from termconfig.adapters.iterm2 import ITerm2Host
from termconfig.adapters.iterm2.adapter import _color_to_hex
from termconfig.status.types import EmitText, PaneSnapshot, SetBackground


def _color(red, green, blue):
    return SimpleNamespace(red=red, green=green, blue=blue)


@pytest.fixture
def session():
    """模拟当前焦点 session"""
    session = Mock()
    session.async_get_variable = AsyncMock(return_value="/Users/alice/src/app")
    session.async_set_variable = AsyncMock()
    session.async_get_profile = AsyncMock(
        return_value=SimpleNamespace(
            foreground_color=_color(230, 225, 207),
            background_color=_color(15, 20, 25),
        )
    )
    return session


@pytest.fixture
def app(session):
    tab = SimpleNamespace(current_session=session)
    window = SimpleNamespace(current_tab=tab)
    return SimpleNamespace(current_terminal_window=window)


class TestColorToHex:
    def test_components(self):
        assert _color_to_hex(_color(230, 225, 207)) == "#e6e1cf"

    def test_none(self):
        assert _color_to_hex(None) is None

    def test_invalid(self):
        assert _color_to_hex(object()) is None


class TestITerm2Host:
    """ITerm2Host 测试"""

    @pytest.mark.asyncio
    async def test_get_pane(self, app, session):
        host = ITerm2Host(Mock())
        with patch(
            "termconfig.adapters.iterm2.adapter.iterm2.async_get_app",
            new_callable=AsyncMock,
            return_value=app,
        ):
            pane = await host.get_pane()

        assert pane == PaneSnapshot(cwd="/Users/alice/src/app")
        session.async_get_variable.assert_awaited_once_with("path")

    @pytest.mark.asyncio
    async def test_get_window_reads_profile(self, app):
        host = ITerm2Host(Mock())
        with patch(
            "termconfig.adapters.iterm2.adapter.iterm2.async_get_app",
            new_callable=AsyncMock,
            return_value=app,
        ):
            window = await host.get_window()

        assert window.palette.foreground == "#e6e1cf"
        assert window.palette.background == "#0f1419"

    @pytest.mark.asyncio
    async def test_no_window(self):
        host = ITerm2Host(Mock())
        app = SimpleNamespace(current_terminal_window=None)
        with patch(
            "termconfig.adapters.iterm2.adapter.iterm2.async_get_app",
            new_callable=AsyncMock,
            return_value=app,
        ):
            assert await host.get_pane() == PaneSnapshot()
            await host.set_right_status("ignored")

    @pytest.mark.asyncio
    async def test_set_right_status(self, app, session):
        host = ITerm2Host(Mock())
        with patch(
            "termconfig.adapters.iterm2.adapter.iterm2.async_get_app",
            new_callable=AsyncMock,
            return_value=app,
        ):
            await host.set_right_status(" ~ ")

        session.async_set_variable.assert_awaited_once_with(config.ITERM2_STATUS_VARIABLE, " ~ ")

    def test_render_is_plain(self):
        host = ITerm2Host(Mock())
        assert host.render([SetBackground("#000000"), EmitText(" host ")]) == " host "
