"""iTerm2 Host Adapter

iTerm2 状态栏组件只能显示纯文本：
- cwd 读取当前 session 的 ``path`` 变量
- 前景色读取当前 session profile 的 foreground_color
- 状态字符串写入 session 变量 ``user.rightStatus``，
  通过 "Interpolated String" 组件 ``\\(user.rightStatus)`` 显示
"""

import logging

import iterm2

from termconfig import config
from termconfig.adapters.base import HostAdapter
from termconfig.events import EventRegistry
from termconfig.status.renderer import render_plain
from termconfig.status.types import Palette, PaneSnapshot, RenderInstruction, WindowSnapshot

logger = logging.getLogger(__name__)


def _color_to_hex(color) -> str | None:
    """iTerm2 Color (0-255 分量) 转 hex"""
    if color is None:
        return None
    try:
        return f"#{int(color.red):02x}{int(color.green):02x}{int(color.blue):02x}"
    except (AttributeError, TypeError, ValueError) as e:
        logger.debug(f"Failed to convert iTerm2 color: {e}")
        return None


class ITerm2Host(HostAdapter):
    """iTerm2 实现的 HostAdapter"""

    def __init__(self, connection: iterm2.Connection, events: EventRegistry | None = None):
        """
        Args:
            connection: iTerm2 连接
            events: 生命周期事件注册表
        """
        super().__init__(events)
        self._connection = connection

    @property
    def name(self) -> str:
        return "iterm2"

    async def _current_session(self) -> iterm2.Session | None:
        """获取当前焦点 session"""
        app = await iterm2.async_get_app(self._connection)
        if app is None:
            return None
        window = app.current_terminal_window
        if window is None or window.current_tab is None:
            return None
        return window.current_tab.current_session

    async def get_pane(self) -> PaneSnapshot:
        session = await self._current_session()
        if session is None:
            return PaneSnapshot()
        path = await session.async_get_variable("path")
        return PaneSnapshot(cwd=path or None)

    async def get_window(self) -> WindowSnapshot:
        session = await self._current_session()
        if session is None:
            return WindowSnapshot()
        profile = await session.async_get_profile()
        return WindowSnapshot(
            palette=Palette(
                foreground=_color_to_hex(profile.foreground_color),
                background=_color_to_hex(profile.background_color),
            )
        )

    async def set_right_status(self, text: str) -> None:
        session = await self._current_session()
        if session is None:
            logger.debug("No active iTerm2 session, skipping status update")
            return
        await session.async_set_variable(config.ITERM2_STATUS_VARIABLE, text)

    def render(self, instructions: list[RenderInstruction]) -> str:
        return render_plain(instructions)
