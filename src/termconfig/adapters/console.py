"""Console host adapter.

Local preview host: reads the process working directory and prints the
ANSI-rendered status line to a Rich console.
"""

import logging
import os

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

from termconfig import config
from termconfig.adapters.base import HostAdapter
from termconfig.events import EventRegistry
from termconfig.status.renderer import render_ansi
from termconfig.status.types import Palette, PaneSnapshot, RenderInstruction, WindowSnapshot

logger = logging.getLogger(__name__)

# 清除整行，live 模式下防止较短的状态残留旧字符
_ERASE_LINE = str(Control((ControlType.ERASE_IN_LINE, 2)))


def current_cwd() -> str | None:
    """进程工作目录，目录已被删除等情况下返回 None"""
    try:
        return os.getcwd()
    except OSError as e:
        logger.debug(f"Working directory unavailable: {e}")
        return None


class ConsoleHost(HostAdapter):
    """Prints each refresh on its own line (or in place when ``live`` is set)."""

    def __init__(
        self,
        console: Console | None = None,
        live: bool = False,
        events: EventRegistry | None = None,
    ):
        super().__init__(events)
        self._console = console or Console()
        self._live = live

    @property
    def name(self) -> str:
        return "console"

    async def get_pane(self) -> PaneSnapshot:
        return PaneSnapshot(cwd=current_cwd())

    async def get_window(self) -> WindowSnapshot:
        return WindowSnapshot(
            palette=Palette(
                foreground=config.DEFAULT_FOREGROUND,
                background=config.DEFAULT_BACKGROUND,
            )
        )

    async def set_right_status(self, text: str) -> None:
        if self._live:
            self._console.file.write(f"{_ERASE_LINE}{text}\r")
        else:
            self._console.file.write(text + "\n")
        self._console.file.flush()

    def render(self, instructions: list[RenderInstruction]) -> str:
        return render_ansi(instructions)
