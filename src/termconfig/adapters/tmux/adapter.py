"""Tmux host adapter.

Reads the current pane's working directory from tmux and pushes the
status line into the global ``status-right`` option.
"""

import logging

from termconfig import config
from termconfig.adapters.base import HostAdapter
from termconfig.events import EventRegistry
from termconfig.status.renderer import render_tmux
from termconfig.status.types import Palette, PaneSnapshot, RenderInstruction, WindowSnapshot

from .client import TmuxClient

logger = logging.getLogger(__name__)


class TmuxHost(HostAdapter):
    """tmux implementation of HostAdapter.

    tmux exposes no palette, so the window snapshot carries the configured
    default foreground.
    """

    def __init__(
        self,
        socket_path: str | None = None,
        target: str | None = None,
        events: EventRegistry | None = None,
    ):
        """Initialize TmuxHost.

        Args:
            socket_path: Optional tmux socket path
            target: Optional target pane; defaults to the current pane
            events: Event registry for lifecycle callbacks
        """
        super().__init__(events)
        self._client = TmuxClient(socket_path=socket_path)
        self._target = target
        self._length_set = False

    @property
    def name(self) -> str:
        return "tmux"

    async def get_pane(self) -> PaneSnapshot:
        cwd = await self._client.display_message("#{pane_current_path}", target=self._target)
        return PaneSnapshot(cwd=cwd or None)

    async def get_window(self) -> WindowSnapshot:
        return WindowSnapshot(
            palette=Palette(
                foreground=config.DEFAULT_FOREGROUND,
                background=config.DEFAULT_BACKGROUND,
            )
        )

    async def set_right_status(self, text: str) -> None:
        # status-right is truncated at 40 cells by default
        if not self._length_set:
            self._length_set = await self._client.set_option(
                "status-right-length", str(config.TMUX_STATUS_RIGHT_LENGTH)
            )
        if not await self._client.set_option("status-right", text):
            logger.warning("Failed to set tmux status-right")

    def render(self, instructions: list[RenderInstruction]) -> str:
        return render_tmux(instructions)
