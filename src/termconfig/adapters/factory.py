"""Adapter factory for creating host adapters."""

import logging
import os
from typing import TYPE_CHECKING

from termconfig import config

if TYPE_CHECKING:
    import iterm2

    from termconfig.adapters.base import HostAdapter
    from termconfig.events import EventRegistry

logger = logging.getLogger(__name__)

HOST_TYPES = ("tmux", "iterm2", "console")


def detect_host_type() -> str:
    """Detect host type from environment.

    Returns:
        "tmux" if $TMUX is set, "iterm2" inside iTerm2, otherwise "console"
    """
    if os.environ.get("TMUX"):
        return "tmux"
    if os.environ.get("TERM_PROGRAM") == "iTerm.app":
        return "iterm2"
    return "console"


def create_host_adapter(
    host_type: str | None = None,
    connection: "iterm2.Connection | None" = None,
    socket_path: str | None = None,
    events: "EventRegistry | None" = None,
) -> "HostAdapter":
    """Create a host adapter.

    Args:
        host_type: Host type ("tmux", "iterm2", "console", "auto").
                   Default from config.
        connection: iTerm2 connection (required for iterm2 host)
        socket_path: Tmux socket path (optional for tmux host)
        events: Event registry shared with the caller

    Returns:
        HostAdapter instance

    Raises:
        ValueError: If host type is unknown or required connection missing
    """
    if host_type is None:
        host_type = config.HOST_ADAPTER

    if host_type == "auto":
        host_type = detect_host_type()
        logger.info(f"Auto-detected host type: {host_type}")

    if host_type == "tmux":
        from termconfig.adapters.tmux import TmuxHost

        return TmuxHost(socket_path=socket_path, events=events)

    if host_type == "iterm2":
        if connection is None:
            raise ValueError("iTerm2 host requires connection")
        from termconfig.adapters.iterm2 import ITerm2Host

        return ITerm2Host(connection, events=events)

    if host_type == "console":
        from termconfig.adapters.console import ConsoleHost

        return ConsoleHost(live=True, events=events)

    raise ValueError(f"Unknown host type: {host_type}")
