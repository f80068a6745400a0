"""Async wrapper around the tmux command line."""

import asyncio
import logging

logger = logging.getLogger(__name__)


class TmuxClient:
    """Runs tmux commands against the default server or a given socket.

    Failures (non-zero exit, missing binary) are logged and reported as
    ``None`` / ``False`` so a status refresh never raises.
    """

    def __init__(self, socket_path: str | None = None):
        self._socket_path = socket_path

    def _command(self, args: tuple[str, ...]) -> list[str]:
        if self._socket_path:
            return ["tmux", "-S", self._socket_path, *args]
        return ["tmux", *args]

    async def run(self, *args: str) -> str | None:
        """Run ``tmux <args>`` and return its stdout, or None on failure."""
        cmd = self._command(args)
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()
        except OSError as e:
            logger.error(f"Cannot run tmux: {e}")
            return None

        if proc.returncode != 0:
            logger.warning(f"{' '.join(cmd)} exited {proc.returncode}: {stderr.decode().strip()}")
            return None
        return stdout.decode()

    async def display_message(self, fmt: str, target: str | None = None) -> str | None:
        """Expand a format string such as ``#{pane_current_path}``.

        Args:
            fmt: tmux format string
            target: Target pane (e.g. "%0"); the current pane when None

        Returns:
            The expanded value without its trailing newline, or None on failure
        """
        args = ["display-message", "-p"]
        if target:
            args += ["-t", target]
        output = await self.run(*args, fmt)
        return None if output is None else output.rstrip("\n")

    async def set_option(self, name: str, value: str, global_: bool = True) -> bool:
        """``set-option [-g] name value``; returns whether tmux accepted it."""
        args = ["set-option", "-g"] if global_ else ["set-option"]
        return await self.run(*args, name, value) is not None
