"""termconfig CLI entry point."""

import asyncio
import io
import json
import os
import socket
from datetime import datetime

import click
from rich.console import Console

from termconfig import config
from termconfig.adapters import HOST_TYPES, create_host_adapter, detect_host_type, read_batteries
from termconfig.adapters.console import ConsoleHost, current_cwd
from termconfig.builder import TerminalConfig, build_config, load_overrides_from_env
from termconfig.core.platform import Platform, detect_platform
from termconfig.runtime import StatusRuntime
from termconfig.status.renderer import render_ansi, render_plain, render_tmux, to_format_items
from termconfig.status.segments import build_right_status, right_status
from termconfig.status.types import Palette, PaneSnapshot, WindowSnapshot
from termconfig.telemetry import setup_logging

_RENDERERS = {
    "ansi": render_ansi,
    "tmux": render_tmux,
    "plain": render_plain,
}


def _load_config(platform: Platform | None = None) -> TerminalConfig:
    try:
        overrides = load_overrides_from_env(os.environ)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    return build_config(platform=platform, overrides=overrides)


def _local_snapshots() -> tuple[PaneSnapshot, WindowSnapshot]:
    window = WindowSnapshot(
        palette=Palette(foreground=config.DEFAULT_FOREGROUND, background=config.DEFAULT_BACKGROUND)
    )
    return PaneSnapshot(cwd=current_cwd()), window


@click.group()
@click.version_option(package_name="termconfig")
@click.option(
    "--log-level",
    default=None,
    help="Logging level (default: $TERMCONFIG_LOG_LEVEL or INFO)",
)
def cli(log_level: str | None) -> None:
    """Terminal configuration and powerline status line."""
    setup_logging(log_level)


@cli.command("config")
@click.option(
    "--platform",
    "platform_name",
    type=click.Choice([p.value for p in Platform]),
    default=None,
    help="Target platform (default: detected)",
)
def config_cmd(platform_name: str | None) -> None:
    """Print the host configuration as JSON."""
    platform = Platform(platform_name) if platform_name else detect_platform()
    terminal_config = _load_config(platform)
    click.echo(json.dumps(terminal_config.to_host_dict(), indent=2, ensure_ascii=False))


@cli.command("status")
@click.option(
    "--format",
    "fmt",
    type=click.Choice([*_RENDERERS, "json"]),
    default="ansi",
    show_default=True,
)
def status_cmd(fmt: str) -> None:
    """Render the status line once for the current directory."""
    pane, window = _local_snapshots()
    if fmt == "json":
        instructions = build_right_status(
            pane,
            window,
            now=datetime.now(),
            batteries=read_batteries(),
            hostname=socket.gethostname(),
        )
        click.echo(json.dumps(to_format_items(instructions), ensure_ascii=False))
        return

    click.echo(
        right_status(
            pane,
            window,
            _RENDERERS[fmt],
            battery_reader=read_batteries,
            hostname_reader=socket.gethostname,
        )
    )


@cli.command("watch")
@click.option(
    "--host",
    "host_type",
    type=click.Choice(["auto", *HOST_TYPES]),
    default=config.HOST_ADAPTER,
    show_default=True,
)
@click.option("--interval", type=float, default=None, help="Refresh interval in seconds")
def watch_cmd(host_type: str, interval: float | None) -> None:
    """Keep the host's right status updated."""
    if host_type == "auto":
        host_type = detect_host_type()

    if host_type == "iterm2":
        import iterm2

        async def run_iterm2(connection: "iterm2.Connection") -> None:
            host = create_host_adapter("iterm2", connection=connection)
            await StatusRuntime(host, interval=interval).run_forever()

        iterm2.run_until_complete(run_iterm2)
        return

    host = create_host_adapter(host_type)
    try:
        asyncio.run(StatusRuntime(host, interval=interval).run_forever())
    except KeyboardInterrupt:
        click.echo("\nStopped")


@cli.command("serve")
@click.option(
    "--host",
    "host_type",
    type=click.Choice(["auto", "tmux", "console"]),
    default="auto",
    show_default=True,
)
@click.option("--port", type=int, default=config.PREVIEW_PORT, show_default=True)
def serve_cmd(host_type: str, port: int) -> None:
    """Serve the status line and configuration preview over HTTP."""
    from termconfig.web.app import main

    if host_type == "auto":
        host_type = "tmux" if detect_host_type() == "tmux" else "console"

    if host_type == "console":
        # 预览模式下不向 stdout 输出状态行
        host = ConsoleHost(console=Console(file=io.StringIO()))
    else:
        host = create_host_adapter(host_type)
    main(host, _load_config(), port)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
