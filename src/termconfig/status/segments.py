"""Status line assembly

把 host 快照组装成 cwd / 时间 / 电池 / 主机名 四个分段：
- 每个分段缺失数据时直接省略
- 分隔符始终锚定在上一个实际出现的分段背景色上
"""

import os
import socket
from collections.abc import Callable, Sequence
from datetime import datetime
from urllib.parse import unquote, urlparse

from .. import config
from .formatter import format_segments
from .types import (
    BatteryInfo,
    Color,
    PaneSnapshot,
    RenderInstruction,
    Segment,
    WindowSnapshot,
)

BatteryReader = Callable[[], Sequence[BatteryInfo]]


def _cwd_path(cwd: str) -> str:
    """file:// URI 转为本地路径"""
    if cwd.startswith("file://"):
        return unquote(urlparse(cwd).path)
    return cwd


def abbreviate_cwd(cwd: str | None, home: str | None = None) -> str:
    """缩写工作目录

    home 前缀替换为 ``~``，超过两级时只保留最后两级：
    ``/home/alice/projects/foo/bar`` -> ``.../foo/bar``

    Args:
        cwd: 工作目录（路径或 file:// URI）
        home: home 目录，None 时读取 $HOME

    Returns:
        缩写后的路径，cwd 不可用时返回空字符串
    """
    if not cwd:
        return ""

    path = _cwd_path(cwd)
    if home is None:
        home = os.environ.get("HOME")

    if home:
        home = home.rstrip("/")
        if home and (path == home or path.startswith(home + "/")):
            path = "~" + path[len(home):]

    parts = [part for part in path.split("/") if part]
    if len(parts) > 2:
        return f".../{parts[-2]}/{parts[-1]}"
    return path


def format_clock(now: datetime) -> str:
    """格式化时间，如 ``Mon Jan 1 00:00``（日期不补零）"""
    return f"{now:%a %b} {now.day} {now:%H:%M}"


def format_battery(batteries: Sequence[BatteryInfo]) -> str | None:
    """取第一个电源的电量百分比，无电源时返回 None"""
    for battery in batteries:
        return f"{battery.state_of_charge * 100:.0f}%"
    return None


def build_segments(
    pane: PaneSnapshot,
    window: WindowSnapshot,
    *,
    now: datetime,
    batteries: Sequence[BatteryInfo],
    hostname: str,
    home: str | None = None,
) -> list[Segment]:
    """按 cwd、时间、电池、主机名顺序构造分段"""
    fg: Color = window.palette.foreground or config.DEFAULT_FOREGROUND
    segments: list[Segment] = []

    cwd = abbreviate_cwd(pane.cwd, home)
    if cwd:
        segments.append(Segment(cwd, config.STATUS_BG_CWD, fg))

    segments.append(Segment(format_clock(now), config.STATUS_BG_CLOCK, fg))

    battery = format_battery(batteries)
    if battery:
        segments.append(Segment(battery, config.STATUS_BG_BATTERY, fg))

    segments.append(Segment(hostname, config.STATUS_BG_HOST, fg))
    return segments


def build_right_status(
    pane: PaneSnapshot,
    window: WindowSnapshot,
    *,
    now: datetime,
    batteries: Sequence[BatteryInfo] = (),
    hostname: str,
    home: str | None = None,
) -> list[RenderInstruction]:
    """构造右侧状态栏的渲染指令"""
    segments = build_segments(
        pane,
        window,
        now=now,
        batteries=batteries,
        hostname=hostname,
        home=home,
    )
    return format_segments(segments)


def right_status(
    pane: PaneSnapshot,
    window: WindowSnapshot,
    renderer: Callable[[list[RenderInstruction]], str],
    *,
    clock: Callable[[], datetime] = datetime.now,
    battery_reader: BatteryReader = lambda: (),
    hostname_reader: Callable[[], str] = socket.gethostname,
    home: str | None = None,
) -> str:
    """``(pane, window) -> str``：host adapter 接入的纯函数入口

    Args:
        pane: Pane 快照
        window: Window 快照
        renderer: host 方言渲染器（见 status.renderer）
        clock: 当前时间
        battery_reader: 电池读取
        hostname_reader: 主机名读取
        home: home 目录，None 时读取 $HOME

    Returns:
        host 可直接显示的状态字符串
    """
    instructions = build_right_status(
        pane,
        window,
        now=clock(),
        batteries=battery_reader(),
        hostname=hostname_reader(),
        home=home,
    )
    return renderer(instructions)
