"""Host Adapter 抽象接口

定义 host（显示状态栏的终端）的统一接口，支持不同后端：
- tmux
- iTerm2
- console（本地预览）

设计原则：
1. 最小接口：只读取快照、推送状态字符串
2. 状态计算为纯函数（status.right_status），adapter 只负责 IO
3. 异步优先：所有 IO 操作都是 async
"""

import socket
from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime

import psutil

from .. import config
from ..events import UPDATE_STATUS, EventRegistry
from ..status.segments import build_right_status, right_status
from ..status.types import BatteryInfo, PaneSnapshot, RenderInstruction, WindowSnapshot
from ..telemetry import get_logger, metrics

logger = get_logger(__name__)


def read_batteries() -> list[BatteryInfo]:
    """读取本机电池，无电池或平台不支持时返回空列表"""
    try:
        battery = psutil.sensors_battery()
    except (AttributeError, NotImplementedError, OSError) as e:
        logger.debug(f"Battery sensor unavailable: {e}")
        return []

    if battery is None:
        return []
    return [BatteryInfo(state_of_charge=battery.percent / 100)]


class HostAdapter(ABC):
    """Host 适配器抽象接口

    使用示例:
        host = TmuxHost()
        text = await host.update_status()
    """

    def __init__(self, events: EventRegistry | None = None):
        self.events = events or EventRegistry()
        self.last_status: str | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """适配器名称（如 "tmux", "iterm2"）"""

    @abstractmethod
    async def get_pane(self) -> PaneSnapshot:
        """读取当前 pane 快照"""

    @abstractmethod
    async def get_window(self) -> WindowSnapshot:
        """读取当前 window 快照"""

    @abstractmethod
    async def set_right_status(self, text: str) -> None:
        """推送右侧状态字符串"""

    @abstractmethod
    def render(self, instructions: list[RenderInstruction]) -> str:
        """渲染为 host 方言"""

    # 可选方法（有默认实现）

    def battery_info(self) -> Sequence[BatteryInfo]:
        return read_batteries()

    def hostname(self) -> str:
        return socket.gethostname()

    def now(self) -> datetime:
        return datetime.now()

    async def snapshots(self) -> tuple[PaneSnapshot, WindowSnapshot]:
        """读取 pane / window 快照

        读取失败时降级为空快照（对应分段省略），不向上抛出。
        """
        try:
            pane = await self.get_pane()
        except Exception as e:
            logger.warning(f"[{self.name}] Failed to read pane snapshot: {e}")
            if config.METRICS_ENABLED:
                metrics.inc("status.errors", {"host": self.name, "stage": "pane"})
            pane = PaneSnapshot()

        try:
            window = await self.get_window()
        except Exception as e:
            logger.warning(f"[{self.name}] Failed to read window snapshot: {e}")
            if config.METRICS_ENABLED:
                metrics.inc("status.errors", {"host": self.name, "stage": "window"})
            window = WindowSnapshot()

        return pane, window

    def compose(self, pane: PaneSnapshot, window: WindowSnapshot) -> list[RenderInstruction]:
        """用本 host 的时钟、电池、主机名构造渲染指令"""
        return build_right_status(
            pane,
            window,
            now=self.now(),
            batteries=self.battery_info(),
            hostname=self.hostname(),
        )

    async def update_status(self) -> str:
        """刷新一次状态栏并触发 update-status 事件

        Returns:
            推送给 host 的状态字符串
        """
        pane, window = await self.snapshots()
        text = right_status(
            pane,
            window,
            self.render,
            clock=self.now,
            battery_reader=self.battery_info,
            hostname_reader=self.hostname,
        )

        await self.set_right_status(text)
        self.last_status = text
        if config.METRICS_ENABLED:
            metrics.inc("status.refresh", {"host": self.name})
            metrics.gauge("status.length", len(text), {"host": self.name})

        await self.events.emit(UPDATE_STATUS, text)
        return text
