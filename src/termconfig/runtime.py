"""Runtime - 状态栏刷新循环

职责：
- 把 HostAdapter.update_status 注册为 Timer 周期任务
- 管理 Timer 生命周期（start/stop）

不负责：
- HostAdapter 创建（见 adapters.factory）
- 状态计算（见 status.segments）
"""

import asyncio

from . import config
from .adapters.base import HostAdapter
from .telemetry import get_logger
from .timer import Timer

logger = get_logger(__name__)

UPDATE_TASK = "update-status"


class StatusRuntime:
    """绑定 HostAdapter 与 Timer 的刷新循环"""

    def __init__(
        self,
        host: HostAdapter,
        interval: float | None = None,
        timer: Timer | None = None,
    ):
        """
        Args:
            host: 目标 host
            interval: 刷新间隔（秒），None 使用 config.STATUS_UPDATE_INTERVAL
            timer: 外部 Timer，None 时内部创建
        """
        self.host = host
        self.interval = interval or config.STATUS_UPDATE_INTERVAL
        self.timer = timer or Timer()
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """注册刷新任务并在后台启动 Timer"""
        if self.is_running:
            logger.warning("[Runtime] Already running")
            return
        self.timer.register_interval(UPDATE_TASK, self.interval, self.host.update_status)
        self._task = asyncio.create_task(self.timer.run())
        logger.info(f"[Runtime] Refreshing {self.host.name} status every {self.interval}s")

    async def stop(self) -> None:
        """停止 Timer 并等待主循环退出"""
        self.timer.stop()
        self.timer.unregister_interval(UPDATE_TASK)
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("[Runtime] Stopped")

    async def run_forever(self) -> None:
        """前台运行直到被取消"""
        await self.start()
        task = self._task
        try:
            if task is not None:
                await task
        finally:
            await self.stop()
