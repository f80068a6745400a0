"""Timer - 状态栏刷新用的调度器

周期任务在首个 tick 立即执行，之后每隔 period 秒执行一次。
回调可以是同步函数或协程函数，单个回调失败只记录日志和 timer.errors 指标。

    timer = Timer()
    timer.register_interval("update-status", 1.0, host.update_status)
    task = asyncio.create_task(timer.run())
    ...
    timer.stop()
"""

import asyncio
import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from . import config
from .telemetry import get_logger, metrics

logger = get_logger(__name__)

Callback = Callable[[], Any]


@dataclass
class ScheduledTask:
    name: str
    callback: Callback
    period: float
    due: float = 0.0  # event loop time，0 表示下一个 tick 立即执行


class Timer:
    """单协程 tick 循环，按 due 时间驱动周期任务"""

    def __init__(self, tick_interval: float | None = None):
        self._tick_interval = tick_interval or config.TIMER_TICK_INTERVAL
        self._tasks: dict[str, ScheduledTask] = {}
        self._running = False

    def register_interval(self, name: str, interval: float, callback: Callback) -> None:
        """注册周期任务；同名任务被替换"""
        self._tasks[name] = ScheduledTask(name, callback, period=interval)
        logger.debug(f"[Timer] interval {name} every {interval}s")

    def unregister_interval(self, name: str) -> bool:
        return self._tasks.pop(name, None) is not None

    async def run(self) -> None:
        """tick 循环，直到 stop() 或被取消"""
        if self._running:
            logger.warning("[Timer] run() called while running")
            return

        self._running = True
        logger.debug(f"[Timer] tick every {self._tick_interval}s")
        try:
            while self._running:
                await self._tick(asyncio.get_running_loop().time())
                await asyncio.sleep(self._tick_interval)
        finally:
            self._running = False

    def stop(self) -> None:
        """下一次 tick 前退出"""
        self._running = False

    async def _tick(self, now: float) -> None:
        for task in list(self._tasks.values()):
            if now >= task.due:
                task.due = now + task.period
                await self._call(task)

    async def _call(self, task: ScheduledTask) -> None:
        try:
            result = task.callback()
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error(f"[Timer] {task.name} failed: {e}")
            if config.METRICS_ENABLED:
                metrics.inc("timer.errors", {"task": task.name})

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def interval_task_count(self) -> int:
        return len(self._tasks)
