"""Telemetry - 日志与指标

日志格式: [%(name)s] msg
计数器: status.refresh, status.errors, timer.errors, events.errors
gauge: status.length（最近一次推送的状态字符串长度）
"""

import logging
from collections import Counter

from . import config

_LOG_FORMAT = "[%(name)s] %(message)s"

Labels = dict[str, str]
MetricKey = tuple[str, tuple[tuple[str, str], ...]]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def setup_logging(level: str | None = None) -> None:
    """配置根 logger，level 为 None 时使用 config.LOG_LEVEL"""
    logging.basicConfig(
        level=(level or config.LOG_LEVEL).upper(),
        format=_LOG_FORMAT,
    )


class Metrics:
    """进程内指标

    同名指标按 labels 区分，labels 顺序无关：
    ``inc("status.errors", {"host": "tmux", "stage": "pane"})``
    """

    def __init__(self):
        self._counters: Counter[MetricKey] = Counter()
        self._gauges: dict[MetricKey, float] = {}

    def inc(self, name: str, labels: Labels | None = None, value: int = 1) -> None:
        self._counters[_metric_key(name, labels)] += value

    def gauge(self, name: str, value: float, labels: Labels | None = None) -> None:
        self._gauges[_metric_key(name, labels)] = value

    def get_counter(self, name: str, labels: Labels | None = None) -> int:
        return self._counters[_metric_key(name, labels)]

    def get_gauge(self, name: str, labels: Labels | None = None) -> float:
        return self._gauges.get(_metric_key(name, labels), 0.0)

    def reset(self) -> None:
        self._counters.clear()
        self._gauges.clear()


def _metric_key(name: str, labels: Labels | None) -> MetricKey:
    return name, tuple(sorted((labels or {}).items()))


metrics = Metrics()
