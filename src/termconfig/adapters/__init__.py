"""Host Adapters 模块

提供 host 适配器接口：
- HostAdapter: 适配器抽象基类
- create_host_adapter / detect_host_type: 适配器工厂
"""

from .base import HostAdapter, read_batteries
from .factory import HOST_TYPES, create_host_adapter, detect_host_type

__all__ = [
    "HostAdapter",
    "read_batteries",
    "HOST_TYPES",
    "create_host_adapter",
    "detect_host_type",
]
