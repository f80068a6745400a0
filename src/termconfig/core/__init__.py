"""Core module - platform utilities"""

from .platform import (
    Platform,
    detect_platform,
    environment_variables,
    modifier_aliases,
    path_prefix,
)

__all__ = [
    "Platform",
    "detect_platform",
    "modifier_aliases",
    "path_prefix",
    "environment_variables",
]
