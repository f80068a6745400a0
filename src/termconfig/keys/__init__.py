"""Keybinding 模块

- actions: host 动作闭集
- bindings: 默认键位表
"""

from .actions import (
    ACTION_TYPES,
    Action,
    ActivateCommandPalette,
    ClearScrollback,
    CloseCurrentPane,
    CloseCurrentTab,
    PaneSelect,
    PasteFrom,
    SendKey,
    SendString,
    ShowLauncher,
    SpawnCommandInNewTab,
    SplitHorizontal,
    SplitVertical,
)
from .bindings import KeyBinding, default_key_bindings

__all__ = [
    "Action",
    "ACTION_TYPES",
    "SendString",
    "SendKey",
    "SpawnCommandInNewTab",
    "ShowLauncher",
    "SplitVertical",
    "SplitHorizontal",
    "PaneSelect",
    "ClearScrollback",
    "CloseCurrentPane",
    "CloseCurrentTab",
    "ActivateCommandPalette",
    "PasteFrom",
    "KeyBinding",
    "default_key_bindings",
]
