"""Status bar module

- format_section / format_segments: powerline 分段格式化
- build_right_status / right_status: 右侧状态栏组装
- render_*: host 方言渲染
"""

from .formatter import SOLID_LEFT_ARROW, SOLID_RIGHT_ARROW, format_section, format_segments
from .renderer import (
    render_ansi,
    render_plain,
    render_svg,
    render_tmux,
    to_format_items,
)
from .segments import abbreviate_cwd, build_right_status, build_segments, right_status
from .types import (
    BatteryInfo,
    EmitGlyph,
    EmitText,
    Palette,
    PaneSnapshot,
    Segment,
    SetBackground,
    SetForeground,
    WindowSnapshot,
)

__all__ = [
    # Formatter
    "SOLID_LEFT_ARROW",
    "SOLID_RIGHT_ARROW",
    "format_section",
    "format_segments",
    # Assembly
    "abbreviate_cwd",
    "build_segments",
    "build_right_status",
    "right_status",
    # Renderers
    "to_format_items",
    "render_ansi",
    "render_tmux",
    "render_plain",
    "render_svg",
    # Types
    "Segment",
    "SetBackground",
    "SetForeground",
    "EmitText",
    "EmitGlyph",
    "Palette",
    "PaneSnapshot",
    "WindowSnapshot",
    "BatteryInfo",
]
