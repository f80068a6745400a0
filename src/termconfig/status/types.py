"""Status bar 数据类型

Formatter、Renderer 与 Host adapter 之间通信的数据类型。
所有类型均为不可变对象，每次刷新重新构造。
"""

from dataclasses import dataclass, field

# Color 为不透明字符串（hex 或 palette 名），不做校验
Color = str


@dataclass(frozen=True)
class Segment:
    """状态栏中的一个分段"""

    text: str
    background: Color
    foreground: Color


@dataclass(frozen=True)
class SetBackground:
    """设置背景色"""

    color: Color


@dataclass(frozen=True)
class SetForeground:
    """设置前景色"""

    color: Color


@dataclass(frozen=True)
class EmitText:
    """输出文本"""

    text: str


@dataclass(frozen=True)
class EmitGlyph:
    """输出分隔符 glyph"""

    glyph: str


RenderInstruction = SetBackground | SetForeground | EmitText | EmitGlyph


@dataclass(frozen=True)
class Palette:
    """Host 生效的配色（只取状态栏需要的字段）"""

    foreground: Color | None = None
    background: Color | None = None


@dataclass(frozen=True)
class PaneSnapshot:
    """Pane 快照

    Attributes:
        cwd: 当前工作目录，可能是普通路径或 file:// URI，None 表示不可用
    """

    cwd: str | None = None


@dataclass(frozen=True)
class WindowSnapshot:
    """Window 快照"""

    palette: Palette = field(default_factory=Palette)


@dataclass(frozen=True)
class BatteryInfo:
    """电池快照

    Attributes:
        state_of_charge: 电量，范围 [0, 1]
    """

    state_of_charge: float
