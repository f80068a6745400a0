"""Render instructions to host rich-text dialects using Rich library."""

import io
import logging

from rich.color import Color as RichColor
from rich.color import ColorParseError
from rich.console import Console
from rich.style import Style
from rich.text import Text

from .. import config
from .formatter import NO_COLOR
from .types import (
    Color,
    EmitGlyph,
    EmitText,
    RenderInstruction,
    SetBackground,
    SetForeground,
)

logger = logging.getLogger(__name__)


def _iter_runs(instructions: list[RenderInstruction]):
    """Yield (text, bg, fg) runs with the colors in effect at each emit."""
    bg: Color | None = None
    fg: Color | None = None
    for instruction in instructions:
        if isinstance(instruction, SetBackground):
            bg = instruction.color
        elif isinstance(instruction, SetForeground):
            fg = instruction.color
        elif isinstance(instruction, EmitText):
            yield instruction.text, bg, fg
        elif isinstance(instruction, EmitGlyph):
            yield instruction.glyph, bg, fg


def _color_to_rich(color: Color | None, default: str = "default") -> str:
    """Convert a host color to a Rich color, falling back to the terminal default."""
    if not color or color == NO_COLOR:
        return default
    try:
        RichColor.parse(color)
    except ColorParseError as e:
        logger.debug(f"Unparseable color {color!r}: {e}")
        return default
    return color


def to_format_items(instructions: list[RenderInstruction]) -> list[dict]:
    """Convert to the ``wezterm.format`` item list shape."""
    items: list[dict] = []
    for instruction in instructions:
        if isinstance(instruction, SetBackground):
            items.append({"Background": {"Color": instruction.color}})
        elif isinstance(instruction, SetForeground):
            items.append({"Foreground": {"Color": instruction.color}})
        elif isinstance(instruction, EmitText):
            items.append({"Text": instruction.text})
        elif isinstance(instruction, EmitGlyph):
            items.append({"Text": instruction.glyph})
    return items


def to_rich_text(instructions: list[RenderInstruction]) -> Text:
    """Build a Rich Text with one styled span per emitted run."""
    rich_text = Text()
    for text, bg, fg in _iter_runs(instructions):
        style_kwargs: dict[str, str] = {}
        fg_color = _color_to_rich(fg)
        bg_color = _color_to_rich(bg)
        if fg_color != "default":
            style_kwargs["color"] = fg_color
        if bg_color != "default":
            style_kwargs["bgcolor"] = bg_color
        rich_text.append(text, style=Style(**style_kwargs) if style_kwargs else None)
    return rich_text


def _console(width: int, record: bool = False) -> Console:
    return Console(
        file=io.StringIO(),
        record=record,
        width=width,
        force_terminal=True,
        color_system="truecolor",
    )


def render_ansi(instructions: list[RenderInstruction]) -> str:
    """Render to a truecolor ANSI escape string."""
    rich_text = to_rich_text(instructions)
    console = _console(width=max(rich_text.cell_len, 1))
    with console.capture() as capture:
        console.print(rich_text, end="", soft_wrap=True)
    return capture.get()


def _tmux_color(color: Color | None) -> str:
    if not color or color == NO_COLOR:
        return "default"
    return color


def render_tmux(instructions: list[RenderInstruction]) -> str:
    """Render to a tmux status string (``#[bg=...,fg=...]text``).

    tmux expands both ``#`` formats and strftime ``%`` directives in
    status-right, so both are doubled in the emitted text.
    """
    parts = []
    for text, bg, fg in _iter_runs(instructions):
        parts.append(f"#[bg={_tmux_color(bg)},fg={_tmux_color(fg)}]")
        parts.append(text.replace("#", "##").replace("%", "%%"))
    return "".join(parts)


def render_plain(instructions: list[RenderInstruction]) -> str:
    """Render text and glyphs only, dropping all styling."""
    return "".join(text for text, _, _ in _iter_runs(instructions))


def render_svg(instructions: list[RenderInstruction], width: int | None = None) -> str:
    """Render to SVG for the preview app."""
    rich_text = to_rich_text(instructions)
    console = _console(width=width or config.PREVIEW_WIDTH, record=True)
    console.print(rich_text, end="")
    return console.export_svg(title="")
