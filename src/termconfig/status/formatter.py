"""Powerline-style status segment formatter."""

from collections.abc import Iterable

from .types import (
    Color,
    EmitGlyph,
    EmitText,
    RenderInstruction,
    Segment,
    SetBackground,
    SetForeground,
)

SOLID_LEFT_ARROW = "\ue0b2"
SOLID_RIGHT_ARROW = "\ue0b0"

# Background used for the separator when a non-first segment has no predecessor color
NO_COLOR = "none"


def format_section(
    text: str,
    bg: Color,
    fg: Color,
    is_first: bool,
    prev_bg: Color | None = None,
) -> list[RenderInstruction]:
    """Format one status section.

    Non-first sections are prefixed with a separator glyph drawn in the
    section's background over the previous section's background.

    Args:
        text: Section text (may be empty)
        bg: Section background
        fg: Section foreground
        is_first: Whether this is the leftmost section
        prev_bg: Background of the previous section

    Returns:
        Render instructions for this section
    """
    section: list[RenderInstruction] = []

    if not is_first:
        section.append(SetBackground(prev_bg or NO_COLOR))
        section.append(SetForeground(bg))
        section.append(EmitGlyph(SOLID_LEFT_ARROW))

    section.append(SetBackground(bg))
    section.append(SetForeground(fg))
    section.append(EmitText(f" {text} "))

    return section


def format_segments(segments: Iterable[Segment]) -> list[RenderInstruction]:
    """Chain segments left to right, anchoring each separator on the previous background."""
    instructions: list[RenderInstruction] = []
    prev_bg: Color | None = None
    is_first = True

    for segment in segments:
        instructions.extend(
            format_section(
                segment.text,
                segment.background,
                segment.foreground,
                is_first,
                prev_bg,
            )
        )
        prev_bg = segment.background
        is_first = False

    return instructions
