"""iTerm2 host adapter for termconfig."""

from .adapter import ITerm2Host

__all__ = ["ITerm2Host"]
