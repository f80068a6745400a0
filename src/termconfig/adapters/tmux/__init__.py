"""Tmux host adapter for termconfig."""

from .adapter import TmuxHost
from .client import TmuxClient

__all__ = ["TmuxHost", "TmuxClient"]
