"""termconfig - terminal configuration and powerline status line"""

from .builder import TerminalConfig, build_config
from .status import format_section, right_status

__all__ = [
    "TerminalConfig",
    "build_config",
    "format_section",
    "right_status",
]
