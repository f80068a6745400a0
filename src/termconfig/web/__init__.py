"""Preview web module."""

from .app import create_app, start_server
from .server import PreviewServer

__all__ = ["PreviewServer", "create_app", "start_server"]
