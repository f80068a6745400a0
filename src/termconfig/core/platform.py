"""Platform detection

Resolves the host platform from a target triple (e.g.
``aarch64-apple-darwin``, ``x86_64-unknown-linux-gnu``) and derives the
platform-specific parts of the configuration:

- modifier aliases used by the keybinding table
- PATH prefix injected into spawned programs
"""

import platform as _platform
import sys
from collections.abc import Mapping
from enum import Enum

from .. import config


class Platform(Enum):
    """Host operating system."""

    DARWIN = "darwin"
    LINUX = "linux"
    WINDOWS = "windows"
    OTHER = "other"


def default_target_triple() -> str:
    """Build a target triple for the running interpreter."""
    machine = _platform.machine() or "unknown"
    if sys.platform == "darwin":
        return f"{machine}-apple-darwin"
    if sys.platform.startswith("linux"):
        return f"{machine}-unknown-linux-gnu"
    if sys.platform in ("win32", "cygwin"):
        return f"{machine}-pc-windows-msvc"
    return f"{machine}-unknown-{sys.platform}"


def detect_platform(target_triple: str | None = None) -> Platform:
    """Detect platform from a target triple.

    Args:
        target_triple: Triple to inspect. Defaults to the running interpreter's.

    Returns:
        Matching Platform, OTHER if none matches
    """
    if target_triple is None:
        target_triple = default_target_triple()

    for candidate in (Platform.DARWIN, Platform.LINUX, Platform.WINDOWS):
        if candidate.value in target_triple:
            return candidate
    return Platform.OTHER


def modifier_aliases(platform: Platform) -> tuple[str, str]:
    """Return the (super, alt) modifier names for a platform."""
    if platform == Platform.DARWIN:
        return "CMD", "OPT"
    return "CTRL", "ALT"


def path_prefix(platform: Platform) -> str | None:
    """Directory prepended to PATH for spawned programs, if any."""
    if platform == Platform.DARWIN:
        return config.DARWIN_PATH_PREFIX
    if platform == Platform.LINUX:
        return config.LINUX_PATH_PREFIX
    return None


def environment_variables(platform: Platform, env: Mapping[str, str]) -> dict[str, str]:
    """Environment overrides for programs spawned by the terminal.

    Args:
        platform: Host platform
        env: Current process environment

    Returns:
        ``{"PATH": ...}`` with the platform prefix, or an empty dict
    """
    prefix = path_prefix(platform)
    if prefix is None:
        return {}

    current = env.get("PATH")
    if not current:
        return {"PATH": prefix}
    return {"PATH": f"{prefix}:{current}"}
