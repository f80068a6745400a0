"""Key actions

The closed set of host actions a keybinding can trigger. Each action
serializes to the host's shape via ``to_host()``:

- unit actions serialize to their name (``"ShowLauncher"``)
- single-argument actions serialize to ``{name: value}``
- everything else serializes to ``{name: {field: value}}``
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class Action(BaseModel):
    """Base class for host actions."""

    model_config = ConfigDict(frozen=True)

    # Unit actions carry no arguments and serialize to a bare name
    unit: ClassVar[bool] = False
    # Field serialized as the bare value for single-argument actions
    positional: ClassVar[str | None] = None

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_host(self) -> str | dict[str, Any]:
        if self.unit:
            return self.name
        if self.positional is not None:
            return {self.name: getattr(self, self.positional)}
        return {self.name: self.model_dump(exclude_none=True)}


class SendString(Action):
    """Send literal bytes to the pane."""

    positional: ClassVar[str | None] = "string"
    string: str


class SendKey(Action):
    """Send a synthesized key combination."""

    key: str
    mods: str | None = None


class SpawnCommandInNewTab(Action):
    """Spawn a command in a new tab."""

    args: tuple[str, ...]
    cwd: str | None = None


class ShowLauncher(Action):
    unit: ClassVar[bool] = True


class SplitVertical(Action):
    domain: str = "CurrentPaneDomain"


class SplitHorizontal(Action):
    domain: str = "CurrentPaneDomain"


class PaneSelect(Action):
    """Pane selection mode.

    ``alphabet`` sets the label characters; ``mode`` switches behaviour
    (e.g. ``"SwapWithActive"``).
    """

    alphabet: str | None = None
    mode: str | None = None


class ClearScrollback(Action):
    positional: ClassVar[str | None] = "erase_mode"
    erase_mode: str = "ScrollbackAndViewport"


class CloseCurrentPane(Action):
    confirm: bool = True


class CloseCurrentTab(Action):
    confirm: bool = True


class ActivateCommandPalette(Action):
    unit: ClassVar[bool] = True


class PasteFrom(Action):
    positional: ClassVar[str | None] = "source"
    source: str = "Clipboard"


ACTION_TYPES: tuple[type[Action], ...] = (
    SendString,
    SendKey,
    SpawnCommandInNewTab,
    ShowLauncher,
    SplitVertical,
    SplitHorizontal,
    PaneSelect,
    ClearScrollback,
    CloseCurrentPane,
    CloseCurrentTab,
    ActivateCommandPalette,
    PasteFrom,
)
