"""Keybinding table

默认键位表，按平台选择 super/alt 修饰键：
- macOS: CMD / OPT
- 其他: CTRL / ALT
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from .. import config
from ..core.platform import Platform, modifier_aliases
from .actions import (
    Action,
    ActivateCommandPalette,
    ClearScrollback,
    CloseCurrentPane,
    CloseCurrentTab,
    PaneSelect,
    PasteFrom,
    SendKey,
    SendString,
    ShowLauncher,
    SpawnCommandInNewTab,
    SplitHorizontal,
    SplitVertical,
)


class KeyBinding(BaseModel):
    """单条键位绑定"""

    model_config = ConfigDict(frozen=True)

    key: str
    mods: str | None = None
    action: Action

    def to_host(self) -> dict[str, Any]:
        data: dict[str, Any] = {"key": self.key}
        if self.mods:
            data["mods"] = self.mods
        data["action"] = self.action.to_host()
        return data


def _login_shell(shell: str, command: str) -> tuple[str, ...]:
    """通过交互式 login shell 执行命令，保证加载用户环境"""
    return (shell, "-l", "-i", "-c", command)


def default_key_bindings(
    platform: Platform,
    *,
    home_dir: str,
    shell: str | None,
    config_file: str,
) -> tuple[KeyBinding, ...]:
    """构造默认键位表

    Args:
        platform: 当前平台
        home_dir: home 目录（新 tab 的 cwd）
        shell: 用户 shell，None 时使用 config.DEFAULT_SHELL
        config_file: 配置文件路径（SUPER+, 用编辑器打开）

    Returns:
        不可变的键位元组
    """
    super_mod, alt_mod = modifier_aliases(platform)
    shell = shell or config.DEFAULT_SHELL

    bindings = [
        # 按词左移
        KeyBinding(key="LeftArrow", mods=alt_mod, action=SendString(string="\x1bb")),
        # 按词右移
        KeyBinding(key="RightArrow", mods=alt_mod, action=SendString(string="\x1bf")),
        # 向后删除一个词
        KeyBinding(key="Backspace", mods=alt_mod, action=SendKey(mods="CTRL", key="w")),
        # 删除整行
        KeyBinding(key="Backspace", mods=super_mod, action=SendKey(mods="CTRL", key="u")),
        # 用编辑器打开配置文件
        KeyBinding(
            key=",",
            mods="SUPER",
            action=SpawnCommandInNewTab(
                cwd=home_dir,
                args=_login_shell(shell, f"{config.EDITOR_COMMAND} {config_file}"),
            ),
        ),
        KeyBinding(key="F3", mods=super_mod, action=ShowLauncher()),
        KeyBinding(key="d", mods=f"{super_mod}|SHIFT", action=SplitVertical()),
        KeyBinding(key="d", mods=super_mod, action=SplitHorizontal()),
        # pane 选择：默认字母表 / 数字标签 / 与当前 pane 交换
        KeyBinding(key="8", mods="CTRL", action=PaneSelect()),
        KeyBinding(
            key="9",
            mods="CTRL",
            action=PaneSelect(alphabet=config.PANE_SELECT_NUMERIC_ALPHABET),
        ),
        KeyBinding(key="0", mods="CTRL", action=PaneSelect(mode="SwapWithActive")),
        KeyBinding(key="k", mods=super_mod, action=ClearScrollback()),
        KeyBinding(key="w", mods=super_mod, action=CloseCurrentPane(confirm=True)),
        KeyBinding(key="w", mods=f"{super_mod}|SHIFT", action=CloseCurrentTab(confirm=True)),
        # 行首 / 行尾
        KeyBinding(key="LeftArrow", mods=super_mod, action=SendKey(key="Home")),
        KeyBinding(key="RightArrow", mods=super_mod, action=SendKey(key="End")),
        KeyBinding(key="p", mods=f"{super_mod}|SHIFT", action=ActivateCommandPalette()),
        KeyBinding(
            key="F1",
            mods="CTRL|SHIFT",
            action=SpawnCommandInNewTab(
                cwd=home_dir,
                args=_login_shell(shell, f"ssh {config.SSH_HOST}"),
            ),
        ),
        # 当前目录打开编辑器
        KeyBinding(
            key="e",
            mods=f"{super_mod}|{alt_mod}",
            action=SpawnCommandInNewTab(args=_login_shell(shell, config.EDITOR_COMMAND)),
        ),
    ]

    if platform == Platform.WINDOWS:
        bindings.append(
            KeyBinding(key="v", mods="CTRL|SHIFT", action=PasteFrom(source="Clipboard"))
        )

    return tuple(bindings)
