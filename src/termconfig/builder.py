"""Configuration builder

组装返回给 host 的静态配置：
- 外观：字体、配色、窗口装饰、透明度
- 标签栏/标题栏颜色
- 帧率上限
- 平台相关的环境变量与键位表

用户覆盖配置（JSON）经 pydantic 校验后合并。
"""

import os
import socket
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import config
from .core.platform import Platform, detect_platform, environment_variables
from .keys.bindings import KeyBinding, default_key_bindings
from .telemetry import get_logger

logger = get_logger(__name__)


class WindowFrame(BaseModel):
    """窗口标题栏"""

    model_config = ConfigDict(frozen=True)

    font_family: str
    font_size: float
    active_titlebar_bg: str
    inactive_titlebar_bg: str


class TabColors(BaseModel):
    """单个 tab 的前景/背景色"""

    model_config = ConfigDict(frozen=True)

    bg_color: str
    fg_color: str


class TabBarColors(BaseModel):
    model_config = ConfigDict(frozen=True)

    active_tab: TabColors
    inactive_tab: TabColors


class ConfigOverrides(BaseModel):
    """用户覆盖配置，未知字段直接拒绝"""

    model_config = ConfigDict(extra="forbid")

    font_family: str | None = None
    font_size: float | None = Field(default=None, gt=0)
    line_height: float | None = Field(default=None, gt=0)
    color_scheme: str | None = None
    window_decorations: str | None = None
    window_background_opacity: float | None = Field(default=None, ge=0, le=1)
    use_fancy_tab_bar: bool | None = None
    animation_fps: int | None = Field(default=None, gt=0)
    max_fps: int | None = Field(default=None, gt=0)


class TerminalConfig(BaseModel):
    """返回给 host 的完整配置"""

    model_config = ConfigDict(frozen=True)

    font_family: str
    font_size: float
    line_height: float
    color_scheme: str
    window_decorations: str
    window_background_opacity: float
    use_fancy_tab_bar: bool
    macos_window_background_blur: int | None = None
    window_frame: WindowFrame
    tab_bar: TabBarColors
    animation_fps: int
    max_fps: int
    set_environment_variables: dict[str, str] = Field(default_factory=dict)
    keys: tuple[KeyBinding, ...] = ()

    def to_host_dict(self) -> dict[str, Any]:
        """转换为 host 配置键名的字典"""
        data: dict[str, Any] = {
            "font": {"family": self.font_family},
            "font_size": self.font_size,
            "line_height": self.line_height,
            "color_scheme": self.color_scheme,
            "window_decorations": self.window_decorations,
            "window_background_opacity": self.window_background_opacity,
            "use_fancy_tab_bar": self.use_fancy_tab_bar,
        }
        if self.macos_window_background_blur is not None:
            data["macos_window_background_blur"] = self.macos_window_background_blur

        data["window_frame"] = {
            "font": {"family": self.window_frame.font_family},
            "font_size": self.window_frame.font_size,
            "active_titlebar_bg": self.window_frame.active_titlebar_bg,
            "inactive_titlebar_bg": self.window_frame.inactive_titlebar_bg,
        }
        data["colors"] = {"tab_bar": self.tab_bar.model_dump()}
        data["animation_fps"] = self.animation_fps
        data["max_fps"] = self.max_fps

        if self.set_environment_variables:
            data["set_environment_variables"] = dict(self.set_environment_variables)
        data["keys"] = [binding.to_host() for binding in self.keys]
        return data


def load_overrides(path: str | Path) -> ConfigOverrides:
    """读取并校验用户覆盖配置

    Args:
        path: JSON 文件路径

    Returns:
        校验后的覆盖配置

    Raises:
        ValueError: 文件不存在、不可读或内容不合法
    """
    path = Path(path).expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Cannot read config overrides {path}: {e}") from e

    try:
        return ConfigOverrides.model_validate_json(text)
    except ValidationError as e:
        raise ValueError(f"Invalid config overrides in {path}: {e}") from e


def resolve_config_file(env: Mapping[str, str]) -> Path:
    """配置文件路径：环境变量优先，否则默认路径"""
    return Path(env.get(config.OVERRIDES_FILE_ENV) or config.DEFAULT_CONFIG_FILE).expanduser()


def load_overrides_from_env(env: Mapping[str, str]) -> ConfigOverrides | None:
    """按环境加载覆盖配置

    环境变量显式指定的文件必须存在；默认路径不存在时视为无覆盖。
    """
    path = resolve_config_file(env)
    if config.OVERRIDES_FILE_ENV not in env and not path.exists():
        return None
    return load_overrides(path)


def build_config(
    platform: Platform | None = None,
    env: Mapping[str, str] | None = None,
    overrides: ConfigOverrides | None = None,
) -> TerminalConfig:
    """构造 TerminalConfig

    Args:
        platform: 目标平台，None 时自动检测
        env: 进程环境，None 时使用 os.environ
        overrides: 用户覆盖配置

    Returns:
        不可变的 TerminalConfig
    """
    if platform is None:
        platform = detect_platform()
    if env is None:
        env = os.environ

    home_dir = env.get("HOME") or str(Path.home())
    keys = default_key_bindings(
        platform,
        home_dir=home_dir,
        shell=env.get("SHELL"),
        config_file=str(resolve_config_file(env)),
    )

    values: dict[str, Any] = {
        "font_family": config.FONT_FAMILY,
        "font_size": config.FONT_SIZE,
        "line_height": config.LINE_HEIGHT,
        "color_scheme": config.COLOR_SCHEME,
        "window_decorations": config.WINDOW_DECORATIONS,
        "window_background_opacity": config.WINDOW_BACKGROUND_OPACITY,
        "use_fancy_tab_bar": config.USE_FANCY_TAB_BAR,
        "animation_fps": config.ANIMATION_FPS,
        "max_fps": config.MAX_FPS,
    }
    if overrides is not None:
        values.update(overrides.model_dump(exclude_none=True))

    if platform == Platform.DARWIN:
        values["macos_window_background_blur"] = config.MACOS_WINDOW_BACKGROUND_BLUR

    terminal_config = TerminalConfig(
        **values,
        window_frame=WindowFrame(
            font_family=values["font_family"],
            font_size=config.WINDOW_FRAME_FONT_SIZE,
            active_titlebar_bg=config.ACTIVE_TITLEBAR_BG,
            inactive_titlebar_bg=config.INACTIVE_TITLEBAR_BG,
        ),
        tab_bar=TabBarColors(
            active_tab=TabColors(bg_color=config.ACTIVE_TAB_BG, fg_color=config.ACTIVE_TAB_FG),
            inactive_tab=TabColors(
                bg_color=config.INACTIVE_TAB_BG, fg_color=config.INACTIVE_TAB_FG
            ),
        ),
        set_environment_variables=environment_variables(platform, env),
        keys=keys,
    )

    logger.info(f"termconfig loaded on {socket.gethostname()} ({platform.value})")
    return terminal_config
