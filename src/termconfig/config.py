"""termconfig 配置

配置分为以下几类：
- 外观配置：字体、配色、窗口装饰
- 标签栏配置：Tab 颜色
- 动画配置：帧率上限
- 键位配置：编辑器、SSH 目标
- 状态栏配置：分段颜色、刷新间隔
- 日志配置
"""

import os

# === 外观配置 ===
FONT_FAMILY = "0xProto Nerd Font"
FONT_SIZE = 15.5
LINE_HEIGHT = 1.1
COLOR_SCHEME = "ayu"
WINDOW_DECORATIONS = "RESIZE"
WINDOW_BACKGROUND_OPACITY = 0.9
USE_FANCY_TAB_BAR = True
MACOS_WINDOW_BACKGROUND_BLUR = 30  # 仅 macOS 生效

# === 窗口标题栏配置 ===
WINDOW_FRAME_FONT_SIZE = 12.0
ACTIVE_TITLEBAR_BG = "#000000"
INACTIVE_TITLEBAR_BG = "#111111"

# === 标签栏配置 ===
ACTIVE_TAB_BG = "#000000"
ACTIVE_TAB_FG = "#c0c0c0"
INACTIVE_TAB_BG = "#212121"
INACTIVE_TAB_FG = "#808080"

# === 动画配置 ===
ANIMATION_FPS = 60
MAX_FPS = 120

# === 平台 PATH 前缀 ===
DARWIN_PATH_PREFIX = "/opt/homebrew/bin"
LINUX_PATH_PREFIX = "/usr/local/bin"

# === 键位配置 ===
EDITOR_COMMAND = "nvim"  # 打开配置 / 新 tab 编辑器
SSH_HOST = "wolf-family"  # CTRL|SHIFT+F1 打开的 SSH 目标
DEFAULT_SHELL = "/bin/sh"  # $SHELL 缺失时使用
PANE_SELECT_NUMERIC_ALPHABET = "1234567890"

# === 状态栏配置 ===
STATUS_BG_CWD = "#1a1a1a"
STATUS_BG_CLOCK = "#2a2a2a"
STATUS_BG_BATTERY = "#3a3a3a"
STATUS_BG_HOST = "#000000"
DEFAULT_FOREGROUND = "#c0c0c0"  # palette 未提供 foreground 时使用
DEFAULT_BACKGROUND = "#000000"
STATUS_UPDATE_INTERVAL = 1.0  # 状态栏刷新间隔（秒）
TMUX_STATUS_RIGHT_LENGTH = 120  # tmux status-right-length
ITERM2_STATUS_VARIABLE = "user.rightStatus"  # iTerm2 状态栏插值变量

# === Timer 配置 ===
TIMER_TICK_INTERVAL = 0.5  # Timer tick 间隔（秒）

# === 预览服务配置 ===
PREVIEW_HOST = "127.0.0.1"
PREVIEW_PORT = 8766
PREVIEW_WIDTH = 100  # SVG 预览宽度（字符数）

# === 用户配置 ===
OVERRIDES_FILE_ENV = "TERMCONFIG_FILE"  # 用户覆盖配置 JSON 路径
DEFAULT_CONFIG_FILE = "~/.config/termconfig/termconfig.json"  # 未设置环境变量时的路径

# === 终端类型 ===
HOST_ADAPTER = os.environ.get("TERMCONFIG_HOST", "auto")  # auto / tmux / iterm2 / console

# === 日志配置 ===
LOG_LEVEL = os.environ.get("TERMCONFIG_LOG_LEVEL", "INFO")  # 日志级别

# === 指标配置 ===
METRICS_ENABLED = True  # 是否启用指标收集
