"""プリファレンスファイル配置のための共通関数。"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

__all__ = [
    "CONFIG_DIR_ENV_KEY",
    "PREFERENCES_FILENAME",
    "get_app_config_dir",
    "get_preferences_path",
]

APP_DIR_NAME = "DiscordPresence"
PREFERENCES_FILENAME = "preferences.ini"
CONFIG_DIR_ENV_KEY = "DISCORD_PRESENCE_CONFIG_DIR"


def _platform_base(environ: Mapping[str, str]) -> Path:
    if os.name == "nt":
        appdata = environ.get("APPDATA") or environ.get("LOCALAPPDATA")
        if appdata:
            return Path(appdata) / APP_DIR_NAME
    xdg_config = environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config) if xdg_config else Path.home() / ".config"
    return base / APP_DIR_NAME.lower()


def get_app_config_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """プリファレンスを保存するディレクトリを返す。

    ``DISCORD_PRESENCE_CONFIG_DIR`` が設定されていればそれを優先し、
    そうでなければプラットフォームごとのユーザー設定ディレクトリを用いる。
    """

    env = os.environ if environ is None else environ
    override = env.get(CONFIG_DIR_ENV_KEY, "").strip()
    if override:
        return Path(override).expanduser()
    return _platform_base(env)


def get_preferences_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """既定の INI 形式プリファレンスファイルのパスを返す。"""

    return get_app_config_dir(environ) / PREFERENCES_FILENAME
