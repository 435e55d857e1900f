"""設定ファイルの保存先など、パス関連のユーティリティ。"""

from __future__ import annotations

from .storage import (
    CONFIG_DIR_ENV_KEY,
    PREFERENCES_FILENAME,
    get_app_config_dir,
    get_preferences_path,
)

__all__ = [
    "CONFIG_DIR_ENV_KEY",
    "PREFERENCES_FILENAME",
    "get_app_config_dir",
    "get_preferences_path",
]
