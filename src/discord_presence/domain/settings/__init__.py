"""Discord 表示設定のリーダー群。"""

from .keys import PLUGIN_ID, ElapsedTimeReset, Setting
from .listeners import SettingChangeListener, SettingChangeListeners
from .preferences import (
    GlobalPreferences,
    ProjectPreferences,
    UserPreferences,
    effective_preferences,
)

__all__ = [
    "PLUGIN_ID",
    "ElapsedTimeReset",
    "GlobalPreferences",
    "ProjectPreferences",
    "Setting",
    "SettingChangeListener",
    "SettingChangeListeners",
    "UserPreferences",
    "effective_preferences",
]
