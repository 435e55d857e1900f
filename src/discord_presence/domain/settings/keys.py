"""プリファレンスのキーと選択肢の定義。"""

from __future__ import annotations

from enum import Enum

__all__ = ["ElapsedTimeReset", "PLUGIN_ID", "Setting"]

PLUGIN_ID = "discord_presence"


class Setting(str, Enum):
    """バッキングストアで使用するキー名。"""

    USE_PROJECT_SETTINGS = "useProjectSettings"
    SHOW_FILE_NAME = "showFileName"
    SHOW_PROJECT_NAME = "showProjectName"
    SHOW_ELAPSED_TIME = "showElapsedTime"
    SHOW_LANGUAGE_ICON = "showLanguageIcon"
    SHOW_RICH_PRESENCE = "showRichPresence"
    RESET_ELAPSED_TIME = "resetElapsedTime"
    PROJECT_NAME = "projectName"
    USE_CUSTOM_APP = "useCustomApplication"
    CUSTOM_APP_ID = "customApplicationId"
    USE_CUSTOM_WORDING = "useCustomWording"
    CUSTOM_DETAILS_WORDING = "customDetailsWording"
    CUSTOM_STATE_WORDING = "customStateWording"


class ElapsedTimeReset(str, Enum):
    """経過時間をリセットする契機。``resetElapsedTime`` の値として保存される。"""

    ON_STARTUP = "resetElapsedTimeOnStartup"
    ON_NEW_PROJECT = "resetElapsedTimeOnNewProject"
    ON_NEW_FILE = "resetElapsedTimeOnNewFile"
