"""Discord への表示内容に関するユーザー設定のリーダー。"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from ...infrastructure.preferences import (
    PreferenceNode,
    PreferenceScope,
    create_preference_scope,
)
from ..projects import ProjectHandle
from .keys import PLUGIN_ID, ElapsedTimeReset, Setting
from .listeners import SettingChangeListener, SettingChangeListeners

LOGGER = logging.getLogger(__name__)

__all__ = [
    "GlobalPreferences",
    "ProjectPreferences",
    "UserPreferences",
    "effective_preferences",
]


class UserPreferences(Protocol):
    """Rich Presence の更新処理が参照する設定項目。"""

    def shows_file_name(self) -> bool: ...

    def shows_project_name(self) -> bool: ...

    def shows_elapsed_time(self) -> bool: ...

    def shows_language_icon(self) -> bool: ...

    def shows_rich_presence(self) -> bool: ...

    def resets_elapsed_time_on_startup(self) -> bool: ...

    def resets_elapsed_time_on_new_project(self) -> bool: ...

    def resets_elapsed_time_on_new_file(self) -> bool: ...

    def get_project_name(self) -> Optional[str]: ...

    def uses_custom_discord_application(self) -> bool: ...

    def get_discord_application_id(self) -> Optional[str]: ...

    def uses_custom_wording(self) -> bool: ...

    def get_custom_details_wording(self) -> Optional[str]: ...

    def get_custom_state_wording(self) -> Optional[str]: ...

    def add_listener(self, listener: SettingChangeListener) -> None: ...

    def remove_listener(self, listener: SettingChangeListener) -> None: ...


def _non_blank(value: str) -> Optional[str]:
    if not value.strip():
        return None
    return value


class _NodePreferences:
    """プリファレンスノードを読み取る共通実装。ノードへの書き込みは行わない。"""

    def __init__(self, node: PreferenceNode) -> None:
        self._node = node
        self._listeners = SettingChangeListeners()
        self._forward = self._listeners.notify
        self._node.subscribe(self._forward)

    # 表示項目 ----------------------------------------------------------
    def shows_file_name(self) -> bool:
        return self._node.get_boolean(Setting.SHOW_FILE_NAME.value, True)

    def shows_project_name(self) -> bool:
        return self._node.get_boolean(Setting.SHOW_PROJECT_NAME.value, True)

    def shows_elapsed_time(self) -> bool:
        return self._node.get_boolean(Setting.SHOW_ELAPSED_TIME.value, True)

    def shows_language_icon(self) -> bool:
        return self._node.get_boolean(Setting.SHOW_LANGUAGE_ICON.value, True)

    def shows_rich_presence(self) -> bool:
        return self._node.get_boolean(Setting.SHOW_RICH_PRESENCE.value, True)

    # 経過時間のリセット ------------------------------------------------
    def resets_elapsed_time_on_startup(self) -> bool:
        return self._elapsed_time_reset() == ElapsedTimeReset.ON_STARTUP.value

    def resets_elapsed_time_on_new_project(self) -> bool:
        return self._elapsed_time_reset() == ElapsedTimeReset.ON_NEW_PROJECT.value

    def resets_elapsed_time_on_new_file(self) -> bool:
        return self._elapsed_time_reset() == ElapsedTimeReset.ON_NEW_FILE.value

    # 名称・アプリケーション -------------------------------------------
    def get_project_name(self) -> Optional[str]:
        return _non_blank(self._node.get_string(Setting.PROJECT_NAME.value, ""))

    def uses_custom_discord_application(self) -> bool:
        return self._node.get_boolean(Setting.USE_CUSTOM_APP.value, False)

    def get_discord_application_id(self) -> Optional[str]:
        return _non_blank(self._node.get_string(Setting.CUSTOM_APP_ID.value, ""))

    # 文言 --------------------------------------------------------------
    def uses_custom_wording(self) -> bool:
        return self._node.get_boolean(Setting.USE_CUSTOM_WORDING.value, False)

    def get_custom_details_wording(self) -> Optional[str]:
        # 空文字列でも設定済みとして返す。
        if self.uses_custom_wording():
            return self._node.get_string(Setting.CUSTOM_DETAILS_WORDING.value, "")
        return None

    def get_custom_state_wording(self) -> Optional[str]:
        if self.uses_custom_wording():
            return self._node.get_string(Setting.CUSTOM_STATE_WORDING.value, "")
        return None

    # リスナー ----------------------------------------------------------
    def add_listener(self, listener: SettingChangeListener) -> None:
        self._listeners.add(listener)

    def remove_listener(self, listener: SettingChangeListener) -> None:
        self._listeners.remove(listener)

    def dispose(self) -> None:
        """ノードの変更通知の購読を解除する。"""

        self._node.unsubscribe(self._forward)

    def _elapsed_time_reset(self) -> str:
        return self._node.get_string(
            Setting.RESET_ELAPSED_TIME.value, ElapsedTimeReset.ON_NEW_PROJECT.value
        )


class ProjectPreferences(_NodePreferences):
    """特定のプロジェクトに対する Discord 表示設定。

    ``scope`` を省略した場合は INI ファイルを保存先とする既定のスコープを用いる。
    プロジェクトのノードを解決できない場合は :class:`ValueError` を送出する。
    """

    def __init__(
        self,
        project: ProjectHandle,
        scope: Optional[PreferenceScope] = None,
        plugin_id: str = PLUGIN_ID,
    ) -> None:
        resolved_scope = scope if scope is not None else create_preference_scope()
        node = resolved_scope.project_node(project.identifier, plugin_id)
        if node is None:
            LOGGER.warning(
                "プロジェクト %s のプリファレンスを解決できません: plugin=%s",
                project,
                plugin_id,
            )
            raise ValueError(
                f"Cannot find preferences for plug-in {plugin_id} in project {project}"
            )
        self._project = project
        super().__init__(node)
        LOGGER.debug("プロジェクト %s の設定変更を購読しました", project)

    @property
    def project(self) -> ProjectHandle:
        return self._project

    def use_project_settings(self) -> bool:
        """グローバル設定ではなくプロジェクト設定を使うかどうか。"""

        return self._node.get_boolean(Setting.USE_PROJECT_SETTINGS.value, False)


class GlobalPreferences(_NodePreferences):
    """プラグイン全体で共有される Discord 表示設定。"""

    def __init__(
        self,
        scope: Optional[PreferenceScope] = None,
        plugin_id: str = PLUGIN_ID,
    ) -> None:
        resolved_scope = scope if scope is not None else create_preference_scope()
        node = resolved_scope.instance_node(plugin_id)
        if node is None:
            LOGGER.warning("プラグイン %s のプリファレンスを解決できません", plugin_id)
            raise ValueError(f"Cannot find preferences for plug-in {plugin_id}")
        super().__init__(node)


def effective_preferences(
    project_preferences: Optional[ProjectPreferences],
    global_preferences: GlobalPreferences,
) -> UserPreferences:
    """プロジェクト設定が有効ならそれを、そうでなければグローバル設定を返す。"""

    if project_preferences is not None and project_preferences.use_project_settings():
        return project_preferences
    return global_preferences
