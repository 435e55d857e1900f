"""プロジェクト・プラグイン単位でノードを解決するスコープ。"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Tuple

from qtpy import QtCore

from ..paths import get_preferences_path
from .nodes import InMemoryPreferenceNode, PreferenceNode, QtPreferenceNode

__all__ = [
    "InMemoryPreferenceScope",
    "PreferenceScope",
    "QtPreferenceScope",
    "create_preference_scope",
]

PROJECT_GROUP = "projects"
INSTANCE_GROUP = "instance"


class PreferenceScope(Protocol):
    """ノードの解決手段。解決できない場合は ``None`` を返す。"""

    def project_node(self, project_key: str, plugin_id: str) -> Optional[PreferenceNode]:
        """プロジェクトとプラグインに紐づくノードを返す。"""

    def instance_node(self, plugin_id: str) -> Optional[PreferenceNode]:
        """プラグイン全体で共有されるノードを返す。"""


def _escape(segment: str) -> str:
    return segment.replace("%", "%25").replace("/", "%2F")


def _group_name(*segments: str) -> str:
    return "/".join(_escape(segment) for segment in segments)


class InMemoryPreferenceScope:
    """解決したノードをメモリ上に保持するスコープ。"""

    def __init__(self) -> None:
        self._nodes: Dict[Tuple[str, ...], InMemoryPreferenceNode] = {}

    def project_node(
        self, project_key: str, plugin_id: str
    ) -> Optional[InMemoryPreferenceNode]:
        if not project_key.strip() or not plugin_id:
            return None
        return self._node((PROJECT_GROUP, project_key, plugin_id))

    def instance_node(self, plugin_id: str) -> Optional[InMemoryPreferenceNode]:
        if not plugin_id:
            return None
        return self._node((INSTANCE_GROUP, plugin_id))

    def _node(self, key: Tuple[str, ...]) -> InMemoryPreferenceNode:
        node = self._nodes.get(key)
        if node is None:
            node = InMemoryPreferenceNode()
            self._nodes[key] = node
        return node


class QtPreferenceScope:
    """:class:`QSettings` のグループ階層をスコープとして扱う。"""

    def __init__(self, settings: Any) -> None:
        self._settings = settings
        self._nodes: Dict[str, QtPreferenceNode] = {}

    @property
    def settings(self) -> Any:
        return self._settings

    def project_node(
        self, project_key: str, plugin_id: str
    ) -> Optional[QtPreferenceNode]:
        if not project_key.strip() or not plugin_id:
            return None
        return self._node(_group_name(PROJECT_GROUP, project_key, plugin_id))

    def instance_node(self, plugin_id: str) -> Optional[QtPreferenceNode]:
        if not plugin_id:
            return None
        return self._node(_group_name(INSTANCE_GROUP, plugin_id))

    def _node(self, group: str) -> QtPreferenceNode:
        node = self._nodes.get(group)
        if node is None:
            node = QtPreferenceNode(self._settings, group)
            self._nodes[group] = node
        return node


def create_preference_scope(path: Optional[Path] = None) -> QtPreferenceScope:
    """INI ファイルを保存先とする既定のスコープを生成する。"""

    target = path or get_preferences_path()
    settings = QtCore.QSettings(str(target), QtCore.QSettings.Format.IniFormat)
    return QtPreferenceScope(settings)
