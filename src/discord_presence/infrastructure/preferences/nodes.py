"""プリファレンスノードの実装と抽象。"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol

LOGGER = logging.getLogger(__name__)

__all__ = [
    "ChangeCallback",
    "InMemoryPreferenceNode",
    "PreferenceChangeEvent",
    "PreferenceNode",
    "QtPreferenceNode",
]


@dataclass(frozen=True, slots=True)
class PreferenceChangeEvent:
    """キー単位の変更内容。存在しない側は ``None`` で表す。"""

    key: str
    old_value: Optional[object]
    new_value: Optional[object]


ChangeCallback = Callable[[PreferenceChangeEvent], None]


class PreferenceNode(Protocol):
    """リーダーが必要とする最小インターフェース。"""

    def get_boolean(self, key: str, default: bool) -> bool:
        """キーを真偽値として取得する。"""

    def get_string(self, key: str, default: str) -> str:
        """キーを文字列として取得する。"""

    def subscribe(self, callback: ChangeCallback) -> None:
        """変更通知の購読を開始する。"""

    def unsubscribe(self, callback: ChangeCallback) -> None:
        """変更通知の購読を解除する。未登録なら何もしない。"""


def _to_string(value: object, default: str) -> str:
    if value is None:
        return default
    if isinstance(value, bool):
        return "true" if value else "false"
    # INI 形式ではカンマを含む値が文字列リストとして読み込まれる。
    if isinstance(value, (list, tuple)):
        return ", ".join(_to_string(item, "") for item in value)
    return str(value)


def _to_boolean(value: object, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (str, list, tuple)):
        return _to_string(value, "").strip().lower() == "true"
    return bool(value)


def _changed(old_value: object, new_value: object) -> bool:
    if old_value is None or new_value is None:
        return old_value is not new_value
    return _to_string(old_value, "") != _to_string(new_value, "")


class _CallbackNode:
    """購読者へ同期的に変更を通知する共通処理。

    コールバックの例外は捕捉せず呼び出し元へ伝播させる。
    """

    def __init__(self) -> None:
        self._callbacks: List[ChangeCallback] = []

    def subscribe(self, callback: ChangeCallback) -> None:
        self._callbacks.append(callback)

    def unsubscribe(self, callback: ChangeCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _fire(self, event: PreferenceChangeEvent) -> None:
        callbacks = list(self._callbacks)
        LOGGER.debug("変更を %d 件の購読者へ通知します: key=%s", len(callbacks), event.key)
        for callback in callbacks:
            callback(event)


class InMemoryPreferenceNode(_CallbackNode):
    """Qt へ依存しないインメモリのプリファレンスノード。"""

    def __init__(self, values: Optional[Dict[str, object]] = None) -> None:
        super().__init__()
        self._values: Dict[str, object] = dict(values or {})

    # 値アクセス -------------------------------------------------------
    def get_boolean(self, key: str, default: bool) -> bool:
        return _to_boolean(self._values.get(key), default)

    def get_string(self, key: str, default: str) -> str:
        return _to_string(self._values.get(key), default)

    def keys(self) -> List[str]:
        return list(self._values)

    # 更新 --------------------------------------------------------------
    def put(self, key: str, value: object) -> None:
        old_value = self._values.get(key)
        self._values[key] = value
        if _changed(old_value, value):
            self._fire(PreferenceChangeEvent(key, old_value, value))

    def remove(self, key: str) -> None:
        if key not in self._values:
            return
        old_value = self._values.pop(key)
        self._fire(PreferenceChangeEvent(key, old_value, None))


class QtPreferenceNode(_CallbackNode):
    """Qt の :class:`QSettings` の 1 グループをノードとして扱う。"""

    def __init__(self, settings: Any, group: str) -> None:
        super().__init__()
        self._settings = settings
        self._group = group

    @property
    def group(self) -> str:
        return self._group

    # 値アクセス -------------------------------------------------------
    def get_boolean(self, key: str, default: bool) -> bool:
        return _to_boolean(self._value(key), default)

    def get_string(self, key: str, default: str) -> str:
        return _to_string(self._value(key), default)

    def keys(self) -> List[str]:
        self._settings.beginGroup(self._group)
        try:
            return list(self._settings.childKeys())
        finally:
            self._settings.endGroup()

    # 更新 --------------------------------------------------------------
    def put(self, key: str, value: object) -> None:
        old_value = self._value(key)
        self._settings.setValue(self._path(key), value)
        self._settings.sync()
        if _changed(old_value, value):
            self._fire(PreferenceChangeEvent(key, old_value, value))

    def remove(self, key: str) -> None:
        old_value = self._value(key)
        if old_value is None:
            return
        self._settings.remove(self._path(key))
        self._settings.sync()
        self._fire(PreferenceChangeEvent(key, old_value, None))

    # 内部ユーティリティ ---------------------------------------------
    def _path(self, key: str) -> str:
        return f"{self._group}/{key}"

    def _value(self, key: str) -> Optional[object]:
        path = self._path(key)
        if not self._settings.contains(path):
            return None
        return self._settings.value(path)
