"""設定変更リスナーの登録と通知。"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional

from ...infrastructure.preferences import PreferenceChangeEvent

LOGGER = logging.getLogger(__name__)

__all__ = ["SettingChangeListener", "SettingChangeListeners"]

SettingChangeListener = Callable[[PreferenceChangeEvent], None]


class SettingChangeListeners:
    """登録順を保持するスレッドセーフなリスナー集合。

    通知はロック下で取得したスナップショットに対して行うため、
    リスナー自身が通知中に登録解除しても安全に動作する。
    """

    def __init__(self) -> None:
        self._listeners: List[SettingChangeListener] = []
        self._lock = threading.Lock()

    def add(self, listener: Optional[SettingChangeListener]) -> None:
        if listener is None:
            raise ValueError("Cannot register a null listener")
        if not callable(listener):
            raise TypeError(f"listener must be callable: {listener!r}")
        with self._lock:
            self._listeners.append(listener)

    def remove(self, listener: Optional[SettingChangeListener]) -> None:
        with self._lock:
            try:
                self._listeners.remove(listener)  # type: ignore[arg-type]
            except ValueError:
                return

    def snapshot(self) -> List[SettingChangeListener]:
        with self._lock:
            return list(self._listeners)

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners)

    def notify(self, event: PreferenceChangeEvent) -> None:
        listeners = self.snapshot()
        LOGGER.debug(
            "設定変更を %d 件のリスナーへ転送します: key=%s", len(listeners), event.key
        )
        for listener in listeners:
            listener(event)
