"""Discord Rich Presence 連携のプロジェクト設定パッケージ。"""

from __future__ import annotations

__all__ = ["domain", "infrastructure"]
