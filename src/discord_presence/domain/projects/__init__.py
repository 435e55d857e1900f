"""プロジェクトを識別する値オブジェクト。"""

from __future__ import annotations

from .models import ProjectHandle

__all__ = ["ProjectHandle"]
