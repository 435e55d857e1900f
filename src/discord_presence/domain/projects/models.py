"""プロジェクトハンドルの値オブジェクト。"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["ProjectHandle"]


@dataclass(frozen=True, slots=True)
class ProjectHandle:
    """プロジェクトの名前とルートディレクトリを保持する。"""

    name: str
    root: Path = field(default_factory=Path)

    @property
    def identifier(self) -> str:
        """プリファレンススコープの解決に用いるキー。"""

        return self.name.strip()

    def __str__(self) -> str:
        return self.name
