"""ドメイン層のパッケージ。"""

from __future__ import annotations

__all__ = ["projects", "settings"]

from . import projects, settings  # noqa: F401
