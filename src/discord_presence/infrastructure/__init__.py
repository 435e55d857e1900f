"""インフラ層のパッケージ。"""

from __future__ import annotations

__all__ = ["paths", "preferences"]

from . import paths  # noqa: F401
from . import preferences  # noqa: F401
