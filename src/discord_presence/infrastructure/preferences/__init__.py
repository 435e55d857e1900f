"""プリファレンスノードとスコープの公開 API。"""

from .nodes import (
    ChangeCallback,
    InMemoryPreferenceNode,
    PreferenceChangeEvent,
    PreferenceNode,
    QtPreferenceNode,
)
from .scopes import (
    InMemoryPreferenceScope,
    PreferenceScope,
    QtPreferenceScope,
    create_preference_scope,
)

__all__ = [
    "ChangeCallback",
    "InMemoryPreferenceNode",
    "InMemoryPreferenceScope",
    "PreferenceChangeEvent",
    "PreferenceNode",
    "PreferenceScope",
    "QtPreferenceNode",
    "QtPreferenceScope",
    "create_preference_scope",
]
