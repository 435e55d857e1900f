"""QSettings を保存先とした ProjectPreferences の結合テスト。"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import List

import pytest

from discord_presence.domain.projects import ProjectHandle
from discord_presence.domain.settings import PLUGIN_ID, ProjectPreferences, Setting
from discord_presence.infrastructure.preferences import (
    PreferenceChangeEvent,
    QtPreferenceNode,
    QtPreferenceScope,
    create_preference_scope,
)


@pytest.fixture()
def ini_path(tmp_path: Path) -> Path:
    return tmp_path / "preferences.ini"


@pytest.fixture()
def scope(ini_path: Path) -> QtPreferenceScope:
    return create_preference_scope(ini_path)


def _node(scope: QtPreferenceScope) -> QtPreferenceNode:
    node = scope.project_node("demo", PLUGIN_ID)
    assert node is not None
    return node


def test_reader_over_ini_file(scope: QtPreferenceScope) -> None:
    preferences = ProjectPreferences(ProjectHandle("demo"), scope)
    received: List[PreferenceChangeEvent] = []

    def listener(event: PreferenceChangeEvent) -> None:
        received.append(event)

    preferences.add_listener(listener)

    node = _node(scope)
    node.put(Setting.USE_PROJECT_SETTINGS.value, True)
    node.put(Setting.PROJECT_NAME.value, "Renamed")

    assert preferences.use_project_settings() is True
    assert preferences.get_project_name() == "Renamed"
    assert [event.key for event in received] == ["useProjectSettings", "projectName"]

    preferences.dispose()
    node.put(Setting.PROJECT_NAME.value, "Again")
    assert len(received) == 2


def test_listener_exception_reaches_the_writer(scope: QtPreferenceScope) -> None:
    preferences = ProjectPreferences(ProjectHandle("demo"), scope)
    calls: List[str] = []

    def failing(event: PreferenceChangeEvent) -> None:
        calls.append("failing")
        raise RuntimeError("boom")

    preferences.add_listener(lambda event: calls.append("first"))
    preferences.add_listener(failing)
    preferences.add_listener(lambda event: calls.append("last"))

    with pytest.raises(RuntimeError, match="boom"):
        _node(scope).put(Setting.PROJECT_NAME.value, "x")
    assert calls == ["first", "failing"]

    preferences.remove_listener(failing)
    _node(scope).put(Setting.PROJECT_NAME.value, "y")
    assert calls == ["first", "failing", "first", "last"]


def test_listener_may_unregister_itself_on_ini_backend(
    scope: QtPreferenceScope,
) -> None:
    preferences = ProjectPreferences(ProjectHandle("demo"), scope)
    calls: List[str] = []

    def once(event: PreferenceChangeEvent) -> None:
        calls.append("once")
        preferences.remove_listener(once)

    preferences.add_listener(once)
    preferences.add_listener(lambda event: calls.append("always"))

    _node(scope).put(Setting.SHOW_FILE_NAME.value, False)
    _node(scope).put(Setting.SHOW_FILE_NAME.value, True)

    assert calls == ["once", "always", "always"]


def test_hand_edited_value_with_comma_is_read_as_text(ini_path: Path) -> None:
    ini_path.write_text(
        "[projects]\n"
        "demo\\discord_presence\\useCustomWording=true\n"
        "demo\\discord_presence\\customDetailsWording=Editing a, b\n"
        "demo\\discord_presence\\projectName=Alpha, Beta\n",
        encoding="utf-8",
    )
    preferences = ProjectPreferences(
        ProjectHandle("demo"), create_preference_scope(ini_path)
    )

    assert preferences.uses_custom_wording() is True
    assert preferences.get_custom_details_wording() == "Editing a, b"
    assert preferences.get_project_name() == "Alpha, Beta"


def test_rewriting_same_value_after_reload_is_silent(ini_path: Path) -> None:
    _node(create_preference_scope(ini_path)).put(Setting.SHOW_FILE_NAME.value, False)

    reloaded = create_preference_scope(ini_path)
    preferences = ProjectPreferences(ProjectHandle("demo"), reloaded)
    received: List[PreferenceChangeEvent] = []
    preferences.add_listener(received.append)

    _node(reloaded).put(Setting.SHOW_FILE_NAME.value, False)

    assert received == []
    assert preferences.shows_file_name() is False


def test_dispose_twice_emits_no_warning(scope: QtPreferenceScope) -> None:
    preferences = ProjectPreferences(ProjectHandle("demo"), scope)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        preferences.dispose()
        preferences.dispose()
