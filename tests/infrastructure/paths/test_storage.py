"""設定ディレクトリ解決のテスト。"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from discord_presence.infrastructure.paths import (
    CONFIG_DIR_ENV_KEY,
    PREFERENCES_FILENAME,
    get_app_config_dir,
    get_preferences_path,
)


def test_explicit_override_wins(tmp_path: Path) -> None:
    environ = {CONFIG_DIR_ENV_KEY: str(tmp_path), "XDG_CONFIG_HOME": "/ignored"}

    assert get_app_config_dir(environ) == tmp_path
    assert get_preferences_path(environ) == tmp_path / PREFERENCES_FILENAME


def test_blank_override_is_ignored(tmp_path: Path) -> None:
    environ = {CONFIG_DIR_ENV_KEY: "   ", "XDG_CONFIG_HOME": str(tmp_path)}

    if os.name != "nt":
        assert get_app_config_dir(environ) == tmp_path / "discordpresence"


def test_override_is_read_from_process_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv(CONFIG_DIR_ENV_KEY, str(tmp_path))

    assert get_preferences_path() == tmp_path / PREFERENCES_FILENAME


@pytest.mark.skipif(os.name == "nt", reason="POSIX のみ")
def test_uses_xdg_config_home(tmp_path: Path) -> None:
    environ = {"XDG_CONFIG_HOME": str(tmp_path)}

    assert get_app_config_dir(environ) == tmp_path / "discordpresence"
    assert get_preferences_path(environ) == tmp_path / "discordpresence" / PREFERENCES_FILENAME


@pytest.mark.skipif(os.name == "nt", reason="POSIX のみ")
def test_falls_back_to_home_config(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    assert get_app_config_dir({}) == tmp_path / ".config" / "discordpresence"
