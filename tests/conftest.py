"""Shared fixtures: keep tests away from the real user config directory."""

import pytest

from stylemark import settings_persistence
from stylemark.settings_persistence import SettingsPersistence


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    persistence = SettingsPersistence()
    persistence._config_dir = tmp_path / "config"
    persistence._settings_file = persistence._config_dir / "settings.json"
    monkeypatch.setattr(settings_persistence, "_persistence", persistence)
    return persistence
