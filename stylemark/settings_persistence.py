"""Settings persistence for user preferences.

This module provides persistent storage for user settings such as the
sample text and the history cap. Settings are stored in an OS-appropriate
location and survive application restarts. Undo history itself is never
persisted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import AppConstants

logger = logging.getLogger(__name__)


class SettingsPersistence:
    """Manages persistent storage of user settings.

    Settings are stored as a JSON object in the user's config directory.
    """

    def __init__(self):
        """Initialize settings persistence."""
        self._config_dir = Path(platformdirs.user_config_dir("stylemark", "stylemark"))
        self._settings_file = self._config_dir / "settings.json"
        self._settings_cache: Optional[Dict[str, Any]] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _ensure_config_dir(self) -> None:
        """Ensure the config directory exists."""
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except (OSError, PermissionError) as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def _load_all_settings(self) -> Dict[str, Any]:
        """Load the settings object from disk.

        Returns:
            Dictionary of raw settings. Empty dict if the file doesn't exist
            or can't be read.
        """
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)

            if not isinstance(data, dict):
                logger.warning("Settings file has invalid format (not a dict), ignoring")
                self._settings_cache = {}
                return self._settings_cache

            self._settings_cache = data
            return self._settings_cache

        except (json.JSONDecodeError, OSError, PermissionError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._settings_cache = {}
            return self._settings_cache

    def load_settings(self) -> Dict[str, Any]:
        """Load validated settings.

        Invalid values are dropped with a warning so callers fall back to
        their defaults.

        Returns:
            Dictionary of settings. Empty dict if none are saved.
        """
        settings = {}
        for key, value in self._load_all_settings().items():
            if self.validate_setting(key, value):
                settings[key] = value
            else:
                logger.warning(f"Ignoring invalid value for setting {key!r}: {value!r}")
        return settings

    def save_settings(self, settings: Dict[str, Any]) -> bool:
        """Save settings to disk atomically.

        Args:
            settings: Dictionary of settings to save.

        Returns:
            True if save was successful, False otherwise.
        """
        self._ensure_config_dir()

        # Atomic write: temp file + rename
        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
            self._settings_cache = dict(settings)
            return True

        except (OSError, PermissionError, TypeError) as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

    def update_setting(self, key: str, value: Any) -> bool:
        """Validate and save a single setting, keeping the others."""
        if not self.validate_setting(key, value):
            logger.warning(f"Refusing to save invalid value for setting {key!r}: {value!r}")
            return False
        settings = dict(self._load_all_settings())
        settings[key] = value
        return self.save_settings(settings)

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Args:
            key: Setting key name.
            value: Setting value to validate.

        Returns:
            True if setting is valid, False otherwise.
        """
        if value is None:
            return True  # None is valid (means "not set")

        if key == 'sample_text':
            return isinstance(value, str) and bool(value.strip())

        if key == 'show_help_hint':
            return isinstance(value, bool)

        if key == 'max_history':
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            return 1 <= value <= AppConstants.MAX_HISTORY_LIMIT

        # Unknown settings are considered valid (forward compatibility)
        return True

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None


# Global instance
_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Get the global settings persistence instance.

    Returns:
        The singleton SettingsPersistence instance.
    """
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
