"""Unit tests for settings persistence."""

import json
import unittest
import tempfile
import os
from pathlib import Path

from stylemark.settings_persistence import SettingsPersistence, get_persistence


class TestSettingsPersistence(unittest.TestCase):
    """Test settings persistence functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()

        # Point a fresh instance at the temporary directory
        self.persistence = SettingsPersistence()
        self.persistence._config_dir = Path(self.temp_dir) / "nested"
        self.persistence._settings_file = self.persistence._config_dir / "test_settings.json"
        self.persistence._settings_cache = None

    def tearDown(self):
        """Clean up test fixtures."""
        import shutil
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_save_and_load_settings(self):
        settings = {"sample_text": "Hello", "max_history": 100, "show_help_hint": False}

        self.assertTrue(self.persistence.save_settings(settings))

        # Fresh read from disk
        self.persistence.clear_cache()
        self.assertEqual(self.persistence.load_settings(), settings)

    def test_load_without_file(self):
        self.assertEqual(self.persistence.load_settings(), {})

    def test_save_creates_config_dir(self):
        self.persistence.save_settings({"sample_text": "Hi"})
        self.assertTrue(self.persistence.settings_file.exists())
        self.assertFalse(self.persistence.settings_file.with_suffix('.tmp').exists())

    def test_corrupted_file_falls_back_to_empty(self):
        self.persistence._config_dir.mkdir(parents=True)
        self.persistence.settings_file.write_text("{not json", encoding="utf-8")
        with self.assertLogs("stylemark.settings_persistence", level="WARNING"):
            self.assertEqual(self.persistence.load_settings(), {})

    def test_non_dict_file_is_ignored(self):
        self.persistence._config_dir.mkdir(parents=True)
        self.persistence.settings_file.write_text(json.dumps([1, 2]), encoding="utf-8")
        with self.assertLogs("stylemark.settings_persistence", level="WARNING"):
            self.assertEqual(self.persistence.load_settings(), {})

    def test_invalid_values_are_dropped_on_load(self):
        self.persistence._config_dir.mkdir(parents=True)
        self.persistence.settings_file.write_text(
            json.dumps({"max_history": 0, "sample_text": "ok", "theme": "dark"}),
            encoding="utf-8",
        )
        with self.assertLogs("stylemark.settings_persistence", level="WARNING"):
            loaded = self.persistence.load_settings()
        self.assertEqual(loaded, {"sample_text": "ok", "theme": "dark"})

    def test_update_setting_keeps_others(self):
        self.persistence.save_settings({"sample_text": "Hello"})
        self.assertTrue(self.persistence.update_setting("max_history", 25))
        self.persistence.clear_cache()
        self.assertEqual(
            self.persistence.load_settings(),
            {"sample_text": "Hello", "max_history": 25},
        )

    def test_update_setting_rejects_invalid(self):
        with self.assertLogs("stylemark.settings_persistence", level="WARNING"):
            self.assertFalse(self.persistence.update_setting("max_history", "ten"))
        self.assertFalse(self.persistence.settings_file.exists())

    def test_validate_setting(self):
        validate = self.persistence.validate_setting
        self.assertTrue(validate("max_history", 1))
        self.assertTrue(validate("max_history", 10000))
        self.assertTrue(validate("max_history", None))
        self.assertFalse(validate("max_history", 10001))
        self.assertFalse(validate("max_history", True))
        self.assertFalse(validate("max_history", 5.0))
        self.assertTrue(validate("sample_text", "text"))
        self.assertFalse(validate("sample_text", "   "))
        self.assertFalse(validate("sample_text", 3))
        self.assertTrue(validate("show_help_hint", True))
        self.assertFalse(validate("show_help_hint", "yes"))
        self.assertTrue(validate("unknown_key", object()))

    def test_global_instance_is_shared(self):
        self.assertIs(get_persistence(), get_persistence())


if __name__ == '__main__':
    unittest.main()
