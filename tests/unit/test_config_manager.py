"""
ConfigManager 測試
"""

import pytest

from sparktimer.config.manager import CONFIG_ENV_VAR, ConfigManager, DEFAULTS
from sparktimer.core.exceptions import ConfigurationError


class TestConfigManager:
    """ConfigManager 測試類別"""

    def test_singleton_pattern(self):
        assert ConfigManager() is ConfigManager()
        assert ConfigManager.has_instance()

    def test_defaults_when_file_missing(self, tmp_path):
        config = ConfigManager()
        config.load(str(tmp_path / "missing.yaml"))

        assert config.timer.block_duration_ms == DEFAULTS["timer"]["block_duration_ms"]
        assert config.system.mode == "development"
        assert config.block_duration_ms == 5 * 60 * 1000

    def test_yaml_overrides_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "timer:\n  block_duration_ms: 1000\nsystem:\n  mode: testing\n",
            encoding="utf-8",
        )
        config = ConfigManager()
        config.load(str(path))

        assert config.timer.block_duration_ms == 1000
        assert config.timer.tick_interval_ms == 16
        assert config.system.mode == "testing"

    def test_test_mode_selects_short_duration(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("timer:\n  test_mode: true\n", encoding="utf-8")
        config = ConfigManager()
        config.load(str(path))

        assert config.block_duration_ms == 5000

    def test_env_var_path(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("timer:\n  block_duration_ms: 777\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        config = ConfigManager()
        config.load()

        assert config.block_duration_ms == 777

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("timer: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigManager().load(str(path))

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigManager().load(str(path))

    def test_unknown_attribute(self):
        config = ConfigManager()

        with pytest.raises(AttributeError):
            config.nonexistent
        with pytest.raises(AttributeError):
            config.timer.nonexistent
