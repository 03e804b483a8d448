"""Tests for config module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from fs_wrappers.config import ConfigManager, Settings


@pytest.fixture
def config(temp_config_dir: Path) -> ConfigManager:
    """Create a config manager with temporary directory."""
    return ConfigManager.create(temp_config_dir)


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.default_overwrite is False
        assert settings.log_level == "WARNING"
        assert settings.show_hidden is False

    def test_accepts_aliases(self) -> None:
        settings = Settings.model_validate({"defaultOverwrite": True, "logLevel": "DEBUG"})

        assert settings.default_overwrite is True
        assert settings.log_level == "DEBUG"


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_default_location(self, temp_home: Path) -> None:
        """Test the default location is a .fs-wrappers directory."""
        manager = ConfigManager(config_dir=None)

        assert manager.config_file == temp_home / ".fs-wrappers" / "config.json"
        assert ConfigManager.create_default().config_dir == temp_home / ".fs-wrappers"

    def test_load_missing_returns_defaults(self, tmp_path: Path) -> None:
        """Test loading without a config file returns defaults."""
        manager = ConfigManager.create(tmp_path / "nowhere")

        assert manager.load() == Settings()

    def test_save_and_load(self, config: ConfigManager) -> None:
        """Test settings survive a save/load cycle with aliased keys on disk."""
        config.save(Settings(default_overwrite=True, show_hidden=True))

        data = json.loads(config.config_file.read_text())
        assert data["defaultOverwrite"] is True
        assert config.load().show_hidden is True

    def test_save_creates_directory(self, tmp_path: Path) -> None:
        """Test save creates the config directory if missing."""
        manager = ConfigManager.create(tmp_path / "new" / "dir")

        manager.save(Settings())

        assert manager.config_file.exists()

    @pytest.mark.parametrize("value, expected", [("true", True), ("YES", True), ("0", False)])
    def test_set_boolean(self, config: ConfigManager, value: str, expected: bool) -> None:
        settings = config.set_value("default-overwrite", value)

        assert settings.default_overwrite is expected
        assert config.load().default_overwrite is expected

    def test_set_log_level_normalizes_case(self, config: ConfigManager) -> None:
        settings = config.set_value("log-level", "debug")

        assert settings.log_level == "DEBUG"

    def test_set_invalid_log_level(self, config: ConfigManager) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            config.set_value("log-level", "LOUD")

    def test_set_invalid_boolean(self, config: ConfigManager) -> None:
        with pytest.raises(ValueError, match="boolean"):
            config.set_value("show-hidden", "maybe")

    def test_set_unknown_key(self, config: ConfigManager) -> None:
        with pytest.raises(ValueError, match="Unknown configuration key"):
            config.set_value("colour", "blue")

    def test_load_rejects_invalid_log_level(self, config: ConfigManager) -> None:
        """Test a stored log level is validated on load."""
        config.config_file.write_text(json.dumps({"logLevel": "verbose"}))

        with pytest.raises(ValidationError, match="Invalid log level"):
            config.load()

    def test_load_corrupt_file_raises(self, config: ConfigManager) -> None:
        config.config_file.write_text("{not json")

        with pytest.raises(json.JSONDecodeError):
            config.load()

    def test_set_value_repairs_invalid_file(self, config: ConfigManager) -> None:
        """Test set_value keeps the valid stored values and drops the invalid ones."""
        # Arrange
        config.config_file.write_text(
            json.dumps({"logLevel": "verbose", "defaultOverwrite": True})
        )

        # Act
        settings = config.set_value("show-hidden", "on")

        # Assert
        assert settings == Settings(default_overwrite=True, show_hidden=True)
        assert config.load() == settings

    def test_set_value_over_corrupt_json(self, config: ConfigManager) -> None:
        config.config_file.write_text("{not json")

        settings = config.set_value("log-level", "info")

        assert settings.log_level == "INFO"
        assert config.load().log_level == "INFO"
