"""Configuration management for the fs-wrappers CLI."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Default configuration directory name, under the user home
CONFIG_DIR_NAME = ".fs-wrappers"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """User settings for the CLI."""

    model_config = ConfigDict(populate_by_name=True)

    default_overwrite: bool = Field(default=False, alias="defaultOverwrite")
    log_level: str = Field(default="WARNING", alias="logLevel")
    show_hidden: bool = Field(default=False, alias="showHidden")

    @field_validator("log_level", mode="before")
    @classmethod
    def check_log_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{value}', expected one of {', '.join(LOG_LEVELS)}"
            )
        return level


# CLI key -> Settings field
SETTING_KEYS = {
    "default-overwrite": "default_overwrite",
    "log-level": "log_level",
    "show-hidden": "show_hidden",
}


class ConfigManager:
    """Loads and saves CLI settings."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Directory for the config file. Defaults to ~/.fs-wrappers.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.config_dir = config_dir or Path.home() / CONFIG_DIR_NAME
        self.config_file = self.config_dir / "config.json"

    @classmethod
    def create(cls, config_dir: Path) -> ConfigManager:
        """Create a config manager with a custom directory.

        Args:
            config_dir: Directory for the config file.

        Returns:
            Configured ConfigManager instance.
        """
        return cls(config_dir=config_dir)

    @classmethod
    def create_default(cls) -> ConfigManager:
        """Create a config manager with the default directory.

        Uses ~/.fs-wrappers as the config location.

        Returns:
            ConfigManager configured with default paths.
        """
        return cls()

    def ensure_config_dir(self) -> None:
        """Create config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def load(self) -> Settings:
        """Load settings from disk.

        Returns:
            Stored settings, or defaults when no config file exists.

        Raises:
            json.JSONDecodeError: If the config file is not valid JSON.
            pydantic.ValidationError: If a stored value is invalid.
        """
        if not self.config_file.exists():
            return Settings()

        data = json.loads(self.config_file.read_text())
        return Settings.model_validate(data)

    def save(self, settings: Settings) -> None:
        """Save settings to disk.

        Args:
            settings: Settings to save.
        """
        self.ensure_config_dir()
        data = settings.model_dump(by_alias=True)
        self.config_file.write_text(json.dumps(data, indent=2))

    def set_value(self, key: str, value: str) -> Settings:
        """Set a single setting from its CLI string form.

        Args:
            key: CLI key, e.g. "default-overwrite".
            value: Value as typed on the command line.

        Returns:
            The updated settings.

        Raises:
            ValueError: If the key is unknown or the value is invalid.
        """
        field_name = SETTING_KEYS.get(key)
        if field_name is None:
            raise ValueError(f"Unknown configuration key: {key}")

        parsed: bool | str = value if field_name == "log_level" else _parse_bool(value)

        settings = Settings.model_validate({**self._valid_stored_values(), field_name: parsed})
        self.save(settings)
        return settings

    def _valid_stored_values(self) -> dict[str, object]:
        """Read the stored values that still validate, skipping a corrupt file.

        Lets `set_value` repair a config file that `load` rejects.
        """
        try:
            data = json.loads(self.config_file.read_text())
        except (FileNotFoundError, json.JSONDecodeError):
            return {}
        if not isinstance(data, dict):
            return {}

        values: dict[str, object] = {}
        for name, field in Settings.model_fields.items():
            if field.alias not in data:
                continue
            try:
                Settings.model_validate({field.alias: data[field.alias]})
            except ValidationError:
                continue
            values[name] = data[field.alias]
        return values


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Expected a boolean value, got '{value}'")
