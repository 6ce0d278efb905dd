"""Persistent settings for the fskit command line."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Default configuration location
CONFIG_DIR = Path.home() / ".fskit"

# CLI key -> Settings field
CONFIG_KEYS = {
    "file-mode": "file_mode",
    "append-mode": "append_mode",
    "directory-mode": "directory_mode",
}


class ConfigError(Exception):
    """Error loading or updating configuration."""

    pass


class Settings(BaseModel):
    """Creation modes used by CLI commands."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    version: str = "1.0"
    file_mode: int = Field(default=0o644, alias="fileMode")
    append_mode: int = Field(default=0o600, alias="appendMode")
    directory_mode: int = Field(default=0o755, alias="directoryMode")

    @field_validator("file_mode", "append_mode", "directory_mode")
    @classmethod
    def _check_mode(cls, value: int) -> int:
        if not 0 <= value <= 0o7777:
            raise ValueError(f"mode {value:o} is outside 0..7777")
        return value


class ConfigManager:
    """Loads and saves Settings as JSON."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Directory for the config file. Defaults to ~/.fskit.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.config_dir = config_dir or CONFIG_DIR
        self.config_file = self.config_dir / "config.json"

    @classmethod
    def create(cls, config_dir: Path) -> ConfigManager:
        """Create a config manager with a custom directory."""
        return cls(config_dir=config_dir)

    @classmethod
    def create_default(cls) -> ConfigManager:
        """Create a config manager using ~/.fskit."""
        return cls()

    def load(self) -> Settings:
        """Load settings from disk.

        Returns:
            Stored settings, or defaults if no file exists.

        Raises:
            ConfigError: If the file is not valid JSON or fails validation.
        """
        if not self.config_file.exists():
            return Settings()

        try:
            data = json.loads(self.config_file.read_text())
            return Settings.model_validate(data)
        except (ValueError, ValidationError) as e:
            raise ConfigError(f"Invalid configuration in {self.config_file}: {e}") from e

    def save(self, settings: Settings) -> None:
        """Save settings to disk."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        data = settings.model_dump(by_alias=True)
        self.config_file.write_text(json.dumps(data, indent=2))

    def set_value(self, key: str, value: str) -> Settings:
        """Update one setting from its CLI key and octal string value.

        Args:
            key: One of CONFIG_KEYS.
            value: Octal mode such as "644" or "0o644".

        Returns:
            The updated settings.

        Raises:
            ConfigError: If the key is unknown or the value is not a valid mode.
        """
        field = CONFIG_KEYS.get(key)
        if field is None:
            raise ConfigError(f"Unknown configuration key: {key}")

        settings = self.load()
        try:
            setattr(settings, field, parse_mode(value))
        except (ValueError, ValidationError) as e:
            raise ConfigError(f"Invalid value for {key}: {value}") from e
        self.save(settings)
        return settings


def parse_mode(value: str) -> int:
    """Parse an octal mode string such as "755" or "0o755".

    Raises:
        ValueError: If the string is not octal.
    """
    text = value.strip().lower()
    if text.startswith("0o"):
        text = text[2:]
    return int(text, 8)
