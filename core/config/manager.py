"""Configuration manager for user defaults."""

import logging
from pathlib import Path

import yaml

from ..errors import ConfigError
from .schema import Settings, coerce

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "movies"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class ConfigManager:
    """Manages reading and writing the settings file."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = Path(config_path) if config_path else CONFIG_FILE

    def _ensure_dir(self) -> None:
        """Ensure config directory exists."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> dict:
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"{self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{self.config_path}: expected a mapping")
        return data

    def _write(self, data: dict) -> None:
        self._ensure_dir()
        with open(self.config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def load(self) -> Settings:
        """Load settings, falling back to defaults for anything unset."""
        settings = Settings.from_dict(self._read())
        logger.debug("Loaded settings from %s", self.config_path)
        return settings

    def set(self, key: str, value) -> Settings:
        """Validate and store one setting. Returns the updated settings."""
        data = self._read()
        data[key] = coerce(key, value)
        self._write(data)
        return Settings.from_dict(data)

    def unset(self, key: str) -> bool:
        """Remove an override. Returns True if it was set."""
        data = self._read()
        if key not in data:
            return False

        del data[key]
        self._write(data)
        return True
