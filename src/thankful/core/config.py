"""
Hierarchical configuration management.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (PREFIX_SECTION__KEY)
    2. Config file (YAML or JSON)
    3. Built-in defaults

Usage:
    config = Config()

    config = Config(
        config_file="~/.thankful/config.yaml",
        data_dir="~/Dropbox/thankful",
    )

    config.get("journal.storage_file")   # dot-notation access
    config.get_storage_path()            # resolved path of the entries slot
"""

import json
import os
from typing import Any

import yaml

from .exceptions import ConfigurationError

_DEFAULT_ENV_PREFIX = "THANKFUL_"
_DEFAULT_DATA_DIR_NAME = ".thankful-data"
_DEFAULT_STORAGE_FILE = "gratitude_entries.json"


class Config:
    """
    Central configuration manager.

    Loads and merges configuration from defaults, a config file, and
    environment variables. Env vars use double-underscore to denote nesting:
    THANKFUL_LOGGING__LEVEL=DEBUG -> config["logging"]["level"] = "DEBUG"
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        data_dir: str | None = None,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: Path to YAML or JSON configuration file.
            env_prefix: Prefix for environment variable overrides.
            data_dir: Base directory for data storage. Defaults to ~/.thankful-data.
            defaults: Additional default values to merge.
        """
        self.config_file = os.path.expanduser(config_file) if config_file else None
        self.env_prefix = env_prefix or ""
        self._data_dir = data_dir or os.path.join("~", _DEFAULT_DATA_DIR_NAME)
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from all sources."""
        self.config_data = self._get_default_config()

        if self._extra_defaults:
            self._update_dict(self.config_data, self._extra_defaults)

        if self.config_file and os.path.exists(self.config_file):
            file_config = self._load_file(self.config_file)
            self._update_dict(self.config_data, file_config)

        # Env vars override everything
        self._load_from_env()

    def _get_default_config(self) -> dict[str, Any]:
        data_dir = os.path.expanduser(self._data_dir)
        return {
            "paths": {
                "data_dir": data_dir,
                "log_dir": os.path.join(data_dir, "logs"),
            },
            "journal": {
                "storage_file": _DEFAULT_STORAGE_FILE,
            },
            "insights": {
                "frequent_entries_limit": 5,
                "frequent_words_limit": 10,
                "min_word_length": 3,
            },
            "logging": {
                "level": "WARNING",
                "file": "",
            },
        }

    @staticmethod
    def _load_file(path: str) -> dict[str, Any]:
        """Load a YAML or JSON config file."""
        ext = os.path.splitext(path)[1].lower()
        try:
            with open(path) as f:
                if ext in (".yaml", ".yml"):
                    loaded = yaml.safe_load(f) or {}
                elif ext == ".json":
                    loaded = json.load(f)
                else:
                    return {}
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Invalid config file {path}: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping at the top level")
        return loaded

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _load_from_env(self) -> None:
        """Override config values from environment variables."""
        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            config_key = env_key[len(self.env_prefix) :].lower()
            key_parts = config_key.split("__")

            current = self.config_data
            for part in key_parts[:-1]:
                if part not in current or not isinstance(current[part], dict):
                    current[part] = {}
                current = current[part]
            current[key_parts[-1]] = env_value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "paths.data_dir", "insights.frequent_words_limit"
            default: Returned when key is not found.
        """
        parts = key_path.split(".")
        current = self.config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def get_int(self, key_path: str, default: int) -> int:
        """Get a config value as an int (env overrides arrive as strings)."""
        value = self.get(key_path, default)
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Config value '{key_path}' must be an integer, got {value!r}") from e

    def set(self, key_path: str, value: Any) -> None:
        """Set a config value by dot-notation path, creating intermediate dicts."""
        parts = key_path.split(".")
        current = self.config_data
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def get_data_dir(self) -> str:
        """Return the resolved data directory path."""
        return os.path.expanduser(self.get("paths.data_dir", self._data_dir))

    def get_storage_path(self) -> str:
        """Return the resolved path of the file holding all entries."""
        storage_file = os.path.expanduser(self.get("journal.storage_file", _DEFAULT_STORAGE_FILE))
        return os.path.join(self.get_data_dir(), storage_file)

    def get_log_file(self) -> str | None:
        """Return the resolved log file path, or None when file logging is off.

        A relative ``logging.file`` is placed under ``paths.log_dir``.
        """
        log_file = self.get("logging.file", "")
        if not log_file:
            return None
        log_file = os.path.expanduser(str(log_file))
        if os.path.isabs(log_file):
            return log_file
        log_dir = self.get("paths.log_dir") or os.path.join(self.get_data_dir(), "logs")
        return os.path.join(os.path.expanduser(log_dir), log_file)


# Module-level singleton
_config_instance: Config | None = None


def get_config(
    config_file: str | None = None,
    env_prefix: str = _DEFAULT_ENV_PREFIX,
    data_dir: str | None = None,
) -> Config:
    """Get or create the global Config singleton."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config(config_file=config_file, env_prefix=env_prefix, data_dir=data_dir)
    return _config_instance


def reset_config() -> None:
    """Reset the global Config singleton (useful for testing)."""
    global _config_instance
    _config_instance = None
