"""
Configuration management for the ANSI converter tools
Loads a JSON settings file merged over built-in defaults
"""

import copy
import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Any] = {
    "server": {"host": "127.0.0.1", "port_range_start": 8000, "port_range_attempts": 100},
    "converter": {"aggressive_styles": False},
    "document": {"container_tag": "pre", "processed_class": "ansi-processed"},
    "logging": {"level": "INFO"},
    "fetch": {"timeout_seconds": 10},
}


class ConverterConfig:
    """Configuration manager backed by a JSON file"""

    def __init__(self, config_dir: str = None):
        self.config_dir = config_dir or os.path.expanduser("~/.ansi-colors")
        self.config_file = os.path.join(self.config_dir, "config.json")

        os.makedirs(self.config_dir, exist_ok=True)

        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file or create default"""
        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, "r") as f:
                    loaded = json.load(f)
                # Merge with defaults so newly added settings exist
                return self._merge_config(DEFAULT_CONFIG, loaded)
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Could not load config file {self.config_file}: {e}")
                return copy.deepcopy(DEFAULT_CONFIG)

        self._save_config(DEFAULT_CONFIG)
        return copy.deepcopy(DEFAULT_CONFIG)

    def _merge_config(self, default: Dict, loaded: Dict) -> Dict:
        """Merge loaded config with defaults"""
        merged = copy.deepcopy(default)
        for key, value in loaded.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._merge_config(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _save_config(self, config: Dict[str, Any]):
        """Save configuration to file"""
        try:
            with open(self.config_file, "w") as f:
                json.dump(config, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not save config file {self.config_file}: {e}")

    def get(self, key_path: str, default=None):
        """Get configuration value by dot-separated key path"""
        value = self.config
        for key in key_path.split("."):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def set(self, key_path: str, value: Any):
        """Set configuration value by dot-separated key path and persist it"""
        keys = key_path.split(".")
        target = self.config
        for key in keys[:-1]:
            target = target.setdefault(key, {})
        target[keys[-1]] = value
        self._save_config(self.config)
