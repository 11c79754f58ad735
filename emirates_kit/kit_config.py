#!/usr/bin/env python3
"""
Kit Config - Manages redaction and batch settings for the validators

Settings live in memory by default. A JSON file is only read when a path
is given to KitConfig or set in $EMIRATES_KIT_CONFIG.
"""

import json
import logging
import os
import threading
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Package version - single source of truth
VERSION = "1.2.0"

# Environment variable that names a config file to load
CONFIG_ENV_VAR = "EMIRATES_KIT_CONFIG"

DEFAULT_SETTINGS = {
    "mask_char": "*",      # Character used by every mask() function
    "batch_workers": 1,    # >1 validates parse_many() items on a thread pool
}


def _is_valid_setting(key: str, value: Any) -> bool:
    if key == "mask_char":
        return isinstance(value, str) and len(value) == 1
    if key == "batch_workers":
        return isinstance(value, int) and not isinstance(value, bool) and value >= 1
    return False


class KitConfig:
    """
    Manages validator settings with optional JSON persistence
    """

    def __init__(self, config_path: str = None):
        """
        Initialize config manager

        Args:
            config_path: Path to config file (default: $EMIRATES_KIT_CONFIG;
                with neither, settings are in-memory defaults)
        """
        config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
        self.config_path: Optional[Path] = Path(config_path).expanduser() if config_path else None

        self.settings: Dict[str, Any] = DEFAULT_SETTINGS.copy()
        if self.config_path is not None:
            self._load_config()

    def _load_config(self):
        """Merge settings from the config file over the defaults"""
        try:
            if not self.config_path.exists():
                return
            with open(self.config_path, 'r', encoding='utf-8') as f:
                saved = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            logger.warning(f"Ignoring unreadable config {self.config_path}: {e}")
            return

        if not isinstance(saved, dict):
            logger.warning(f"Ignoring config {self.config_path}: expected a JSON object")
            return

        for key, value in saved.items():
            if key not in DEFAULT_SETTINGS:
                logger.debug(f"Ignoring unknown config key: {key}")
            elif _is_valid_setting(key, value):
                self.settings[key] = value
            else:
                logger.warning(f"Invalid value for {key!r} in config, keeping default {DEFAULT_SETTINGS[key]!r}")

        logger.info(f"Loaded config from {self.config_path}")

    def save(self):
        """
        Save config to file

        Raises:
            ValueError: If the config has no file path
        """
        if self.config_path is None:
            raise ValueError("In-memory config has no path; create KitConfig with a config_path to save")
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(self.settings, f, indent=2)
        logger.info(f"Saved config to {self.config_path}")

    @property
    def mask_char(self) -> str:
        return self.settings["mask_char"]

    @property
    def batch_workers(self) -> int:
        return self.settings["batch_workers"]

    def get(self, key: str) -> Any:
        """Get a setting value (KeyError for unknown keys)"""
        return self.settings[key]

    def set(self, key: str, value: Any):
        """
        Set a setting value in memory. Call save() to persist it.

        Args:
            key: Setting name (one of DEFAULT_SETTINGS)
            value: New value

        Raises:
            ValueError: If the key is unknown or the value is out of range
        """
        if key not in DEFAULT_SETTINGS:
            raise ValueError(f"Unknown setting: {key}")
        if not _is_valid_setting(key, value):
            raise ValueError(f"Invalid value for {key}: {value!r}")
        self.settings[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return self.settings.copy()


# Singleton instance
_config: Optional[KitConfig] = None
_config_lock = threading.Lock()


def get_config() -> KitConfig:
    """
    Get the process-wide KitConfig.

    Created on first use: loaded from $EMIRATES_KIT_CONFIG when set,
    otherwise plain in-memory defaults.
    """
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = KitConfig()
    return _config


def set_config(config: KitConfig):
    """Install a KitConfig as the process-wide config."""
    global _config
    with _config_lock:
        _config = config


def reset_config():
    """Drop the cached config so the next get_config() recreates it."""
    global _config
    with _config_lock:
        _config = None
