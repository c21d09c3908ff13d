"""
Configuration handling for the PDF brute-forcer.
"""

import os
import json
import logging
from typing import Any, Optional, Union
from pdf_bruteforce.utils.exceptions import ConfigError


class Config:
    """Configuration manager for the PDF brute-forcer"""

    DEFAULT_CONFIG = {
        "workers": 1,
        "min_length": 1,
        "max_length": 8,
        "digits": False,
        "letters": False,
        "symbols": False,
        "custom": "",
        "report_every": 1000,  # iterations between counter updates
        "progress_interval": 0.25,  # seconds
        "stop_policy": "lowest",
        "timeout": None,
        "verbosity": "info",
        "log_file": None,
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize with optional path to config file"""
        self.config = self.DEFAULT_CONFIG.copy()
        self.config_path = config_path or os.path.expanduser("~/.pdf_bruteforce_config.json")

        if os.path.exists(self.config_path):
            self.load()

    def load(self) -> None:
        """Load configuration from file"""
        try:
            with open(self.config_path, 'r') as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Error loading config file: {e}") from e
        if not isinstance(user_config, dict):
            raise ConfigError(f"Config file must hold a JSON object: {self.config_path}")
        self.config.update(user_config)

    def save(self) -> None:
        """Save current configuration to file"""
        try:
            config_dir = os.path.dirname(self.config_path)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)

            with open(self.config_path, 'w') as f:
                json.dump(self.config, f, indent=2)
        except OSError as e:
            raise ConfigError(f"Error saving config file: {e}") from e

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value"""
        self.config[key] = value

    def __getitem__(self, key: str) -> Any:
        return self.config[key]


def verbosity_to_level(verbosity: Union[str, int]) -> int:
    """Convert verbosity string to logging level

    Args:
        verbosity: Verbosity string or logging level integer

    Returns:
        Logging level as integer
    """
    if isinstance(verbosity, int):
        return verbosity

    levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }

    return levels.get(verbosity.lower(), logging.INFO)
