#!/usr/bin/env python3
"""
Configuration loader for keygrid.

Provides configuration management using a YAML file, with built-in defaults
for any section or setting the file leaves out.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from keygrid.presets import PRESETS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    'common': {
        'default_preset': 'init',
    },
    'shuffle': {
        'default_times': 100,
        'random_seed': None,
    },
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(levelname)s - %(message)s',
    },
    'display': {
        'show_upper': False,
    },
}

LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


class ConfigLoader:
    """Handles loading and processing of YAML configuration files."""

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        self._config_cache: Optional[Dict[str, Any]] = None

    def load_config(self) -> Dict[str, Any]:
        """
        Load YAML configuration file, merged over the defaults.

        Returns:
            Full configuration dictionary

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            yaml.YAMLError: If YAML parsing fails
        """
        if self._config_cache is not None:
            return self._config_cache

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML configuration: {e}")

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration root must be a mapping: {self.config_path}")

        config = copy.deepcopy(DEFAULT_CONFIG)
        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(config.get(section), dict):
                config[section].update(values)
            else:
                config[section] = values

        logger.info(f"Loaded configuration from {self.config_path}")
        self._config_cache = config
        return config

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get one configuration section.

        Args:
            section: Section name (e.g., 'shuffle')

        Returns:
            Copy of the section dictionary

        Raises:
            ValueError: If section not found in configuration
        """
        full_config = self.load_config()

        if section not in full_config:
            raise ValueError(
                f"Section '{section}' not found in configuration. "
                f"Available sections: {list(full_config.keys())}"
            )

        return dict(full_config[section])

    def validate_config(self) -> List[str]:
        """
        Validate the configuration and return any issues found.

        Returns:
            List of validation error messages (empty if valid)
        """
        try:
            config = self.load_config()
        except (ValueError, FileNotFoundError, yaml.YAMLError) as e:
            return [f"Configuration error: {e}"]

        issues = []

        preset = config['common'].get('default_preset')
        if not isinstance(preset, str) or preset.lower() not in PRESETS:
            issues.append(f"Unknown default_preset: {preset!r}. Available: {list(PRESETS)}")

        times = config['shuffle'].get('default_times')
        if not isinstance(times, int) or isinstance(times, bool) or times < 0:
            issues.append(f"shuffle.default_times must be a non-negative integer, got {times!r}")

        seed = config['shuffle'].get('random_seed')
        if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
            issues.append(f"shuffle.random_seed must be an integer or null, got {seed!r}")

        level = config['logging'].get('level')
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            issues.append(f"logging.level must be one of {sorted(LOG_LEVELS)}, got {level!r}")

        return issues


# Global configuration loader instance
_config_loader: Optional[ConfigLoader] = None


def get_config_loader(config_path: str = "config.yaml") -> ConfigLoader:
    """
    Get global configuration loader instance (singleton pattern).

    Args:
        config_path: Path to configuration file

    Returns:
        ConfigLoader instance
    """
    global _config_loader

    if _config_loader is None or _config_loader.config_path != Path(config_path):
        _config_loader = ConfigLoader(config_path)

    return _config_loader


def load_config_section(section: str, config_path: str = "config.yaml") -> Dict[str, Any]:
    """
    Convenience function to load one configuration section.

    Args:
        section: Section name
        config_path: Path to configuration file

    Returns:
        Section configuration dictionary
    """
    loader = get_config_loader(config_path)
    return loader.get_section(section)
