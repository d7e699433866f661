"""
Configuration management module
"""

import copy
import logging
import os
import yaml
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Config:
    """Configuration manager for the arc point calculator"""

    # Default configuration
    DEFAULTS = {
        "solver": {
            "epsilon": 1e-9,
            "min_dlead": 1e-6,
            "max_dlead": 1e6,
            "default_radius": 1.0,
        },
        "display": {
            "precision": 4,
            "samples": 0,
        },
        "system": {
            "debug": False,
            "log_dir": None,
        }
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML config file (optional)
        """
        self.config = copy.deepcopy(self.DEFAULTS)

        if config_file:
            if os.path.exists(config_file):
                self.load_from_file(config_file)
            else:
                logger.warning(f"Config file not found, using defaults: {config_file}")

    def load_from_file(self, config_file: str) -> None:
        """Load configuration from YAML file"""
        try:
            with open(config_file, 'r') as f:
                yaml_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config file {config_file}: {e}")
            return

        if isinstance(yaml_config, dict):
            self._deep_update(self.config, yaml_config)
        elif yaml_config is not None:
            logger.warning(f"Ignoring config file {config_file}: top level is not a mapping")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "solver.epsilon")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value using dot notation.

        Args:
            key: Configuration key
            value: Value to set
        """
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    @staticmethod
    def _deep_update(base_dict: Dict, update_dict: Dict) -> None:
        """Deep update dictionary"""
        for key, value in update_dict.items():
            if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
                Config._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    def to_dict(self) -> Dict:
        """Get configuration as dictionary"""
        return copy.deepcopy(self.config)
