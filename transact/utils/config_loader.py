"""Configuration file loader with validation"""

import yaml
import os
from pathlib import Path
from typing import Dict, Any
from transact.constants import DEFAULT_LOG_LEVEL
from .errors import ConfigurationError

DEFAULT_CONFIG_PATH = "config/transact.yaml"
REQUIRED_KEYS = ['version', 'storage', 'logging']


def load_config(config_path: str = None) -> Dict[str, Any]:
    """
    Load YAML configuration file with validation.

    Args:
        config_path: Path to configuration file. Falls back to the
            TRANSACT_CONFIG environment variable, then config/transact.yaml.

    Returns:
        Dictionary with configuration

    Raises:
        ConfigurationError: If file doesn't exist or invalid YAML
    """
    if config_path is None:
        config_path = os.getenv("TRANSACT_CONFIG", DEFAULT_CONFIG_PATH)

    config_file = Path(config_path)
    if not config_file.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration: {e}")

    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration must be a mapping: {config_path}")

    missing_keys = [key for key in REQUIRED_KEYS if key not in config]
    if missing_keys:
        raise ConfigurationError(f"Missing required configuration keys: {missing_keys}")

    return config


def save_config(config_path: str, config: Dict[str, Any]) -> None:
    """
    Save configuration to YAML file

    Args:
        config_path: Path to configuration file
        config: Configuration dictionary

    Raises:
        ConfigurationError: If unable to write file
    """
    try:
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w') as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)

    except OSError as e:
        raise ConfigurationError(f"Error saving configuration: {e}")


def get_storage_path(config: Dict[str, Any]) -> Path:
    """
    Resolve the data file path.

    TRANSACT_DATA_FILE overrides storage.data_file from the config.
    """
    override = os.getenv("TRANSACT_DATA_FILE")
    if override:
        return Path(override)

    data_file = config.get('storage', {}).get('data_file')
    if not data_file:
        raise ConfigurationError("storage.data_file is not configured")
    return Path(data_file)


def get_log_level(config: Dict[str, Any]) -> str:
    """Log level from config, LOG_LEVEL env var wins"""
    return os.getenv("LOG_LEVEL") or config.get('logging', {}).get('level', DEFAULT_LOG_LEVEL)
