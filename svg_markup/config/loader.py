"""
Configuration loading with fallback to defaults.
"""

import copy
import json
import os
from typing import Any, Dict, Optional

from svg_markup.config.default import DEFAULT_CONFIG
from svg_markup.utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "SVG_MARKUP_CONFIG"
DEFAULT_CONFIG_LOCATIONS = ["./svg_markup.json"]


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed."""
    pass


def merge_configs(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """
    Merge source config into target config.

    Args:
        target: Target configuration to update
        source: Source configuration to merge from
    """
    for key, value in source.items():
        if isinstance(value, dict) and key in target and isinstance(target[key], dict):
            # Recursively update nested dictionaries
            merge_configs(target[key], value)
        else:
            # Update or add value
            target[key] = value


def _read_config_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Error loading config from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a JSON object: {path}")
    return data


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration, merged over DEFAULT_CONFIG.

    An explicit path (argument or SVG_MARKUP_CONFIG) must exist and parse.
    Otherwise the default locations are tried and unreadable files skipped.

    Args:
        config_path: Optional explicit configuration path

    Returns:
        New configuration dictionary

    Raises:
        ConfigError: If an explicit configuration file is missing or invalid
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        merge_configs(config, _read_config_file(config_path))
        logger.debug(f"Loaded config from {config_path}")
        return config

    for location in DEFAULT_CONFIG_LOCATIONS:
        if os.path.exists(location):
            try:
                merge_configs(config, _read_config_file(location))
                logger.debug(f"Loaded config from {location}")
                break
            except ConfigError as e:
                logger.warning(str(e))

    return config
