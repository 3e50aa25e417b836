"""
Configuration for SVG markup output.
"""

from svg_markup.config.default import DEFAULT_CONFIG
from svg_markup.config.loader import ConfigError, load_config, merge_configs

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigError",
    "load_config",
    "merge_configs",
]
