"""Configuration handling for license-finder."""
from __future__ import annotations

from license_finder.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_finder.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from license_finder.models.config import AdapterConfig, FinderConfig

__all__ = [
    "AdapterConfig",
    "DEFAULT_CONFIG_NAMES",
    "FinderConfig",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
]
