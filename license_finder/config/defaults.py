"""Default configuration values for license-finder."""

from __future__ import annotations

from license_finder.models.config import FinderConfig

# Configuration file names searched for in the project directory
DEFAULT_CONFIG_NAMES = [".license-finder.yaml", ".license-finder.yml"]


def get_default_config() -> FinderConfig:
    """Get the default configuration.

    Returns:
        FinderConfig with all defaults (all fields None).
    """
    return FinderConfig()
