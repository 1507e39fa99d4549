"""Configuration file discovery and loading for license-finder."""
from __future__ import annotations

from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from license_finder.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_finder.exceptions import ConfigurationError
from license_finder.models.config import FinderConfig

logger = structlog.get_logger("config")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in the specified directory.

    Searches for `.license-finder.yaml` first, then `.license-finder.yml`.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the configuration file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    for name in DEFAULT_CONFIG_NAMES:
        config_path = search_dir / name
        if config_path.exists():
            return config_path
    return None


def load_config_file(path: Path) -> FinderConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated FinderConfig instance.

    Raises:
        ConfigurationError: If file cannot be read, has invalid YAML,
            or fails Pydantic validation.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    if not content.strip():
        return get_default_config()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    # Only comments
    if data is None:
        return get_default_config()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        config = FinderConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {_format_validation_errors(e)}"
        ) from e

    logger.debug("Loaded configuration", path=str(path))
    return config


def _format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        messages.append(f"{loc}: {err['msg']}")
    return "; ".join(messages)


def load_config(
    config_path: str | Path | None = None,
    project_path: Path | None = None,
) -> FinderConfig:
    """Load configuration from file or use defaults.

    If a config_path is provided, loads from that file. Otherwise searches
    the project directory (or the current directory) for a configuration
    file. If none is found, returns the default configuration.

    Args:
        config_path: Optional path to a configuration file that must exist.
        project_path: Directory to search when config_path is not given.

    Returns:
        FinderConfig with loaded or default values.

    Raises:
        ConfigurationError: If the chosen configuration file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file(project_path)
    if discovered is not None:
        return load_config_file(discovered)

    return get_default_config()
