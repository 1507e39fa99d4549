"""Dependency discovery across every applicable package manager."""
from pathlib import Path
from typing import Optional

import structlog

from license_finder.config import FinderConfig, load_config
from license_finder.models.package import Package
from license_finder.package_managers import active_package_managers
from license_finder.runner import CommandRunner

logger = structlog.get_logger("finder")


def discover_packages(
    project_path: Path,
    config: Optional[FinderConfig] = None,
    runner: Optional[CommandRunner] = None,
) -> list[Package]:
    """Discover the third-party packages a project declares.

    Every active package manager is asked in registry order. Those whose
    tooling is not installed are skipped.

    Args:
        project_path: Project directory to inspect.
        config: Configuration to use. Loaded from the project directory's
            configuration file when not given.
        runner: Command runner shared by the adapters.

    Returns:
        Packages from all adapters, each adapter's in its own report order.

    Raises:
        ConfigurationError: If the configuration file is invalid.
        CommandExecutionError: If a package manager command fails.
        ReportParseError: If a package manager report cannot be parsed.
    """
    if config is None:
        config = load_config(project_path=project_path)

    adapter_config = config.adapter_config(project_path)
    managers = active_package_managers(adapter_config, runner)
    if not managers:
        logger.warning("No package managers detected", project=str(project_path))

    packages: list[Package] = []
    for manager in managers:
        if not manager.is_installed():
            logger.warning(
                "Skipping package manager",
                package_manager=manager.package_manager_name,
                reason="not installed",
            )
            continue
        packages.extend(manager.current_packages())

    return packages
