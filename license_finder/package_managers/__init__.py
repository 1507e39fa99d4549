"""Package manager adapters and their registry."""

from typing import Optional

from license_finder.models.config import AdapterConfig
from license_finder.package_managers.base import PackageManager
from license_finder.package_managers.maven import Maven
from license_finder.runner import CommandRunner

# Adapters in the order they are tried for a project
PACKAGE_MANAGERS: list[type[PackageManager]] = [
    Maven,
]


def active_package_managers(
    config: AdapterConfig, runner: Optional[CommandRunner] = None
) -> list[PackageManager]:
    """Instantiate the adapters that apply to a project directory.

    Args:
        config: Adapter settings, including the project directory.
        runner: Command runner shared by the adapters.

    Returns:
        Active adapters, in registry order.
    """
    managers = [cls(config, runner) for cls in PACKAGE_MANAGERS]
    return [manager for manager in managers if manager.is_active()]


__all__ = [
    "Maven",
    "PACKAGE_MANAGERS",
    "PackageManager",
    "active_package_managers",
]
