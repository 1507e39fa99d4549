"""Base package manager interface."""

import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import structlog

from license_finder.models.config import AdapterConfig
from license_finder.models.package import Package
from license_finder.runner import CommandRunner, SubprocessRunner

logger = structlog.get_logger("package_manager")


class PackageManager(ABC):
    """Abstract base class for package manager adapters.

    Every adapter translates one ecosystem's tooling output into Package
    records and must implement current_packages() and
    package_management_command().
    """

    package_manager_name: str = ""

    def __init__(
        self, config: AdapterConfig, runner: Optional[CommandRunner] = None
    ) -> None:
        """Initialize the adapter.

        Args:
            config: Adapter settings, including the project directory.
            runner: Command runner to use. Defaults to SubprocessRunner.
        """
        self.config = config
        self.runner = runner if runner is not None else SubprocessRunner()

    @property
    def project_path(self) -> Path:
        return self.config.project_path

    @abstractmethod
    def current_packages(self) -> list[Package]:
        """List the dependencies the project currently declares.

        Returns:
            Packages in the order the package manager reports them.

        Raises:
            CommandExecutionError: If the package manager command fails.
            ReportParseError: If its output cannot be parsed.
        """

    @abstractmethod
    def package_management_command(self) -> str:
        """Return the command that would be run, without running it."""

    @abstractmethod
    def possible_package_paths(self) -> list[Path]:
        """Files whose presence marks a project of this ecosystem."""

    def detected_package_path(self) -> Optional[Path]:
        """Return the first possible package path that exists, if any."""
        for path in self.possible_package_paths():
            if path.exists():
                return path
        return None

    def is_active(self) -> bool:
        """True if the project directory belongs to this ecosystem."""
        return self.detected_package_path() is not None

    def is_installed(self) -> bool:
        """True if the package management command can be found."""
        command = self.package_management_command()
        installed = shutil.which(command) is not None or Path(command).is_file()
        if installed:
            logger.debug(
                "Package manager is installed",
                package_manager=self.package_manager_name,
                command=command,
            )
        else:
            logger.warning(
                "Package manager is not installed",
                package_manager=self.package_manager_name,
                command=command,
            )
        return installed

    def is_project_root(self) -> bool:
        """True if project_path is the top-level project of its tree."""
        return self.is_active()
