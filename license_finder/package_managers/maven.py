"""Maven package manager adapter."""

from pathlib import Path
from typing import Optional

import structlog

from license_finder.constants import (
    MAVEN_NULL_EXPRESSION,
    MAVEN_PARENT_QUERY,
    MAVEN_POM,
)
from license_finder.models.config import AdapterConfig
from license_finder.models.package import Package
from license_finder.package_managers.base import PackageManager
from license_finder.package_managers.maven_report import (
    PACKAGE_MANAGER_NAME,
    MavenReportSource,
    invocable_command,
    parse_license_reports,
)
from license_finder.runner import CommandRunner, run_in_directory

logger = structlog.get_logger("maven")


class Maven(PackageManager):
    """Adapter for Maven projects.

    Dependencies and their licenses come from the license-maven-plugin
    report. A project-local `mvnw` wrapper is preferred over a global `mvn`.
    """

    package_manager_name = PACKAGE_MANAGER_NAME

    def __init__(
        self, config: AdapterConfig, runner: Optional[CommandRunner] = None
    ) -> None:
        super().__init__(config, runner)
        self.report_source = MavenReportSource(
            self.project_path, self.runner, maven_options=config.maven_options
        )

    def possible_package_paths(self) -> list[Path]:
        return [self.project_path / MAVEN_POM]

    def package_management_command(self) -> str:
        return self.report_source.package_management_command()

    def current_packages(self) -> list[Package]:
        """List the project's dependencies from a fresh Maven report.

        Packages reported identically by several modules are listed once.

        Returns:
            Packages in report order.

        Raises:
            CommandExecutionError: If Maven exits unsuccessfully.
            ReportParseError: If a report cannot be parsed.
        """
        documents = self.report_source.fetch(
            self.project_path, self.config.ignored_groups
        )
        packages = parse_license_reports(
            documents, include_groups=self.config.maven_include_groups
        )
        unique = list(dict.fromkeys(packages))
        logger.info(
            "Found Maven packages",
            project=str(self.project_path),
            count=len(unique),
            reports=len(documents),
        )
        return unique

    def parent_query_command(self) -> str:
        """Command line asking Maven for the module's parent project."""
        tool = invocable_command(self.package_management_command())
        return f"{tool} {MAVEN_PARENT_QUERY}"

    def is_project_root(self) -> bool:
        """Check whether project_path is the top-level Maven module.

        Returns:
            True if the module declares no parent project. False if it
            declares one, or if project_path is not a Maven project.

        Raises:
            CommandExecutionError: If the parent query fails, since the
                answer cannot be determined.
        """
        if not self.is_active():
            return False

        result = run_in_directory(
            self.runner, self.parent_query_command(), self.project_path
        )
        parent = result.stdout.strip()
        return not parent or parent == MAVEN_NULL_EXPRESSION
