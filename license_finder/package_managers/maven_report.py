"""Maven license report generation and parsing.

The report comes from the license-maven-plugin `download-licenses` goal,
which writes one `licenses.xml` per module:

    <licenseSummary>
      <dependencies>
        <dependency>
          <groupId>junit</groupId>
          <artifactId>junit</artifactId>
          <version>4.11</version>
          <licenses>
            <license><name>Eclipse Public License 1.0</name></license>
          </licenses>
        </dependency>
      </dependencies>
    </licenseSummary>
"""
import os
import re
import shlex
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from pathlib import Path
from typing import Optional
from urllib.parse import quote

import structlog

from license_finder.constants import (
    MAVEN_CENTRAL_ARTIFACT_URL,
    MAVEN_COMMAND,
    MAVEN_DOWNLOAD_LICENSES_GOAL,
    MAVEN_EXCLUDED_SCOPES_FLAG,
    MAVEN_LICENSE_REPORT,
    MAVEN_WRAPPER,
    MAVEN_WRAPPER_WINDOWS,
)
from license_finder.exceptions import ReportParseError
from license_finder.models.package import License, Package
from license_finder.runner import CommandRunner, run_in_directory

logger = structlog.get_logger("maven_report")

PACKAGE_MANAGER_NAME = "Maven"


def maven_wrapper_path(project_path: Path) -> Path:
    """Path the project-local Maven wrapper would have on this platform."""
    name = MAVEN_WRAPPER_WINDOWS if os.name == "nt" else MAVEN_WRAPPER
    return project_path / name


def resolve_maven_command(project_path: Path) -> str:
    """Pick the Maven executable for a project.

    Args:
        project_path: Project directory.

    Returns:
        Path of the project's Maven wrapper if it has one, otherwise the
        global `mvn` command.
    """
    wrapper = maven_wrapper_path(project_path)
    if wrapper.is_file():
        return str(wrapper)
    return MAVEN_COMMAND


def invocable_command(command: str) -> str:
    """Quote a resolved Maven command for use in a command line.

    Wrapper paths are made absolute so they still resolve once the
    command runs inside the project directory.
    """
    if command == MAVEN_COMMAND:
        return command
    wrapper = str(Path(command).resolve())
    if os.name == "nt":
        return f'"{wrapper}"' if " " in wrapper else wrapper
    return shlex.quote(wrapper)


class MavenReportSource:
    """Generates and collects license-maven-plugin reports for a project."""

    def __init__(
        self,
        project_path: Path,
        runner: CommandRunner,
        maven_options: Optional[str] = None,
    ) -> None:
        self.project_path = project_path
        self.runner = runner
        self.maven_options = maven_options

    def package_management_command(self) -> str:
        return resolve_maven_command(self.project_path)

    def command(self, excluded_groups: Sequence[str] = ()) -> str:
        """Build the report generation command line.

        Args:
            excluded_groups: Dependency scopes to exclude, joined in the
                order given.

        Returns:
            The full Maven command line.
        """
        tool = invocable_command(self.package_management_command())
        command = f"{tool} {MAVEN_DOWNLOAD_LICENSES_GOAL}"
        if excluded_groups:
            command += f" {MAVEN_EXCLUDED_SCOPES_FLAG}={','.join(excluded_groups)}"
        if self.maven_options:
            command += f" {self.maven_options}"
        return command

    def fetch(
        self, working_dir: Path, excluded_groups: Sequence[str] = ()
    ) -> list[str]:
        """Run the report goal and read the reports it wrote.

        Args:
            working_dir: Directory to run Maven in.
            excluded_groups: Dependency scopes to exclude.

        Returns:
            Contents of every module's licenses.xml, in path order.

        Raises:
            CommandExecutionError: If Maven exits unsuccessfully.
            ReportParseError: If a report cannot be read or decoded.
        """
        run_in_directory(self.runner, self.command(excluded_groups), working_dir)

        report_files = find_report_files(working_dir)
        if not report_files:
            logger.warning("No license reports found", directory=str(working_dir))

        documents: list[str] = []
        for report in report_files:
            logger.debug("Reading license report", path=str(report))
            documents.append(read_report(report))
        return documents


def find_report_files(project_path: Path) -> list[Path]:
    """Find every module's licenses.xml below a project directory."""
    pattern = "/".join(("**",) + MAVEN_LICENSE_REPORT)
    return sorted(path for path in project_path.glob(pattern) if path.is_file())


_ENCODING_DECLARATION = re.compile(
    rb"\A(?:\xef\xbb\xbf)?\s*<\?xml[^>]*?encoding\s*=\s*[\"']([A-Za-z0-9._-]+)[\"']"
)


def read_report(path: Path) -> str:
    """Read a licenses.xml in the encoding its XML declaration names.

    Reports without a declaration are read as UTF-8.

    Raises:
        ReportParseError: If the file cannot be read or decoded.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ReportParseError(f"Cannot read license report '{path}': {e}") from e

    match = _ENCODING_DECLARATION.match(data)
    encoding = match.group(1).decode("ascii") if match else "utf-8"
    if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
        encoding = "utf-8-sig"
    try:
        return data.decode(encoding)
    except (LookupError, UnicodeDecodeError) as e:
        raise ReportParseError(
            f"Cannot decode license report '{path}' as {encoding}: {e}"
        ) from e


def _local_name(tag: str) -> str:
    """Strip any XML namespace from a tag."""
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    children = _children(element, name)
    return children[0] if children else None


def _child_text(element: ET.Element, name: str) -> str:
    child = _child(element, name)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


def _parse_licenses(dependency: ET.Element) -> list[License]:
    licenses_element = _child(dependency, "licenses")
    if licenses_element is None:
        return []

    licenses: list[License] = []
    for license_element in _children(licenses_element, "license"):
        name = _child_text(license_element, "name")
        if not name:
            continue
        url = _child_text(license_element, "url") or None
        licenses.append(License(name=name, url=url))
    return licenses


def _package_url(group_id: str, artifact_id: str, version: str) -> Optional[str]:
    if not (group_id and artifact_id and version):
        return None
    segments = "/".join(quote(s, safe="") for s in (group_id, artifact_id, version))
    return f"{MAVEN_CENTRAL_ARTIFACT_URL}/{segments}/jar"


def parse_dependency(dependency: ET.Element, include_groups: bool) -> Package:
    """Build a Package from one <dependency> element.

    Args:
        dependency: The dependency element.
        include_groups: Whether to name the package groupId:artifactId.

    Returns:
        The normalized Package. Missing fields become empty strings and a
        dependency without licenses gets a single "unknown" license.
    """
    group_id = _child_text(dependency, "groupId")
    artifact_id = _child_text(dependency, "artifactId")
    version = _child_text(dependency, "version")

    name = f"{group_id}:{artifact_id}" if include_groups and group_id else artifact_id

    return Package(
        name=name,
        version=version,
        licenses=tuple(_parse_licenses(dependency)),
        groups=(group_id,) if group_id else (),
        package_manager=PACKAGE_MANAGER_NAME,
        package_url=_package_url(group_id, artifact_id, version),
    )


def parse_license_report(document: str, include_groups: bool = False) -> list[Package]:
    """Parse one licenses.xml document.

    Args:
        document: Raw XML text.
        include_groups: Whether to name packages groupId:artifactId.

    Returns:
        One Package per dependency entry, in document order.

    Raises:
        ReportParseError: If the document is not a well-formed
            licenseSummary.
    """
    try:
        root = ET.fromstring(document.strip())
    except ET.ParseError as e:
        raise ReportParseError(f"Invalid license report XML: {e}") from e

    if _local_name(root.tag) != "licenseSummary":
        raise ReportParseError(
            f"Invalid license report: expected root element 'licenseSummary', "
            f"got '{_local_name(root.tag)}'"
        )

    dependencies = _child(root, "dependencies")
    if dependencies is None:
        return []
    return [
        parse_dependency(dependency, include_groups)
        for dependency in _children(dependencies, "dependency")
    ]


def parse_license_reports(
    documents: Sequence[str], include_groups: bool = False
) -> list[Package]:
    """Parse several licenses.xml documents, keeping their order.

    Raises:
        ReportParseError: If any document cannot be parsed.
    """
    packages: list[Package] = []
    for document in documents:
        packages.extend(parse_license_report(document, include_groups))
    return packages
