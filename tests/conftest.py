"""Shared fixtures for license-finder tests."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest

from license_finder.runner import CommandResult, CommandRunner


class FakeRunner(CommandRunner):
    """Command runner returning canned results instead of spawning processes."""

    def __init__(self, results: Optional[dict[str, CommandResult]] = None) -> None:
        self.results = results or {}
        self.commands: list[str] = []
        self.directories: list[Path] = []

    def run(self, command: str) -> CommandResult:
        self.commands.append(command)
        self.directories.append(Path.cwd())
        return self.results.get(command, CommandResult("", "", 0))


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Provide a runner where every command succeeds with no output."""
    return FakeRunner()


@pytest.fixture
def maven_project(tmp_path: Path) -> Path:
    """Provide a directory containing an empty pom.xml."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "pom.xml").write_text("<project/>\n")
    return project


def license_xml(dependencies: str) -> str:
    """Wrap dependency elements in a licenseSummary document."""
    return f"""
        <?xml version="1.0" encoding="UTF-8" standalone="no"?>
        <licenseSummary>
          <dependencies>
            {dependencies}
          </dependencies>
        </licenseSummary>
    """


def write_report(module_dir: Path, dependencies: str) -> Path:
    """Write a licenses.xml where download-licenses would put it."""
    report = module_dir / "target" / "generated-resources" / "licenses.xml"
    report.parent.mkdir(parents=True, exist_ok=True)
    report.write_text(license_xml(dependencies), encoding="utf-8")
    return report


@pytest.fixture
def report_xml():
    """Provide the licenseSummary document builder."""
    return license_xml


@pytest.fixture
def report_writer():
    """Provide the licenses.xml writer."""
    return write_report
