"""Custom exceptions for license-finder."""

from pathlib import Path
from typing import Optional, Union


class LicenseFinderError(Exception):
    """Base exception for all license-finder errors."""

    pass


class CommandExecutionError(LicenseFinderError):
    """Exception raised when a package manager command exits unsuccessfully.

    Attributes:
        command: The command line that was run.
        directory: The working directory it was run in.
        stderr: Captured error output of the command.
        output: Text reported in the message. Defaults to stderr; callers
            pass stdout instead for tools that print errors there.
    """

    def __init__(
        self,
        command: str,
        directory: Union[str, Path],
        stderr: str,
        output: Optional[str] = None,
    ) -> None:
        self.command = command
        self.directory = directory
        self.stderr = stderr
        self.output = stderr if output is None else output
        super().__init__(
            f"Command '{command}' failed to execute in {directory}: {self.output}"
        )


class ReportParseError(LicenseFinderError):
    """Exception raised when a dependency report cannot be parsed."""

    pass


class ConfigurationError(LicenseFinderError):
    """Exception raised when configuration is invalid."""

    pass
