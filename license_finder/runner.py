"""External command execution for package manager adapters."""

import os
import shlex
import subprocess
import time
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import structlog

from license_finder.exceptions import CommandExecutionError

logger = structlog.get_logger("runner")

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127
# Shell convention for "incorrect usage"
MALFORMED_COMMAND = 2


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one command invocation."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """True if the command exited with status 0."""
        return self.returncode == 0


class CommandRunner(ABC):
    """Abstract base class for command runners.

    Runners execute a command line in the current working directory and
    report its outcome. A non-zero exit is never raised as an exception;
    callers decide what a failure means.
    """

    @abstractmethod
    def run(self, command: str) -> CommandResult:
        """Run a command line and wait for it to finish.

        Args:
            command: Full command line to execute.

        Returns:
            CommandResult with captured stdout, stderr and exit status.
        """


class SubprocessRunner(CommandRunner):
    """Runner that spawns a real child process."""

    def run(self, command: str) -> CommandResult:
        args: Union[str, list[str]] = command
        if os.name != "nt":
            try:
                args = shlex.split(command)
            except ValueError as e:
                logger.error(
                    "Command line is malformed", command=command, error=str(e)
                )
                return CommandResult(stdout="", stderr=str(e), returncode=MALFORMED_COMMAND)

        start_time = time.time()
        try:
            process = subprocess.run(
                args, capture_output=True, text=True, check=False,
            )
        except OSError as e:
            logger.error("Command could not be started", command=command, error=str(e))
            return CommandResult(stdout="", stderr=str(e), returncode=COMMAND_NOT_FOUND)

        logger.debug(
            "Command finished",
            command=command,
            returncode=process.returncode,
            elapsed=f"{time.time() - start_time:.3f}s",
        )
        return CommandResult(
            stdout=process.stdout or "",
            stderr=process.stderr or "",
            returncode=process.returncode,
        )


@contextmanager
def working_directory(path: Union[str, Path]) -> Iterator[Path]:
    """Change into a directory for the duration of a block.

    The previous working directory is restored however the block exits.

    Args:
        path: Directory to change into.

    Yields:
        The directory that was entered.
    """
    previous = Path.cwd()
    os.chdir(path)
    try:
        yield Path(path)
    finally:
        os.chdir(previous)


def run_in_directory(
    runner: CommandRunner, command: str, directory: Union[str, Path]
) -> CommandResult:
    """Run a command inside a directory and require it to succeed.

    Args:
        runner: Runner used to execute the command.
        command: Full command line to execute.
        directory: Working directory for the command.

    Returns:
        The successful CommandResult.

    Raises:
        CommandExecutionError: If the command exits unsuccessfully. Its
            message reports stderr, or stdout when stderr is empty since
            Maven reports build errors on stdout.
    """
    logger.info("Running command", command=command, directory=str(directory))
    with working_directory(directory):
        result = runner.run(command)

    if not result.success:
        stderr = result.stderr.strip()
        logger.error(
            "Command failed",
            command=command,
            directory=str(directory),
            returncode=result.returncode,
            _style="bold red",
        )
        raise CommandExecutionError(
            command, directory, stderr, output=stderr or result.stdout.strip()
        )
    return result
