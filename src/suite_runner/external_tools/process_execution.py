"""Shell execution of assembled test commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from .tool_errors import CommandExecutionError

# Exit statuses POSIX shells use when the command itself could not be started.
SHELL_NOT_EXECUTABLE_STATUS = 126
SHELL_NOT_FOUND_STATUS = 127

_LOGGER = logging.getLogger(__name__)


class ProcessExecutor(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for running a suite command line."""

    def execute(self, command_line: str) -> int: ...


class ShellProcessExecutor:  # pylint: disable=too-few-public-methods
    """Run command lines in a subshell that inherits this process's stdio.

    Exit statuses 126 and 127 are read as "the shell could not start the
    command" and raise ``CommandExecutionError``. A command that starts and
    then exits 126 or 127 itself (including one wrapped in ``sh -c``) is
    treated the same way; every other status is returned unchanged.
    """

    def __init__(self, *, cwd: Path | str | None = None) -> None:
        self._cwd = cwd

    def execute(self, command_line: str) -> int:
        """Run ``command_line`` to completion and return its exit status."""
        _LOGGER.debug("executing: %s", command_line)
        try:
            completed = subprocess.run(command_line, shell=True, cwd=self._cwd, check=False)
        except OSError as exc:
            raise CommandExecutionError(f"Test command could not be invoked: {exc}") from exc
        if completed.returncode in (SHELL_NOT_EXECUTABLE_STATUS, SHELL_NOT_FOUND_STATUS):
            raise CommandExecutionError(
                f"Test command could not be invoked (exit code {completed.returncode}): "
                f"{command_line.strip()}"
            )
        _LOGGER.debug("exit status %d", completed.returncode)
        return completed.returncode
