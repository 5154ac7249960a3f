"""Changed test file lookup through git."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from suite_runner.external_tools.tool_errors import ChangeQueryError

GitCommandRunner = Callable[[tuple[str, ...], Path | None], subprocess.CompletedProcess[str]]

_CHANGED_FILES_COMMAND = ("git", "diff", "--no-ext-diff", "--name-only")
_ADDED_FILES_COMMAND = ("git", "ls-files", "--others", "--exclude-standard")

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeQueryResult:
    """Changed file paths together with the command that listed them."""

    cmd: str
    files: tuple[str, ...]


class ChangeQuery(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for looking up files changed relative to a reference."""

    def query(self, changed_ref: str, requested_paths: Sequence[str]) -> ChangeQueryResult: ...


def build_change_query_commands(
    changed_ref: str, requested_paths: Sequence[str]
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Build the diff and untracked-file git commands limited to ``requested_paths``."""
    ref_args = (changed_ref,) if changed_ref else ()
    path_args = ("--", *requested_paths)
    return (
        (*_CHANGED_FILES_COMMAND, *ref_args, *path_args),
        (*_ADDED_FILES_COMMAND, *path_args),
    )


def build_change_query_command(changed_ref: str, requested_paths: Sequence[str]) -> str:
    """Render the change query as one shell command line, for diagnostics."""
    return " && ".join(
        shlex.join(command) for command in build_change_query_commands(changed_ref, requested_paths)
    )


class GitChangeDetector:  # pylint: disable=too-few-public-methods
    """List changed and untracked files with the git client.

    The commands run in order and stop at the first non-zero exit, the way a
    shell ``&&`` chain would. Exit codes are otherwise not checked: a failing
    diff yields whatever it printed, which may be nothing.
    """

    def __init__(
        self, *, cwd: Path | None = None, run_command: GitCommandRunner | None = None
    ) -> None:
        self._cwd = cwd
        self._run_command = run_command or _run_git_command

    def query(self, changed_ref: str, requested_paths: Sequence[str]) -> ChangeQueryResult:
        files: list[str] = []
        for command in build_change_query_commands(changed_ref, requested_paths):
            completed = self._run_command(command, self._cwd)
            files.extend(line for line in completed.stdout.splitlines() if line)
            if completed.returncode != 0:
                _LOGGER.debug(
                    "git exited with code %d: %s", completed.returncode, shlex.join(command)
                )
                break
        return ChangeQueryResult(
            cmd=build_change_query_command(changed_ref, requested_paths),
            files=tuple(files),
        )


def _run_git_command(
    command: tuple[str, ...], cwd: Path | None
) -> subprocess.CompletedProcess[str]:
    """Run one git command, capturing stdout and leaving stderr on the terminal."""
    _LOGGER.debug("running: %s", shlex.join(command))
    try:
        return subprocess.run(
            list(command), cwd=cwd, stdout=subprocess.PIPE, text=True, check=False
        )
    except OSError as exc:
        raise ChangeQueryError(
            f"Change query command could not be invoked: {shlex.join(command)} ({exc})"
        ) from exc
