"""Run execution entities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SuiteRunOutcome:
    """Output contract for one suite of a run."""

    test_files: tuple[str, ...]
    command_line: str | None
    executed: bool
    exit_status: int | None = None
    error: str | None = None


def summarize_exit_status(outcomes: Sequence[SuiteRunOutcome]) -> int:
    """Exit status for a whole run.

    The first non-zero test command status wins. A suite skipped because its
    change query failed counts as status 1 when no command failed.
    """
    for outcome in outcomes:
        if outcome.exit_status:
            return outcome.exit_status
    if any(outcome.error is not None for outcome in outcomes):
        return 1
    return 0
