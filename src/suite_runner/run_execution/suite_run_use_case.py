"""Suite run use-case service."""

from __future__ import annotations

import logging
import traceback
from collections.abc import Sequence

from suite_runner.change_detection.git_changed_files import ChangeQuery, GitChangeDetector
from suite_runner.command_building.suite_command import build_suite_command
from suite_runner.configuration.suite_settings import RunMode, SuiteSpec
from suite_runner.diagnostics.debug_output import DebugOutput
from suite_runner.external_tools.process_execution import ProcessExecutor, ShellProcessExecutor
from suite_runner.external_tools.tool_errors import ChangeQueryError
from suite_runner.path_resolution.test_file_resolver import resolve_test_files

from .run_contracts import SuiteRunOutcome

_LOGGER = logging.getLogger(__name__)


class SuiteRunner:
    """Resolve, build and dispatch the test command of each suite.

    A suite whose change query fails is reported and skipped; the remaining
    suites still run. A test command that cannot be launched aborts the run.
    """

    def __init__(
        self,
        mode: RunMode,
        *,
        output: DebugOutput | None = None,
        change_query: ChangeQuery | None = None,
        executor: ProcessExecutor | None = None,
    ) -> None:
        self._mode = mode
        self._output = output or DebugOutput(debug=mode.debug)
        self._change_query = change_query or GitChangeDetector()
        self._executor = executor or ShellProcessExecutor()

    def run(
        self, suites: Sequence[SuiteSpec], requested_paths: Sequence[str]
    ) -> tuple[SuiteRunOutcome, ...]:
        outcomes: list[SuiteRunOutcome] = []
        for suite in suites:
            try:
                outcomes.append(self.run_suite(suite, requested_paths))
            except ChangeQueryError as exc:
                self._report_skipped_suite(exc)
                outcomes.append(
                    SuiteRunOutcome(test_files=(), command_line=None, executed=False, error=str(exc))
                )
        return tuple(outcomes)

    def run_suite(self, suite: SuiteSpec, requested_paths: Sequence[str]) -> SuiteRunOutcome:
        candidate_paths = tuple(requested_paths) or (suite.test_dir,)
        test_files = self._lookup_test_files(candidate_paths, suite)

        self._output.debug_puts(f"{len(test_files)} Test files:")
        for test_file in test_files:
            self._output.debug_puts(f"  {test_file}")

        command_line = build_suite_command(suite, self._mode).render(test_files)
        if test_files:
            self._output.debug_puts("Test command:")
            self._output.debug_puts(f"  {command_line}")

        if self._should_execute(test_files):
            exit_status = self._executor.execute(command_line)
            return SuiteRunOutcome(
                test_files=test_files,
                command_line=command_line,
                executed=True,
                exit_status=exit_status,
            )

        if self._mode.list_files:
            self._output.puts("\n".join(test_files))
        if self._mode.dry_run:
            self._output.puts(command_line)
        return SuiteRunOutcome(test_files=test_files, command_line=command_line, executed=False)

    def _should_execute(self, test_files: tuple[str, ...]) -> bool:
        return bool(test_files) and not self._mode.dry_run and not self._mode.list_files

    def _lookup_test_files(
        self, candidate_paths: tuple[str, ...], suite: SuiteSpec
    ) -> tuple[str, ...]:
        if not self._mode.changed_only:
            with self._output.bench("Lookup test files"):
                test_files = resolve_test_files(candidate_paths, suite)
            return test_files

        with self._output.bench("Lookup changed test files"):
            result = self._change_query.query(self._mode.changed_ref, candidate_paths)
            # no changes means no files, not the suite test dir
            test_files = resolve_test_files(result.files, suite) if result.files else ()
        self._output.debug_puts(f"  `{result.cmd}`")
        return test_files

    def _report_skipped_suite(self, exc: ChangeQueryError) -> None:
        _LOGGER.debug("suite skipped after change query failure", exc_info=exc)
        self._output.puts(f"{type(exc).__name__}: {exc}")
        for line in traceback.format_exception(exc):
            for trace_line in line.rstrip("\n").splitlines():
                self._output.debug_puts(trace_line)
