"""Tests for run execution domain entities."""

from __future__ import annotations

from suite_runner.run_execution.run_contracts import SuiteRunOutcome, summarize_exit_status


def _executed(exit_status: int) -> SuiteRunOutcome:
    return SuiteRunOutcome(
        test_files=("a_test.rb",),
        command_line=" SEED=1 ruby a_test.rb",
        executed=True,
        exit_status=exit_status,
    )


def test_suite_run_outcome_defaults_to_no_status_and_no_error() -> None:
    outcome = SuiteRunOutcome(test_files=(), command_line=" SEED=1 ruby ", executed=False)

    assert outcome.exit_status is None
    assert outcome.error is None


def test_exit_status_is_zero_when_every_suite_passes_or_did_not_run() -> None:
    outcomes = (
        _executed(0),
        SuiteRunOutcome(test_files=(), command_line=" SEED=1 ruby ", executed=False),
    )

    assert summarize_exit_status(outcomes) == 0
    assert summarize_exit_status(()) == 0


def test_exit_status_is_the_first_failing_suite_status() -> None:
    assert summarize_exit_status((_executed(0), _executed(2), _executed(1))) == 2


def test_skipped_suite_counts_as_failure_when_commands_pass() -> None:
    skipped = SuiteRunOutcome(test_files=(), command_line=None, executed=False, error="no git")

    assert summarize_exit_status((_executed(0), skipped)) == 1
    assert summarize_exit_status((skipped, _executed(4))) == 4
