"""Run execution domain exports."""

from .run_contracts import SuiteRunOutcome, summarize_exit_status
from .suite_run_use_case import SuiteRunner

__all__ = ["SuiteRunOutcome", "SuiteRunner", "summarize_exit_status"]
