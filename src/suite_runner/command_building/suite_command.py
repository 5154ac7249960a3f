"""Suite command line construction."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from suite_runner.configuration.suite_settings import RunMode, SuiteSpec


@dataclass(frozen=True)
class SuiteCommand:
    """Environment prefix and command template for one suite run."""

    env_prefix: str
    command: str

    def render(self, test_files: Sequence[str]) -> str:
        """Assemble the shell command line that runs ``test_files``."""
        return f"{self.env_prefix} {self.command} {' '.join(test_files)}"


def build_env_prefix(suite: SuiteSpec, mode: RunMode) -> str:
    """Suite env vars, then the seed assignment, then the optional worker count."""
    prefix = f"{suite.env_vars} {suite.seed_env_var_name}={mode.seed_value}"
    if mode.parallel_workers is not None:
        prefix += f" {suite.parallel_env_var_name}={mode.parallel_workers}"
    return prefix


def build_suite_command(suite: SuiteSpec, mode: RunMode) -> SuiteCommand:
    """Pair the env prefix with the verbose or default command of the suite."""
    command = suite.verbose_cmd if mode.verbose else suite.default_cmd
    return SuiteCommand(env_prefix=build_env_prefix(suite, mode), command=command)
