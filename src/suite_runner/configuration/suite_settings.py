"""Suite and run-mode configuration entities."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .configuration_errors import ConfigurationError

DEFAULT_TEST_DIR = "test"
DEFAULT_TEST_FILE_SUFFIXES: tuple[str, ...] = ("_test.rb",)
DEFAULT_PARALLEL_ENV_VAR_NAME = "PARALLEL_WORKERS"
DEFAULT_SEED_ENV_VAR_NAME = "SEED"
SEED_VALUE_LIMIT = 0xFFFF

_OPTIONAL_FIELD_DEFAULTS: dict[str, object] = {
    "test_dir": DEFAULT_TEST_DIR,
    "test_file_suffixes": DEFAULT_TEST_FILE_SUFFIXES,
    "parallel_env_var_name": DEFAULT_PARALLEL_ENV_VAR_NAME,
    "seed_env_var_name": DEFAULT_SEED_ENV_VAR_NAME,
    "env_vars": "",
}


def random_seed_value() -> int:
    """Pick a seed for runs that do not request one explicitly."""
    return random.randrange(SEED_VALUE_LIMIT)


@dataclass(frozen=True)
class SuiteSpec:  # pylint: disable=too-many-instance-attributes
    """Declarative description of one test suite.

    An empty ``verbose_cmd`` falls back to ``default_cmd`` and any other field
    passed as ``None`` takes its default, so every field is populated once the
    instance exists. A single suffix string counts as a one-item suffix list.
    """

    default_cmd: str
    verbose_cmd: str = ""
    test_dir: str = DEFAULT_TEST_DIR
    test_file_suffixes: tuple[str, ...] = DEFAULT_TEST_FILE_SUFFIXES
    parallel_env_var_name: str = DEFAULT_PARALLEL_ENV_VAR_NAME
    seed_env_var_name: str = DEFAULT_SEED_ENV_VAR_NAME
    env_vars: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.default_cmd, str) or not self.default_cmd.strip():
            raise ConfigurationError("default_cmd must be a non-empty string.")
        if not self.verbose_cmd:
            object.__setattr__(self, "verbose_cmd", self.default_cmd)
        for name, default in _OPTIONAL_FIELD_DEFAULTS.items():
            if getattr(self, name) is None:
                object.__setattr__(self, name, default)
        suffixes = self.test_file_suffixes
        if isinstance(suffixes, str):
            suffixes = (suffixes,)
        object.__setattr__(self, "test_file_suffixes", tuple(suffixes))


@dataclass(frozen=True)
class RunMode:  # pylint: disable=too-many-instance-attributes
    """Caller-supplied flags for one run across all suites."""

    verbose: bool = False
    dry_run: bool = False
    list_files: bool = False
    debug: bool = False
    changed_only: bool = False
    changed_ref: str = ""
    seed_value: int = field(default_factory=random_seed_value)
    parallel_workers: int | None = None
