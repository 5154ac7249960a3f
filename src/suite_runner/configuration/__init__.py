"""Configuration domain exports."""

from .configuration_errors import ConfigurationError
from .loader import DEFAULT_SUITES_FILE_PATH, load_suites
from .suite_settings import (
    DEFAULT_PARALLEL_ENV_VAR_NAME,
    DEFAULT_SEED_ENV_VAR_NAME,
    DEFAULT_TEST_DIR,
    DEFAULT_TEST_FILE_SUFFIXES,
    RunMode,
    SuiteSpec,
    random_seed_value,
)

__all__ = [
    "ConfigurationError",
    "DEFAULT_SUITES_FILE_PATH",
    "load_suites",
    "DEFAULT_PARALLEL_ENV_VAR_NAME",
    "DEFAULT_SEED_ENV_VAR_NAME",
    "DEFAULT_TEST_DIR",
    "DEFAULT_TEST_FILE_SUFFIXES",
    "RunMode",
    "SuiteSpec",
    "random_seed_value",
]
