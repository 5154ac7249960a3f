"""Command building domain exports."""

from .suite_command import SuiteCommand, build_env_prefix, build_suite_command

__all__ = ["SuiteCommand", "build_env_prefix", "build_suite_command"]
