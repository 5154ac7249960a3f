"""Path resolution domain exports."""

from .test_file_resolver import is_single_test, is_test_file, resolve_test_files, split_file_line

__all__ = ["is_single_test", "is_test_file", "resolve_test_files", "split_file_line"]
