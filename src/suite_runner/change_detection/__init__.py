"""Change detection domain exports."""

from .git_changed_files import (
    ChangeQuery,
    ChangeQueryResult,
    GitChangeDetector,
    build_change_query_command,
    build_change_query_commands,
)

__all__ = [
    "ChangeQuery",
    "ChangeQueryResult",
    "GitChangeDetector",
    "build_change_query_command",
    "build_change_query_commands",
]
