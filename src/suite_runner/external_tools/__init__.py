"""External tool boundary exports."""

from .process_execution import ProcessExecutor, ShellProcessExecutor
from .tool_errors import ChangeQueryError, CommandExecutionError, ExternalToolError

__all__ = [
    "ProcessExecutor",
    "ShellProcessExecutor",
    "ChangeQueryError",
    "CommandExecutionError",
    "ExternalToolError",
]
