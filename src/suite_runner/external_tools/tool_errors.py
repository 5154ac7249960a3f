"""Errors raised at the external process boundary."""

from __future__ import annotations


class ExternalToolError(Exception):
    """Raised when an external tool cannot be invoked."""


class ChangeQueryError(ExternalToolError):
    """Raised when the version-control client cannot be invoked."""


class CommandExecutionError(ExternalToolError):
    """Raised when a suite test command cannot be launched."""
