"""Configuration error types."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when a suite configuration is invalid."""
