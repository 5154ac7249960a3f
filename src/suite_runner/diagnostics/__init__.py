"""Diagnostics output exports."""

from .debug_output import (
    DEBUG_MARKER,
    DebugOutput,
    OutputSink,
    bench_message,
    debug_message,
    rounded_milliseconds,
)

__all__ = [
    "DEBUG_MARKER",
    "DebugOutput",
    "OutputSink",
    "bench_message",
    "debug_message",
    "rounded_milliseconds",
]
