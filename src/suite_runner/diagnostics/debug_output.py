"""Line-oriented output with debug tracing and phase timing."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager

import click

OutputSink = Callable[[str], None]
Clock = Callable[[], float]

DEBUG_MARKER = "[DEBUG]"
BENCH_LABEL_WIDTH = 30
ROUND_PRECISION = 3


def debug_message(message: str) -> str:
    return f"{DEBUG_MARKER} {message}"


def rounded_milliseconds(seconds: float) -> float:
    """Convert seconds to milliseconds truncated to three decimal places."""
    modifier = 10**ROUND_PRECISION
    return int(seconds * 1000 * modifier) / modifier


def bench_message(label: str, elapsed_seconds: float) -> str:
    start = debug_message(f"{label}...".ljust(BENCH_LABEL_WIDTH))
    return f"{start} ({rounded_milliseconds(elapsed_seconds)} ms)"


def _echo(message: str) -> None:
    click.echo(message)


class DebugOutput:
    """Output sink shared by the runner and the CLI.

    Regular messages are always written. Debug messages and bench timings are
    written only when ``debug`` is set, prefixed with ``[DEBUG]``.
    """

    def __init__(
        self,
        *,
        debug: bool = False,
        sink: OutputSink | None = None,
        clock: Clock = time.perf_counter,
    ) -> None:
        self._debug = debug
        self._sink = sink or _echo
        self._clock = clock

    def puts(self, message: str) -> None:
        self._sink(message)

    def debug_puts(self, message: str) -> None:
        if self._debug:
            self._sink(debug_message(message))

    @contextmanager
    def bench(self, label: str) -> Iterator[None]:
        """Time the enclosed block and report it as one debug line once it completes."""
        if not self._debug:
            yield
            return
        started = self._clock()
        yield
        self._sink(bench_message(label, self._clock() - started))
