"""Debug output tests."""

from __future__ import annotations

from suite_runner.diagnostics import DebugOutput, bench_message, debug_message, rounded_milliseconds


def _fake_clock(*readings: float):
    values = iter(readings)
    return lambda: next(values)


def test_debug_messages_are_only_written_in_debug_mode() -> None:
    quiet_lines: list[str] = []
    debug_lines: list[str] = []

    DebugOutput(debug=False, sink=quiet_lines.append).debug_puts("hidden")
    DebugOutput(debug=True, sink=debug_lines.append).debug_puts("shown")

    assert quiet_lines == []
    assert debug_lines == ["[DEBUG] shown"]


def test_regular_messages_are_always_written() -> None:
    lines: list[str] = []

    DebugOutput(debug=False, sink=lines.append).puts("a_test.rb")

    assert lines == ["a_test.rb"]


def test_bench_reports_elapsed_milliseconds_in_debug_mode() -> None:
    lines: list[str] = []
    output = DebugOutput(debug=True, sink=lines.append, clock=_fake_clock(2.0, 2.5))

    with output.bench("Lookup test files"):
        pass

    assert lines == [bench_message("Lookup test files", 0.5)]
    assert lines[0].startswith("[DEBUG] Lookup test files...")
    assert lines[0].endswith("(500.0 ms)")


def test_bench_is_silent_outside_debug_mode() -> None:
    lines: list[str] = []
    ran = []
    output = DebugOutput(debug=False, sink=lines.append)

    with output.bench("Lookup test files"):
        ran.append(True)

    assert ran == [True]
    assert lines == []


def test_bench_label_is_padded_to_a_fixed_width() -> None:
    message = bench_message("ARGV parse and configure", 0.0)

    assert message == f"{debug_message('ARGV parse and configure...'.ljust(30))} (0.0 ms)"


def test_rounded_milliseconds_truncates_to_three_decimals() -> None:
    assert rounded_milliseconds(0.0012345678) == 1.234
    assert rounded_milliseconds(2) == 2000.0
