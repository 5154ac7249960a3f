"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from suite_runner.cli import main


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_non_integer_seed_returns_clean_click_error(capsys) -> None:
    exit_code = main(["--seed-value", "abc"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Invalid value" in captured.err
    assert "Traceback" not in captured.err


def test_missing_suites_file_returns_configuration_error(capsys, tmp_path: Path) -> None:
    exit_code = main(["--config", str(tmp_path / "missing.yml"), "--list"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Suite configuration file not found" in captured.err
    assert "Traceback" not in captured.err


def test_suite_without_default_cmd_returns_configuration_error(
    capsys, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / ".t.yml").write_text("test_dir: spec\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    exit_code = main(["--dry-run"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "default_cmd is required" in captured.err
    assert captured.out == ""


def test_unlaunchable_test_command_shows_traceback_only_in_debug_mode(
    capsys, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "test").mkdir()
    (tmp_path / "test" / "a_test.rb").touch()
    (tmp_path / ".t.yml").write_text(
        "default_cmd: definitely-not-a-real-command-5f3a\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    exit_code = main([])
    quiet = capsys.readouterr()
    debug_exit_code = main(["--debug"])
    debug = capsys.readouterr()

    assert exit_code == 1
    assert "CommandExecutionError: Test command could not be invoked" in quiet.err
    assert "Traceback" not in quiet.err
    assert debug_exit_code == 1
    assert "Traceback" in debug.err
    assert "[DEBUG] 1 Test files:" in debug.out
