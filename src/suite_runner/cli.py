"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
import traceback

import click

from suite_runner.configuration import (
    DEFAULT_SUITES_FILE_PATH,
    ConfigurationError,
    RunMode,
    load_suites,
    random_seed_value,
)
from suite_runner.diagnostics import DebugOutput
from suite_runner.external_tools import ExternalToolError
from suite_runner.run_execution import SuiteRunner, summarize_exit_status

_PACKAGE_LOGGER = logging.getLogger("suite_runner")
_PACKAGE_LOGGER.addHandler(logging.NullHandler())


class CliError(Exception):
    """Custom CLI error."""


@click.command(
    name="t",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(package_name="suite-runner")
@click.option("-s", "--seed-value", type=int, default=None, help="use a given seed to run tests")
@click.option(
    "-c",
    "--changed-only/--no-changed-only",
    default=False,
    help="only run test files with changes",
)
@click.option(
    "-r",
    "--changed-ref",
    default="",
    help="reference for changes, use with `-c` opt",
)
@click.option(
    "-p",
    "--parallel-workers",
    type=int,
    default=None,
    help="number of parallel workers to use (if applicable)",
)
@click.option(
    "-v", "--verbose/--no-verbose", default=False, help="output verbose runtime test info"
)
@click.option("--dry-run/--no-dry-run", default=False, help="output the test command to stdout")
@click.option(
    "-l", "--list/--no-list", "list_files", default=False, help="list test files on stdout"
)
# show loaded test files, command lines and error tracebacks
@click.option("-d", "--debug/--no-debug", default=False, help="run in debug mode")
@click.option(
    "--config",
    "config_path",
    default=DEFAULT_SUITES_FILE_PATH,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML suites file",
)
@click.argument("test_paths", nargs=-1)
@click.pass_context
def cli(  # pylint: disable=too-many-arguments
    ctx: click.Context,
    *,
    seed_value: int | None,
    changed_only: bool,
    changed_ref: str,
    parallel_workers: int | None,
    verbose: bool,
    dry_run: bool,
    list_files: bool,
    debug: bool,
    config_path: str,
    test_paths: tuple[str, ...],
) -> None:
    """Run the configured test suites against TEST_PATHS (default: each suite test dir)."""
    _configure_logging(debug)
    mode = RunMode(
        verbose=verbose,
        dry_run=dry_run,
        list_files=list_files,
        debug=debug,
        changed_only=changed_only,
        changed_ref=changed_ref,
        seed_value=seed_value if seed_value is not None else random_seed_value(),
        parallel_workers=parallel_workers,
    )
    output = DebugOutput(debug=debug)
    try:
        with output.bench("ARGV parse and configure"):
            suites = load_suites(config_path)
        outcomes = SuiteRunner(mode, output=output).run(suites, test_paths)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    except ExternalToolError as exc:
        if debug:
            click.echo("".join(traceback.format_exception(exc)), err=True)
        raise CliError(f"{type(exc).__name__}: {exc}") from exc
    ctx.exit(summarize_exit_status(outcomes))


class _StderrEchoHandler(logging.Handler):
    """Write log records to whatever click currently treats as stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # pylint: disable=broad-exception-caught
            self.handleError(record)


def _configure_logging(debug: bool) -> None:
    _PACKAGE_LOGGER.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not debug:
        return
    if not any(isinstance(handler, _StderrEchoHandler) for handler in _PACKAGE_LOGGER.handlers):
        handler = _StderrEchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        _PACKAGE_LOGGER.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=list(argv), prog_name="t", standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
