"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from jsonck.configuration import ConfigurationError, ValidatorSettings, load_configuration
from jsonck.input_reading import is_stdin_piped
from jsonck.results_writing import OutputMode, ResultReporter
from jsonck.run_execution import ExitCode, RunRequest, execute_validation_run

_EXAMPLES = """
\b
Examples:
  jsonck config.json                        Validate a file (uses $schema inside it)
  jsonck config.json --schema schema.json   Validate with an explicit local schema
  jsonck config.json --schema https://...   Validate with a remote schema
  jsonck *.json                             Validate multiple files at once
  cat config.json | jsonck                  Validate from piped stdin
  jsonck -                                  Read stdin explicitly
  jsonck config.json --json                 Machine-readable JSON output
"""


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=_EXAMPLES,
)
@click.version_option(package_name="jsonck")
@click.argument("files", nargs=-1, metavar="[FILES]...")
@click.option(
    "-s",
    "--schema",
    "schema",
    required=False,
    metavar="PATH-OR-URL",
    help="Schema file path or URL (overrides $schema in files)",
)
@click.option("--json", "json_output", is_flag=True, default=False, help="Emit a JSON envelope.")
@click.option(
    "--plain", is_flag=True, default=False, help="Emit tab-separated records, one per line."
)
@click.option(
    "--quiet", is_flag=True, default=False, help="Suppress all output; only the exit code."
)
@click.option(
    "--timeout",
    "timeout_ms",
    required=False,
    type=click.IntRange(min=1),
    metavar="MS",
    help="Timeout for schema downloads in milliseconds  [default: 30000]",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML settings file",
)
@click.option("--debug", is_flag=True, default=False, help="Log debug details to stderr.")
@click.pass_context
def cli(  # pylint: disable=too-many-arguments
    ctx: click.Context,
    files: tuple[str, ...],
    schema: str | None,
    json_output: bool,
    plain: bool,
    quiet: bool,
    timeout_ms: int | None,
    config_path: str | None,
    debug: bool,
) -> None:
    """Validate JSON files against JSON schemas.

    Exit status is 0 when every file is valid, 1 when any file is invalid,
    and 2 when any file could not be checked.
    """
    try:
        settings = load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        mode = _select_output_mode(json_output, plain, quiet, OutputMode.TEXT)
        ResultReporter(mode).fatal(str(exc))
        ctx.exit(int(ExitCode.RUNTIME_ERROR))

    mode = _select_output_mode(json_output, plain, quiet, settings.output)
    if debug and mode is not OutputMode.QUIET:
        _configure_debug_logging()

    if not files and not is_stdin_piped():
        if mode is not OutputMode.QUIET:
            click.echo(ctx.get_help())
        ctx.exit(int(ExitCode.ALL_VALID))

    outcome = execute_validation_run(_build_request(files, schema, timeout_ms, mode, settings))
    ctx.exit(int(outcome.exit_code))


def _select_output_mode(
    json_output: bool, plain: bool, quiet: bool, default: OutputMode
) -> OutputMode:
    if quiet:
        return OutputMode.QUIET
    if json_output:
        return OutputMode.JSON
    if plain:
        return OutputMode.PLAIN
    return default


def _build_request(
    files: tuple[str, ...],
    schema: str | None,
    timeout_ms: int | None,
    mode: OutputMode,
    settings: ValidatorSettings,
) -> RunRequest:
    return RunRequest(
        files=tuple(files),
        schema=schema or settings.schema,
        output=mode,
        timeout_ms=timeout_ms if timeout_ms is not None else settings.timeout_ms,
        cache_max_entries=settings.cache_max_entries,
    )


def _configure_debug_logging() -> None:
    logger = logging.getLogger("jsonck")
    logger.setLevel(logging.DEBUG)
    if any(isinstance(existing, logging.StreamHandler) for existing in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s %(levelname)s %(message)s"))
    logger.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        exit_code = cli.main(args=list(argv), standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return int(exit_code or 0)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
