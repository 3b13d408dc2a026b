"""Command-line interface: ``am-i-vibing``."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, NoReturn

import typer

from am_i_vibing import __version__, detector
from am_i_vibing.config import VibingConfig, parse_log_level
from am_i_vibing.errors import InputError
from am_i_vibing.exit_codes import ExitCode
from am_i_vibing.models import Category
from am_i_vibing.output import (
    ANCESTRY_ERROR_ENTRY,
    OutputFormat,
    format_debug,
    format_json,
    format_quiet,
    format_text,
    parse_output_format,
)

logger = logging.getLogger(__name__)

cli = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Detect agentic coding environments and AI assistant tools.",
    epilog=(
        "Exit codes: 0 agentic environment detected (or --check passed), "
        "1 not detected (or --check failed), 2 invalid input."
    ),
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"am-i-vibing {__version__}")
        raise typer.Exit()


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _report_error(exc: InputError, output_format: OutputFormat | None) -> NoReturn:
    """Print *exc* on stderr (as JSON when JSON output was requested) and exit."""
    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps({"ok": False, "error": exc.to_dict()}, indent=2), err=True)
    else:
        typer.echo(f"Error: {exc.message}", err=True)
    raise typer.Exit(code=exc.exit_code) from exc


def _debug_ancestry() -> tuple[list[Any], list[dict[str, Any]]]:
    """Return (ancestry for detection, ancestry entries for the report)."""
    try:
        ancestry = detector.get_process_ancestry()
    except Exception as exc:
        logger.debug("Process ancestry unavailable: %s", exc)
        return [], [ANCESTRY_ERROR_ENTRY]
    return ancestry, [proc.to_dict() for proc in ancestry]


@cli.command()
def vibing(
    output_format: OutputFormat | None = typer.Option(
        None, "--format", "-f", help="Output format (default: text)."
    ),
    check: Category | None = typer.Option(
        None, "--check", "-c", help="Check for a specific environment type."
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only output the result, no labels."),
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Dump detection, environment and process ancestry as JSON."
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Detect whether this shell is being driven by an AI coding tool."""
    config = VibingConfig()
    quiet = quiet or config.get("quiet") is True

    if output_format is None:
        try:
            output_format = parse_output_format(str(config.get("format", "text")))
        except InputError as exc:
            _report_error(exc, None)

    try:
        log_level = logging.DEBUG if debug else parse_log_level(str(config.get("log_level", "WARNING")))
    except InputError as exc:
        _report_error(exc, output_format)
    _configure_logging(log_level)

    env = detector.environment_snapshot()
    if debug:
        ancestry, ancestry_report = _debug_ancestry()
        result = detector.detect_agentic_environment(env, ancestry)
    else:
        result = detector.detect_agentic_environment(env)

    passed = detector.check_category(result, check) if check is not None else result.matched

    if debug:
        typer.echo(format_debug(result, env, ancestry_report))
    elif output_format is OutputFormat.JSON:
        typer.echo(format_json(result))
    elif quiet:
        typer.echo(format_quiet(result, check, passed))
    else:
        typer.echo(format_text(result, check, passed))

    raise typer.Exit(code=int(ExitCode.DETECTED if passed else ExitCode.NOT_DETECTED))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
