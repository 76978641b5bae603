"""
has — CLI entrypoint.

Usage:
    has git curl node
    python -m has.main --help
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from has import __version__
from has.core.config.loader import find_rc_file, load_settings
from has.core.models.probe import OutcomeKind
from has.core.models.session import CheckLine
from has.core.observability.logging_config import resolve_level, setup_logging

PROG_NAME = "has"

PASS_GLYPH = "✔"
FAIL_GLYPH = "✘"


def _use_color(mode: str) -> bool | None:
    """Map ``--color`` to click's ``color`` argument (None = detect TTY)."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    return None


def format_line(line: CheckLine) -> tuple[str, str, str]:
    """Split one result into (glyph, color, text) for display."""
    outcome = line.outcome
    if outcome.kind is OutcomeKind.FOUND_WITH_VERSION and outcome.version:
        return PASS_GLYPH, "green", f"{line.command} {outcome.version}"
    if outcome.ok:
        return PASS_GLYPH, "green", line.command
    if outcome.kind is OutcomeKind.NOT_UNDERSTOOD:
        return FAIL_GLYPH, "yellow", f"{line.command} not understood"
    return FAIL_GLYPH, "red", line.command


def print_usage(color: bool | None) -> None:
    click.secho(f"{PROG_NAME} v{__version__}", bold=True, color=color)
    click.echo(f"Usage: {PROG_NAME} [OPTIONS] <command-names>...")
    click.echo(f"Example: {PROG_NAME} git curl node")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.argument("names", nargs=-1)
@click.option("--quiet", "-q", is_flag=True, help="Print nothing; report through the exit code only.")
@click.option(
    "--color",
    "color_mode",
    type=click.Choice(["auto", "always", "never"]),
    default="auto",
    show_default=True,
    help="Colorize output.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--unsafe", is_flag=True, help="Probe unknown commands with --version (same as HAS_ALLOW_UNSAFE=y).")
@click.option(
    "--rc-file",
    "rc_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read extra command names from this file (default: ./.hasrc).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
def cli(
    names: tuple[str, ...],
    quiet: bool,
    color_mode: str,
    as_json: bool,
    unsafe: bool,
    rc_file: Path | None,
    verbose: bool,
    debug: bool,
) -> None:
    """Check whether commands are installed, and which version.

    Exits 0 when every command is found, otherwise with the number of
    missing commands (at most 126).

    Examples:

        has git curl node

        HAS_ALLOW_UNSAFE=y has some-tool
    """
    from has.core.use_cases.check import run_check

    settings = load_settings()
    if unsafe:
        settings = settings.model_copy(update={"allow_unsafe": True})

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(verbose=verbose, debug=debug, default=settings.log_level),
        log_file=settings.log_file,
        log_file_level=settings.log_file_level,
    )

    color = _use_color(color_mode)
    stream_lines = not (quiet or as_json)

    def _print_line(line: CheckLine) -> None:
        glyph, fg, text = format_line(line)
        click.secho(f"{glyph} ", fg=fg, nl=False, color=color)
        click.echo(text)

    result = run_check(
        names=names,
        rc_path=rc_file or find_rc_file(),
        settings=settings,
        on_line=_print_line if stream_lines else None,
    )

    if result.error:
        if as_json:
            click.echo(json.dumps(result.to_dict(), indent=2))
        else:
            click.secho(f"❌ {result.error}", fg="red", err=True, color=color)
        sys.exit(result.exit_code)

    if result.usage and not as_json:
        print_usage(color)
        sys.exit(0)

    if as_json and not quiet:
        click.echo(json.dumps(result.to_dict(), indent=2))

    sys.exit(result.exit_code)


if __name__ == "__main__":
    cli()
