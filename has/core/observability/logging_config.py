"""
Logging configuration — set up once by the CLI entrypoint.

Logs always go to stderr: stdout belongs to check results, which
scripts parse. ``-v`` shows one line per probe decision, ``--debug``
adds the argv, exit status and timing of every spawned process.

Console level precedence:
    --debug / --verbose  >  HAS_LOG_LEVEL  >  WARNING

``HAS_LOG_FILE`` adds a file handler (level ``HAS_LOG_FILE_LEVEL``,
else the console level), handy for CI runs where stderr is noisy.
"""

from __future__ import annotations

import logging
import sys

# Full detail: used for --debug on the console and always for the file.
_DETAILED = logging.Formatter(
    "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _console_formatter(level: int) -> logging.Formatter:
    if level <= logging.DEBUG:
        return _DETAILED
    if level <= logging.INFO:
        return logging.Formatter("%(asctime)s [%(name)s] %(message)s", datefmt="%H:%M:%S")
    return logging.Formatter("has: %(message)s")


def resolve_level(verbose: bool = False, debug: bool = False, default: str = "WARNING") -> str:
    """Pick the console level name from CLI flags, else ``default``."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return default


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with has's console (and file) handlers."""
    console_level = parse_level(level)
    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_console_formatter(console_level))
    handlers.append(console)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(parse_level(log_file_level) if log_file_level else console_level)
        fh.setFormatter(_DETAILED)
        handlers.append(fh)

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(min(h.level for h in handlers))
    logging.raiseExceptions = False


def parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant, WARNING if unknown."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
