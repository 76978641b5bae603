"""
Configuration loader — environment settings and the ``.hasrc`` list file.

Settings come from environment variables only:

    HAS_ALLOW_UNSAFE     probe unknown commands with ``--version``
    HAS_LOG_LEVEL        console log level (default WARNING)
    HAS_LOG_FILE         optional log file path
    HAS_LOG_FILE_LEVEL   optional separate level for the log file

The list file holds one command name per line. Blank lines and
lines starting with ``#`` are ignored.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)

# Default list-file name, looked up in the working directory
RC_FILE = ".hasrc"

_TRUTHY = frozenset({"1", "y", "yes", "true", "on"})


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be read."""


class Settings(BaseModel):
    """Process-wide settings resolved at startup."""

    allow_unsafe: bool = False
    log_level: str = "WARNING"
    log_file: str | None = None
    log_file_level: str | None = None


def _is_truthy(value: str | None) -> bool:
    return bool(value) and value.strip().lower() in _TRUTHY


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build ``Settings`` from environment variables.

    Args:
        environ: Mapping to read from (default: ``os.environ``).
    """
    env = os.environ if environ is None else environ
    return Settings(
        allow_unsafe=_is_truthy(env.get("HAS_ALLOW_UNSAFE")),
        log_level=env.get("HAS_LOG_LEVEL") or "WARNING",
        log_file=env.get("HAS_LOG_FILE") or None,
        log_file_level=env.get("HAS_LOG_FILE_LEVEL") or None,
    )


def find_rc_file(start_dir: Path | None = None) -> Path | None:
    """Return ``.hasrc`` in ``start_dir`` (default: cwd) if it exists.

    Unlike project files, the list file is not searched for upward.
    """
    candidate = (start_dir or Path.cwd()) / RC_FILE
    if candidate.exists():
        return candidate
    return None


def parse_rc_lines(raw: str) -> list[str]:
    """Extract command names from list-file text, in order."""
    names: list[str] = []
    for line in raw.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        names.append(stripped)
    return names


def read_rc_names(path: Path | None) -> list[str]:
    """Read command names from a list file.

    A missing file contributes nothing.

    Raises:
        ConfigError: If the file exists but cannot be read.
    """
    if path is None or not path.exists():
        return []

    logger.debug("Reading command list from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    names = parse_rc_lines(raw)
    logger.info("Loaded %d command names from %s", len(names), path)
    return names
