"""
Check use case — probe every requested command, in order.

Ties together name resolution, the strategy table, the probe adapter,
version extraction and classification, and keeps the session tally.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from has.adapters.base import ProbeAdapter
from has.core.config.loader import ConfigError, Settings, read_rc_names
from has.core.models.probe import ProbeResult
from has.core.models.session import CheckLine, SessionTally
from has.core.services.classifier import classify
from has.core.services.resolver import resolve
from has.core.services.strategy_table import StrategyTable
from has.core.services.version import extract

logger = logging.getLogger(__name__)

# Outside the 0..126 tally range so scripts can tell them apart.
STARTUP_ERROR_EXIT_CODE = 127


@dataclass
class CheckResult:
    """Result of the check use case."""

    lines: list[CheckLine] = field(default_factory=list)
    tally: SessionTally = field(default_factory=SessionTally)
    usage: bool = False   # nothing was requested
    error: str | None = None

    @property
    def exit_code(self) -> int:
        if self.error:
            return STARTUP_ERROR_EXIT_CODE
        return self.tally.exit_code

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["results"] = [line.to_dict() for line in self.lines]
        result["summary"] = self.tally.to_dict()
        return result


def collect_names(cli_names: Iterable[str], rc_path: Path | None) -> list[str]:
    """CLI names first, then list-file names.

    Raises:
        ConfigError: If the list file exists but cannot be read.
    """
    names = [n for n in cli_names if n]
    names.extend(read_rc_names(rc_path))
    return names


def check_one(name: str, table: StrategyTable, adapter: ProbeAdapter) -> CheckLine:
    """Resolve, probe and classify a single requested name."""
    command = resolve(name)
    strategy = table.lookup(command)

    if strategy is None:
        logger.info("No strategy for %s", command)
        probe = ProbeResult.not_understood(command)
        return CheckLine(request=name, command=command, outcome=classify(probe.status))

    if logger.isEnabledFor(logging.DEBUG) and not adapter.is_available(
        strategy.executable or command
    ):
        logger.debug("%s not found on PATH", strategy.executable or command)

    probe = adapter.execute(command, strategy)
    status = strategy.interpret_status(probe.status)
    version = extract(probe.output, pattern=strategy.pattern, line=strategy.line)
    outcome = classify(status, version)

    logger.info(
        "%s: status=%d version=%r → %s", command, probe.status, version, outcome.kind.value
    )
    return CheckLine(request=name, command=command, outcome=outcome)


def run_check(
    names: Iterable[str] = (),
    rc_path: Path | None = None,
    settings: Settings | None = None,
    adapter: ProbeAdapter | None = None,
    table: StrategyTable | None = None,
    on_line: Callable[[CheckLine], None] | None = None,
) -> CheckResult:
    """Check every requested command, one probe at a time.

    Args:
        names: Names from the command line.
        rc_path: Optional list file, read after ``names``.
        settings: Process settings (unsafe mode).
        adapter: Probe executor (default: ``ShellProbeAdapter``).
        table: Strategy table (default: the bundled one). Unsafe mode is
            on when either the table or ``settings`` enables it.
        on_line: Called after each name is classified, in order.

    Returns:
        CheckResult with one line per name and the final tally.
    """
    result = CheckResult()
    settings = settings or Settings()

    try:
        requested = collect_names(names, rc_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    if not requested:
        result.usage = True
        return result

    if table is None:
        try:
            table = StrategyTable.from_file(allow_unsafe=settings.allow_unsafe)
        except ConfigError as e:
            result.error = str(e)
            return result
    elif settings.allow_unsafe and not table.allow_unsafe:
        table = table.with_unsafe()

    if adapter is None:
        from has.adapters.shell.command import ShellProbeAdapter

        adapter = ShellProbeAdapter()

    for name in requested:
        line = check_one(name, table, adapter)
        result.lines.append(line)
        result.tally.record(line.outcome)
        if on_line is not None:
            on_line(line)

    logger.info(
        "Checked %d commands: %d ok, %d failed",
        result.tally.total, result.tally.ok, result.tally.ko,
    )
    return result
