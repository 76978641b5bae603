"""
Strategy table — which probe to run for a canonical command.

Read-only after construction. Built once from the bundled YAML table;
tests may build one from a plain mapping.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from has.core.config.strategy_loader import load_strategies
from has.core.data import STRATEGIES_FILE
from has.core.models.probe import ProbeStrategy

logger = logging.getLogger(__name__)

# Used for unknown commands when unsafe mode is on.
DEFAULT_STRATEGY = ProbeStrategy(args=["--version"])


class StrategyTable:
    """Static mapping from canonical command to ``ProbeStrategy``."""

    def __init__(self, strategies: Mapping[str, ProbeStrategy], allow_unsafe: bool = False):
        self._strategies = dict(strategies)
        self.allow_unsafe = allow_unsafe

    @classmethod
    def from_file(cls, path: Path | None = None, allow_unsafe: bool = False) -> StrategyTable:
        """Build a table from a YAML file (default: the bundled one)."""
        return cls(load_strategies(path or STRATEGIES_FILE), allow_unsafe=allow_unsafe)

    def with_unsafe(self, allow_unsafe: bool = True) -> StrategyTable:
        """Same strategies, with unsafe mode set to ``allow_unsafe``."""
        return StrategyTable(self._strategies, allow_unsafe=allow_unsafe)

    def __contains__(self, command: str) -> bool:
        return command in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)

    @property
    def commands(self) -> list[str]:
        """All listed canonical commands, sorted."""
        return sorted(self._strategies)

    def lookup(self, command: str) -> ProbeStrategy | None:
        """Return the strategy for ``command``.

        Unlisted commands get ``DEFAULT_STRATEGY`` in unsafe mode,
        otherwise ``None``.
        """
        strategy = self._strategies.get(command)
        if strategy is not None:
            return strategy
        if self.allow_unsafe:
            logger.debug("No strategy for %s, falling back to --version", command)
            return DEFAULT_STRATEGY
        return None
