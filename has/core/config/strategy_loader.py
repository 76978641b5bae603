"""
Strategy loader — loads the probe strategy table from YAML.

The table lives in ``has/core/data/strategies.yml``. Each entry names
the commands it covers and the strategy they share; this module
flattens it into a mapping keyed by canonical command.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from has.core.config.loader import ConfigError
from has.core.models.probe import ProbeStrategy

logger = logging.getLogger(__name__)


class StrategyTableError(ConfigError):
    """Raised when the strategy table file is missing or malformed."""


class StrategyEntry(ProbeStrategy):
    """One table entry: a strategy plus the commands that share it."""

    model_config = ConfigDict(extra="forbid")

    commands: list[str] = Field(default_factory=list)

    def strategy(self) -> ProbeStrategy:
        """The strategy without the ``commands`` list."""
        return ProbeStrategy.model_validate(self.model_dump(exclude={"commands"}))


class StrategyFile(BaseModel):
    strategies: list[StrategyEntry] = Field(default_factory=list)


def parse_strategies(data: object, source: str = "<data>") -> dict[str, ProbeStrategy]:
    """Validate raw YAML data and flatten it by command name.

    Raises:
        StrategyTableError: On schema errors or a command listed twice.
    """
    if not isinstance(data, dict):
        raise StrategyTableError(
            f"Expected a YAML mapping in {source}, got {type(data).__name__}"
        )

    try:
        parsed = StrategyFile.model_validate(data)
    except ValidationError as e:
        raise StrategyTableError(f"Invalid strategy table in {source}: {e}") from e

    table: dict[str, ProbeStrategy] = {}
    for entry in parsed.strategies:
        strategy = entry.strategy()
        for command in entry.commands:
            if command in table:
                raise StrategyTableError(
                    f"Command '{command}' is listed more than once in {source}"
                )
            table[command] = strategy

    return table


def load_strategies(path: Path) -> dict[str, ProbeStrategy]:
    """Load and flatten a strategy table file.

    Raises:
        StrategyTableError: If the file cannot be read or is invalid.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise StrategyTableError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise StrategyTableError(f"Invalid YAML in {path}: {e}") from e

    table = parse_strategies(data, source=str(path))
    logger.debug("Loaded %d probe strategies from %s", len(table), path)
    return table
