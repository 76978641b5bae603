"""
Session models — per-name check lines and the running tally.
"""

from __future__ import annotations

from dataclasses import dataclass

from has.core.models.probe import Outcome

# Exit codes above this collide with the shell's own reserved codes.
MAX_EXIT_CODE = 126


@dataclass
class SessionTally:
    """Success / failure counters for one invocation."""

    ok: int = 0
    ko: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome.ok:
            self.ok += 1
        else:
            self.ko += 1

    @property
    def total(self) -> int:
        return self.ok + self.ko

    @property
    def exit_code(self) -> int:
        """Failure count clamped to ``MAX_EXIT_CODE``."""
        return min(self.ko, MAX_EXIT_CODE)

    def to_dict(self) -> dict:
        return {"ok": self.ok, "ko": self.ko, "exit_code": self.exit_code}


@dataclass
class CheckLine:
    """One processed request: what was asked, what ran, what it meant."""

    request: str
    command: str
    outcome: Outcome

    def to_dict(self) -> dict:
        return {
            "request": self.request,
            "command": self.command,
            "outcome": self.outcome.kind.value,
            "ok": self.outcome.ok,
            "version": self.outcome.version or None,
        }
