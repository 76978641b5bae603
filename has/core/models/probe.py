"""
Probe models — the detection contract.

A ``ProbeStrategy`` says how to ask a command for its version.
A ``ProbeResult`` is what came back. An ``Outcome`` is what it means.
The adapter produces results, the classifier produces outcomes.
Neither raises.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

# Status used when no strategy exists and unsafe mode is off.
STATUS_NOT_UNDERSTOOD = -1

# Shell convention for "command not found".
STATUS_NOT_INSTALLED = 127

# SIGPIPE from a truncating pipeline stage; counted as success.
STATUS_BROKEN_PIPE = 141


class ProbeStrategy(BaseModel):
    """How to probe one canonical command.

    The plain form only carries ``args`` (``["--version"]``, ``["-v"]``...).
    The remaining fields form the override record for commands whose
    output needs bespoke handling.
    """

    args: list[str] = Field(default_factory=lambda: ["--version"])
    pattern: str | None = None          # narrowed version regex
    line: int | None = None             # 1-based output line to scan
    invert_status: bool = False         # tool exits 1 when healthy
    env: dict[str, str] = Field(default_factory=dict)  # forced for the probe
    executable: str | None = None       # binary to run instead of the name

    def command_line(self, command: str) -> list[str]:
        """Argument vector used to probe ``command``."""
        return [self.executable or command, *self.args]

    def interpret_status(self, status: int) -> int:
        """Map a raw exit status into the normal success convention.

        Only strategies with ``invert_status`` swap 0 and 1; spawn and
        lookup sentinels pass through untouched.
        """
        if not self.invert_status:
            return status
        if status == 1:
            return 0
        if status == 0:
            return 1
        return status


class ProbeResult(BaseModel):
    """Raw outcome of one probe: merged stdout+stderr and exit status."""

    command: str
    output: str = ""
    status: int = 0

    @classmethod
    def not_understood(cls, command: str) -> ProbeResult:
        """Result for a command nobody knows how to probe."""
        return cls(command=command, status=STATUS_NOT_UNDERSTOOD)

    @classmethod
    def not_installed(cls, command: str, output: str = "") -> ProbeResult:
        """Result for a command that could not be spawned."""
        return cls(command=command, output=output, status=STATUS_NOT_INSTALLED)


class OutcomeKind(str, Enum):
    NOT_UNDERSTOOD = "not_understood"
    NOT_INSTALLED = "not_installed"
    FOUND_WITH_VERSION = "found_with_version"
    FOUND_NO_VERSION = "found_no_version"


class Outcome(BaseModel):
    """Classified result of a probe."""

    kind: OutcomeKind
    version: str = ""

    @property
    def ok(self) -> bool:
        """Whether the outcome counts as a success."""
        return self.kind in (OutcomeKind.FOUND_WITH_VERSION, OutcomeKind.FOUND_NO_VERSION)

    @property
    def failed(self) -> bool:
        return not self.ok
