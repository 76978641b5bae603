"""
Mock adapter — test double for probe execution.

Returns canned ``ProbeResult`` values per command without spawning
anything. Unconfigured commands behave as not installed.
"""

from __future__ import annotations

from has.adapters.base import ProbeAdapter
from has.core.models.probe import STATUS_NOT_INSTALLED, ProbeResult, ProbeStrategy


class MockProbeAdapter(ProbeAdapter):
    """Canned-response probe adapter.

    Records every ``(command, strategy)`` pair it receives so tests can
    assert on what would have been spawned.
    """

    def __init__(self, adapter_name: str = "mock"):
        self._name = adapter_name
        self._responses: dict[str, ProbeResult] = {}
        self._call_log: list[tuple[str, ProbeStrategy]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[tuple[str, ProbeStrategy]]:
        """All probes this mock has received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def set_output(self, command: str, output: str, status: int = 0) -> None:
        """Make ``command`` print ``output`` and exit with ``status``."""
        self._responses[command] = ProbeResult(command=command, output=output, status=status)

    def is_available(self, command: str) -> bool:
        return command in self._responses

    def execute(self, command: str, strategy: ProbeStrategy) -> ProbeResult:
        self._call_log.append((command, strategy))

        if command in self._responses:
            return self._responses[command]

        return ProbeResult(
            command=command,
            output=f"{command}: command not found",
            status=STATUS_NOT_INSTALLED,
        )

    def reset(self) -> None:
        """Clear call log and canned responses."""
        self._call_log.clear()
        self._responses.clear()
