"""
Adapter base — the contract between the session runner and the system.

The runner never spawns processes itself. It hands a command and its
strategy to a ``ProbeAdapter`` and gets a ``ProbeResult`` back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from has.core.models.probe import ProbeResult, ProbeStrategy


class ProbeAdapter(ABC):
    """Abstract base class for probe executors.

    Adapters NEVER raise. A missing binary, a spawn error or a nonzero
    exit are all valid outcomes, captured in the ``ProbeResult`` status.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def is_available(self, command: str) -> bool:
        """Cheap check that ``command`` can be found. Never raises."""

    @abstractmethod
    def execute(self, command: str, strategy: ProbeStrategy) -> ProbeResult:
        """Run one probe and return its merged output and exit status."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
