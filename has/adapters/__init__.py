"""Adapters — how probes reach the system.

Public re-exports for convenient access.
"""

from has.adapters.base import ProbeAdapter
from has.adapters.mock import MockProbeAdapter
from has.adapters.shell.command import ShellProbeAdapter

__all__ = [
    "MockProbeAdapter",
    "ProbeAdapter",
    "ShellProbeAdapter",
]
