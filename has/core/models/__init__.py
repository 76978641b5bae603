"""
Domain models — probe strategies, results, outcomes and session tally.

    from has.core.models import ProbeStrategy, ProbeResult, Outcome, SessionTally
"""

from has.core.models.probe import (
    STATUS_BROKEN_PIPE,
    STATUS_NOT_INSTALLED,
    STATUS_NOT_UNDERSTOOD,
    Outcome,
    OutcomeKind,
    ProbeResult,
    ProbeStrategy,
)
from has.core.models.session import MAX_EXIT_CODE, CheckLine, SessionTally

__all__ = [
    "MAX_EXIT_CODE",
    "STATUS_BROKEN_PIPE",
    "STATUS_NOT_INSTALLED",
    "STATUS_NOT_UNDERSTOOD",
    # session.py
    "CheckLine",
    # probe.py
    "Outcome",
    "OutcomeKind",
    "ProbeResult",
    "ProbeStrategy",
    "SessionTally",
]
