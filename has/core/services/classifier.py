"""
Outcome classification — turn (status, version) into an ``Outcome``.

    -1        NOT_UNDERSTOOD      failure
    127       NOT_INSTALLED       failure
    0 / 141   FOUND_WITH_VERSION  success (version may be empty)
    other     FOUND_NO_VERSION    success

Pure logic. Statuses from inverted recipes must be remapped with
``ProbeStrategy.interpret_status`` before they get here.
"""

from __future__ import annotations

from has.core.models.probe import (
    STATUS_BROKEN_PIPE,
    STATUS_NOT_INSTALLED,
    STATUS_NOT_UNDERSTOOD,
    Outcome,
    OutcomeKind,
)


def classify(status: int, version: str = "") -> Outcome:
    """Classify one probe."""
    if status == STATUS_NOT_UNDERSTOOD:
        return Outcome(kind=OutcomeKind.NOT_UNDERSTOOD)
    if status == STATUS_NOT_INSTALLED:
        return Outcome(kind=OutcomeKind.NOT_INSTALLED)
    if status in (0, STATUS_BROKEN_PIPE):
        return Outcome(kind=OutcomeKind.FOUND_WITH_VERSION, version=version or "")
    return Outcome(kind=OutcomeKind.FOUND_NO_VERSION)
