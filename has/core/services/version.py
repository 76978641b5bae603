"""
Version extraction — pull a dotted version number out of tool output.

Pure logic. The default pattern takes the first ``N.N`` or ``N.N.N``
found scanning top to bottom, provided it stands on its own: numbers
glued to a unit or a word (``12.4s``) or part of a longer dotted run
(``1.2.3.4``) are skipped. Recipes may narrow the pattern or pin the
scan to a single output line.
"""

from __future__ import annotations

import re

DEFAULT_PATTERN = r"(?<![\d.])\d+\.\d+(?:\.\d+)?(?![\w.])"


def extract(text: str, pattern: str | None = None, line: int | None = None) -> str:
    """Return the first version-looking substring of ``text``.

    Args:
        text: Raw probe output (stdout and stderr merged).
        pattern: Regex to search with. Defaults to ``DEFAULT_PATTERN``.
            When it has a capture group, the first group is the version.
        line: Optional 1-based line number; only that line is scanned.

    Returns:
        The matched version with surrounding whitespace removed,
        or ``""`` when nothing matches.
    """
    if not text:
        return ""

    if line is not None:
        lines = text.splitlines()
        if line < 1 or line > len(lines):
            return ""
        text = lines[line - 1]

    match = re.search(pattern or DEFAULT_PATTERN, text, re.IGNORECASE)
    if not match:
        return ""
    found = match.group(1) if match.re.groups else match.group(0)
    return (found or "").strip()
