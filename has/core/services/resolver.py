"""
Name resolution — map what the user typed to the executable to probe.
"""

from __future__ import annotations

import fnmatch

# Canonical name for "some GNU coreutils are present".
GNU_COREUTILS = "gnu_coreutils"

ALIASES: dict[str, str] = {
    "golang":   "go",
    "jre":      "java",
    "jdk":      "javac",
    "nodejs":   "node",
    "goreplay": "gor",
    "httpie":   "http",
    "homebrew": "brew",
    "awsebcli": "eb",
    "awscli":   "aws",
}


def _is_coreutils(name: str) -> bool:
    if fnmatch.fnmatchcase(name, "*coreutils"):
        return True
    return name.startswith("linux") and "utils" in name


def resolve(name: str) -> str:
    """Return the canonical command for ``name``.

    Alias table first, then the coreutils pattern, else ``name`` itself.
    Never fails, and resolving a canonical name returns it unchanged.
    """
    alias = ALIASES.get(name)
    if alias is not None:
        return alias
    if _is_coreutils(name):
        return GNU_COREUTILS
    return name
