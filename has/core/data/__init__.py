"""
Bundled data files for the detection engine.

Usage::

    from has.core.data import STRATEGIES_FILE
"""

from __future__ import annotations

from pathlib import Path

DATA_DIR = Path(__file__).parent

# Declarative probe strategy table.
STRATEGIES_FILE = DATA_DIR / "strategies.yml"
