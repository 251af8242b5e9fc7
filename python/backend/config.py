"""Defaults shared by the command line and the terminal frontends.

Every value here can be overridden per run through the matching
``main.py`` option or its ``NARROW_GALLERY_*`` environment variable.
"""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent  # python/
PROJECT_ROOT = ROOT.parent
FIXTURES_DIR = PROJECT_ROOT / "fixtures"

ENV_PREFIX = "NARROW_GALLERY_"

# Gallery shape
DEFAULT_COLUMNS = 6
MIN_COLUMNS = 1
MAX_COLUMNS = 40

# Random room values, inclusive
ROOM_VALUE_MIN = 0
ROOM_VALUE_MAX = 9

DEFAULT_ROOMS_TO_CLOSE = 2

# Dispatch
DEFAULT_TIMEOUT: float | None = 30.0

# Above this many columns backtracking is impractically slow; frontends warn.
BACKTRACKING_COLUMN_LIMIT = 14
