"""Key actions shared by the vanilla and Rich workbench screens.

Each frontend renders :class:`Status` in its own style; the logic of
what a key does to the :class:`Workbench` lives here once.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from backend import config
from backend.engine.gallerysolver import Algorithm
from backend.engine.galleryinput import parse_gallery, parse_row
from backend.engine.workbench import Workbench
from backend.models.errors import InvalidRequest, SolveTimeout


class Level(StrEnum):
    INFO = "info"
    OK = "ok"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class Status:
    level: Level
    text: str


def _edit(bench: Workbench, ask: Callable[[str], str]) -> Status:
    top = ask("  Top row (blank keeps current): ").strip()
    bottom = ask("  Bottom row (blank keeps current): ").strip()
    if not top and not bottom:
        return Status(Level.INFO, "Gallery unchanged.")
    current = bench.gallery.rows
    gallery = parse_gallery(
        top or " ".join(map(str, current[0])),
        bottom or " ".join(map(str, current[1])),
    )
    bench.set_gallery(gallery)
    return Status(Level.OK, f"Gallery set to {gallery.columns} columns.")


def _set_rooms(bench: Workbench, ask: Callable[[str], str]) -> Status:
    raw = ask(f"  Rooms to close (1-{bench.gallery.columns}): ").strip()
    values = parse_row(raw) if raw else []
    if len(values) != 1:
        return Status(Level.WARN, "Enter a single number.")
    bench.set_rooms(values[0])
    return Status(Level.INFO, f"Closing {bench.rooms_to_close} rooms.")


def handle_key(
    bench: Workbench, key: str, ask: Callable[[str], str] = input
) -> Status | None:
    """Apply *key* to *bench*.  Returns a message to show, if any."""
    try:
        if key == "right":
            if not bench.resize(bench.gallery.columns + 1):
                return Status(Level.WARN, f"At most {config.MAX_COLUMNS} columns.")
        elif key == "left":
            if not bench.resize(bench.gallery.columns - 1):
                return Status(Level.WARN, f"At least {config.MIN_COLUMNS} column.")
        elif key in ("up", "+"):
            bench.adjust_rooms(1)
        elif key in ("down", "-"):
            bench.adjust_rooms(-1)
        elif key == "randomize":
            bench.randomize()
            return Status(Level.INFO, "Randomized!")
        elif key == "direction":
            bench.toggle_direction()
        elif key == "algorithm":
            bench.toggle_algorithm()
        elif key == "edit":
            return _edit(bench, ask)
        elif key == "rooms":
            return _set_rooms(bench, ask)
        elif key in ("solve", "enter"):
            warn_slow = bench.algorithm is Algorithm.backtracking and bench.backtracking_is_slow
            solution = bench.solve()
            if not solution.feasible:
                return Status(Level.WARN, "No feasible plan exists.")
            if warn_slow:
                return Status(
                    Level.WARN,
                    f"Backtracking above {config.BACKTRACKING_COLUMN_LIMIT} columns is slow.",
                )
        elif key == "compare":
            comparison = bench.compare()
            if not comparison.agree:
                return Status(Level.ERROR, "The two algorithms disagree!")
            return Status(Level.OK, "Both algorithms agree.")
    except (InvalidRequest, SolveTimeout) as exc:
        return Status(Level.ERROR, str(exc))
    return None
