"""Vanilla terminal frontend: no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import math
import sys

from backend.engine.gallerysolver import Algorithm
from backend.engine.workbench import Workbench
from backend.models.gallery import Gallery, Side
from backend.models.solution import Plan, Solution
from frontend.cli.commands import Level, Status, handle_key
from frontend.cli.input_handler import get_key


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset
_BG_CLOSED = "\033[41;97m"  # red bg, white fg (closed room)

_LEVEL_STYLE = {
    Level.INFO: _C,
    Level.OK: _G,
    Level.WARN: _Y,
    Level.ERROR: _RED,
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- gallery rendering --------------------------------------------------------


def render_gallery(gallery: Gallery, plan: Plan | None = None) -> str:
    """Return an ANSI-coloured text grid; closed rooms on a red background."""
    width = max(len(str(v)) for v in (*gallery.top, *gallery.bottom))
    cell_w = width + 2
    sep = "+" + (("-" * cell_w + "+") * gallery.columns)

    lines: list[str] = [sep]
    for side in (Side.TOP, Side.BOTTOM):
        cells: list[str] = []
        for c in range(gallery.columns):
            val = gallery.value(side, c)
            if plan is None:
                cells.append(f" {val:>{width}} ")
            elif plan.is_closed(side, c):
                cells.append(f"{_BG_CLOSED} {val:>{width}} {_R}")
            else:
                cells.append(f"{_G} {val:>{width}} {_R}")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _solution_lines(solution: Solution) -> list[str]:
    label = Algorithm(solution.algorithm).label
    cost = (
        f"{_G}{int(solution.cost)}{_R}"
        if solution.feasible
        else f"{_RED}no feasible plan{_R}"
    )
    return [
        f"  Completed with {_C}{label}{_R} in {_Y}{solution.duration_ms:.2f} ms{_R}",
        f"  Cost: {cost}",
    ]


# -- workbench screen ---------------------------------------------------------


def _draw_workbench(bench: Workbench, status: Status | None) -> None:
    _clear()
    print(f"  {_BOLD}=== N A R R O W   A R T   G A L L E R Y ==={_R}")
    print()

    plan = None
    if bench.solution is not None:
        plan = bench.solution.plan
    elif bench.comparison is not None:
        plan = bench.comparison.dynamic.plan
    print(render_gallery(bench.gallery, plan))
    print()
    print(
        f"  Columns: {_Y}{bench.gallery.columns}{_R}  |  "
        f"Close: {_Y}{bench.rooms_to_close}{_R}  |  "
        f"Goal: {_Y}{bench.direction.value}{_R}  |  "
        f"Algorithm: {_Y}{bench.algorithm.label}{_R}"
    )

    if bench.solution is not None:
        print()
        print("\n".join(_solution_lines(bench.solution)))
    if bench.comparison is not None:
        print()
        for solution in (bench.comparison.dynamic, bench.comparison.backtracking):
            cost = "infeasible" if math.isinf(solution.cost) else int(solution.cost)
            print(
                f"  {Algorithm(solution.algorithm).label:<38} "
                f"cost {_Y}{cost}{_R}  {_DIM}{solution.duration_ms:.2f} ms{_R}"
            )

    if status is not None:
        print()
        print(f"  {_LEVEL_STYLE[status.level]}{status.text}{_R}")
    print()
    print(
        f"  {_DIM}←→ columns  ↑↓ rooms  K set rooms  E edit  "
        f"R randomize  M max/min  A algorithm  V solve  C compare  Q quit{_R}"
    )
    sys.stdout.flush()


def _workbench_loop(bench: Workbench) -> None:
    status: Status | None = None
    while True:
        _draw_workbench(bench, status)
        key = get_key()
        if key == "quit":
            _clear()
            print("\n  Goodbye!\n")
            return
        if key in ("solve", "enter", "compare"):
            print(f"\n  {_C}Solving…{_R}")
            sys.stdout.flush()
        status = handle_key(bench, key, input)


# -- public entry point -------------------------------------------------------


def run(bench: Workbench) -> None:
    """Launch the vanilla CLI workbench."""
    _workbench_loop(bench)
