"""Rich terminal frontend: gallery tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and key actions as the vanilla CLI.  Also provides the
one-shot renderers ``main.py`` uses when a gallery is given on the
command line.
"""

from __future__ import annotations

import math

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.dispatcher import Comparison
from backend.engine.gallerysolver import Algorithm
from backend.engine.workbench import Workbench
from backend.models.gallery import Gallery, Side
from backend.models.solution import Plan, Solution
from frontend.cli.commands import Level, Status, handle_key
from frontend.cli.input_handler import get_key

console = Console()

_LEVEL_STYLE = {
    Level.INFO: "cyan",
    Level.OK: "bold green",
    Level.WARN: "yellow",
    Level.ERROR: "bold red",
}


# -- helpers ------------------------------------------------------------------


def _format_cost(cost: float) -> str:
    if math.isinf(cost):
        return "infeasible"
    return str(int(cost))


def _format_duration(duration_ms: float) -> str:
    return f"{duration_ms:.2f} ms"


# -- gallery rendering --------------------------------------------------------


def render_gallery(gallery: Gallery, plan: Plan | None = None) -> Table:
    """Return a Rich Table of the gallery; closed rooms are highlighted."""
    width = max(len(str(v)) for v in (*gallery.top, *gallery.bottom))
    table = Table(
        show_header=True,
        header_style="dim",
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    table.add_column("", style="dim", justify="right")
    for c in range(gallery.columns):
        table.add_column(str(c), min_width=width + 1, justify="center")

    for side in (Side.TOP, Side.BOTTOM):
        cells: list[str] = []
        for c in range(gallery.columns):
            val = gallery.value(side, c)
            if plan is None:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
            elif plan.is_closed(side, c):
                cells.append(f"[bold white on red]{val:>{width}}[/bold white on red]")
            else:
                cells.append(f"[green]{val:>{width}}[/green]")
        table.add_row(side.name.lower(), *cells)

    return table


def solution_text(solution: Solution) -> Text:
    """Which algorithm ran, how long it took, and the cost."""
    label = Algorithm(solution.algorithm).label if solution.algorithm else "solver"
    text = Text()
    text.append("  Completed with ", style="dim")
    text.append(label, style="bold cyan")
    text.append(" in ", style="dim")
    text.append(_format_duration(solution.duration_ms), style="bold yellow")
    text.append("\n  Cost: ", style="dim")
    if solution.feasible:
        text.append(_format_cost(solution.cost), style="bold green")
    else:
        text.append("no feasible plan", style="bold red")
    return text


def comparison_table(comparison: Comparison) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        title="Comparison",
        title_style="bold cyan",
    )
    table.add_column("Algorithm", style="cyan")
    table.add_column("Cost", justify="right", style="yellow")
    table.add_column("Duration", justify="right", style="yellow")
    for solution in (comparison.dynamic, comparison.backtracking):
        table.add_row(
            Algorithm(solution.algorithm).label,
            _format_cost(solution.cost),
            _format_duration(solution.duration_ms),
        )
    return table


# -- one-shot output ----------------------------------------------------------


def print_solution(gallery: Gallery, solution: Solution) -> None:
    panel = Panel(
        Group(
            Align.center(render_gallery(gallery, solution.plan)),
            Text(""),
            solution_text(solution),
        ),
        title="[bold]Solution[/bold]",
        border_style="bright_blue" if solution.feasible else "red",
        padding=(1, 2),
    )
    console.print(panel)


def print_comparison(gallery: Gallery, comparison: Comparison) -> None:
    verdict = (
        Text("  Both algorithms agree.", style="bold green")
        if comparison.agree
        else Text("  The algorithms DISAGREE.", style="bold red")
    )
    panel = Panel(
        Group(
            Align.center(render_gallery(gallery, comparison.dynamic.plan)),
            Text(""),
            Align.center(comparison_table(comparison)),
            verdict,
        ),
        title="[bold]Comparison[/bold]",
        border_style="bright_blue" if comparison.agree else "red",
        padding=(1, 2),
    )
    console.print(panel)


# -- workbench screen ---------------------------------------------------------


def _draw_workbench(bench: Workbench, status: Status | None) -> None:
    console.clear()

    plan = None
    if bench.solution is not None:
        plan = bench.solution.plan
    elif bench.comparison is not None:
        plan = bench.comparison.dynamic.plan

    settings = Text()
    settings.append("  Columns: ", style="dim")
    settings.append(str(bench.gallery.columns), style="bold yellow")
    settings.append("    Close: ", style="dim")
    settings.append(str(bench.rooms_to_close), style="bold yellow")
    settings.append("    Goal: ", style="dim")
    settings.append(bench.direction.value, style="bold yellow")
    settings.append("    Algorithm: ", style="dim")
    settings.append(bench.algorithm.label, style="bold yellow")

    parts: list = [Align.center(render_gallery(bench.gallery, plan)), Text("")]
    parts.append(Align.center(settings))
    if bench.solution is not None:
        parts.append(solution_text(bench.solution))
    if bench.comparison is not None:
        parts.append(Align.center(comparison_table(bench.comparison)))

    panel = Panel(
        Group(*parts),
        title="[bold]N A R R O W   A R T   G A L L E R Y[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    controls = Text()
    for key, label in (
        ("←→", "columns"),
        ("↑↓", "rooms"),
        ("K", "set rooms"),
        ("E", "edit"),
        ("R", "randomize"),
        ("M", "max/min"),
        ("A", "algorithm"),
        ("V", "solve"),
        ("C", "compare"),
        ("Q", "quit"),
    ):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f" {label} ", style="dim")

    console.print()
    console.print(Align.center(panel))
    if status is not None:
        console.print(
            Align.center(Text(f"  {status.text}", style=_LEVEL_STYLE[status.level]))
        )
    console.print(Align.center(controls))


def _workbench_loop(bench: Workbench) -> None:
    status: Status | None = None
    while True:
        _draw_workbench(bench, status)
        key = get_key()
        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        if key in ("solve", "enter", "compare"):
            with console.status("[cyan]Solving…[/cyan]"):
                status = handle_key(bench, key, console.input)
        else:
            status = handle_key(bench, key, console.input)


# -- public entry point -------------------------------------------------------


def run(bench: Workbench) -> None:
    """Launch the Rich workbench."""
    _workbench_loop(bench)
