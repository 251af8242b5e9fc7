#!/usr/bin/env python3
"""Narrow Art Gallery solver.

Usage::

    python main.py                                   # interactive menu
    python main.py -f rich -n 8 -k 3                 # Rich workbench, 8 random columns
    python main.py --top 1,9,1 --bottom 1,1,9 -k 2   # solve once and print
    python main.py --file gallery.json -k 2 --minimize --compare
"""

import importlib
import json
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend import config  # noqa: E402
from backend.engine.dispatcher import SolveRequest, compare, dispatch  # noqa: E402
from backend.engine.gallerysolver import Algorithm  # noqa: E402
from backend.engine.galleryinput import (  # noqa: E402
    load_gallery,
    parse_gallery,
    validate_rooms_to_close,
)
from backend.engine.optimization import OptimizationDirection  # noqa: E402
from backend.engine.workbench import Workbench  # noqa: E402
from backend.logging_config import setup_logging  # noqa: E402
from backend.models.errors import InvalidRequest, SolveTimeout  # noqa: E402
from backend.models.gallery import Gallery  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


def _env(name: str) -> str:
    return f"{config.ENV_PREFIX}{name}"


# -- helpers ------------------------------------------------------------------


def _read_gallery(
    top: Optional[str], bottom: Optional[str], file: Optional[Path]
) -> Optional[Gallery]:
    if file is not None:
        if top is not None or bottom is not None:
            raise InvalidRequest("Give either --file or --top/--bottom, not both.")
        return load_gallery(file)
    if top is None and bottom is None:
        return None
    if top is None or bottom is None:
        raise InvalidRequest("--top and --bottom must be given together.")
    return parse_gallery(top, bottom)


def _solve_once(
    gallery: Gallery,
    rooms: int,
    direction: OptimizationDirection,
    algorithm: Algorithm,
    timeout: Optional[float],
    both: bool,
    as_json: bool,
) -> None:
    from frontend.cli.rich.app import print_comparison, print_solution

    validate_rooms_to_close(gallery, rooms)

    if both:
        comparison = compare(gallery, rooms, direction, timeout)
        if as_json:
            typer.echo(json.dumps({
                "dynamic": comparison.dynamic.to_dict(),
                "backtracking": comparison.backtracking.to_dict(),
                "agree": comparison.agree,
            }))
        else:
            print_comparison(gallery, comparison)
        if not comparison.agree:
            raise typer.Exit(code=1)
        return

    solution = dispatch(SolveRequest(gallery, rooms, direction, algorithm), timeout)
    if as_json:
        typer.echo(json.dumps(solution.to_dict()))
    else:
        print_solution(gallery, solution)


def _menu_loop(bench: Workbench) -> None:
    while True:
        print()
        print("  ==========================================")
        print("       N A R R O W   A R T   G A L L E R Y ")
        print("  ==========================================")
        print()
        print("  1.  Workbench  (Vanilla Terminal)")
        print("  2.  Workbench  (Rich Terminal)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            mod = importlib.import_module(
                {"1": _RUNNERS[Frontend.vanilla], "2": _RUNNERS[Frontend.rich]}[choice]
            )
            mod.run(bench)

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        envvar=_env("FRONTEND"),
        help="Workbench to launch. Omit for interactive menu.",
    ),
    top: Optional[str] = typer.Option(
        None, "--top",
        help="Top row room values, e.g. '1,9,1'. Solves once and exits.",
    ),
    bottom: Optional[str] = typer.Option(
        None, "--bottom",
        help="Bottom row room values, e.g. '1,1,9'.",
    ),
    file: Optional[Path] = typer.Option(
        None, "--file",
        exists=True, dir_okay=False,
        help="JSON gallery file. Solves once and exits.",
    ),
    columns: int = typer.Option(
        config.DEFAULT_COLUMNS, "-n", "--columns",
        min=config.MIN_COLUMNS, max=config.MAX_COLUMNS,
        envvar=_env("COLUMNS"),
        help="Columns of the random starting gallery.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar=_env("SEED"),
        help="Seed for random room values.",
    ),
    rooms: int = typer.Option(
        config.DEFAULT_ROOMS_TO_CLOSE, "-k", "--rooms",
        min=0,
        envvar=_env("ROOMS"),
        help="Number of rooms to close.",
    ),
    algorithm: Algorithm = typer.Option(
        Algorithm.dynamic, "-a", "--algorithm",
        envvar=_env("ALGORITHM"),
        help="Solver engine.",
    ),
    minimize: bool = typer.Option(
        False, "--minimize/--maximize",
        envvar=_env("MINIMIZE"),
        help="Minimize the closed-room total instead of maximizing it.",
    ),
    both: bool = typer.Option(
        False, "--compare",
        help="Run both algorithms in parallel and compare them.",
    ),
    timeout: Optional[float] = typer.Option(
        config.DEFAULT_TIMEOUT, "--timeout",
        min=0.0,
        envvar=_env("TIMEOUT"),
        help="Seconds a solve may take before its worker is stopped.",
    ),
    as_json: bool = typer.Option(
        False, "--json",
        help="Print the solution as a JSON response message.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        envvar=_env("VERBOSE"),
        help="Log solver timings.",
    ),
) -> None:
    """Narrow Art Gallery solver."""
    setup_logging(verbose)
    direction = OptimizationDirection.from_flag(not minimize)

    try:
        gallery = _read_gallery(top, bottom, file)
        if gallery is not None:
            _solve_once(gallery, rooms, direction, algorithm, timeout, both, as_json)
            return
    except (InvalidRequest, SolveTimeout) as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2 if isinstance(exc, InvalidRequest) else 1)

    bench = Workbench.random(
        columns,
        rooms_to_close=max(1, min(rooms, columns)),
        direction=direction,
        algorithm=algorithm,
        timeout=timeout,
        rng=random.Random(seed),
    )

    if frontend is None:
        _menu_loop(bench)
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(bench)


if __name__ == "__main__":
    app()
