"""Solver test suite: fixture galleries with hand-checked answers.

Galleries live in ``<project_root>/fixtures/galleries.json``.  Every case
runs through both engines; the returned plan is checked against the
gallery for room count, corridor legality and cost.
"""

from __future__ import annotations

import json
import math
from pathlib import Path

import pytest

from backend.engine.gallerysolver import (
    Algorithm,
    BacktrackingSolver,
    DynamicProgrammingSolver,
    solve,
)
from backend.engine.optimization import OptimizationDirection
from backend.models.errors import ContractViolation
from backend.models.gallery import Gallery, Side
from backend.models.solution import Solution

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

MAX = OptimizationDirection.MAXIMIZE
MIN = OptimizationDirection.MINIMIZE


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(case: dict) -> str:
    return case["id"]


_CASES = _load("galleries.json")
_ENGINES = [BacktrackingSolver, DynamicProgrammingSolver]


# -- helpers ------------------------------------------------------------------


def _plan_cost(gallery: Gallery, solution: Solution) -> int:
    assert solution.plan is not None
    return sum(gallery.value(side, c) for side, c in solution.plan.closed_rooms())


def _assert_valid(gallery: Gallery, rooms: int, solution: Solution) -> None:
    """The plan closes exactly *rooms* rooms legally and is worth its cost."""
    plan = solution.plan
    assert plan is not None, "feasible solution returned no plan"
    assert plan.columns == gallery.columns
    assert plan.closed_count == rooms

    matrix = plan.as_matrix()
    for c in range(gallery.columns):
        assert not (matrix[0][c] and matrix[1][c]), f"column {c} closes both rooms"
    for c in range(gallery.columns - 1):
        assert not (matrix[0][c + 1] and matrix[1][c]), f"blocked at column {c}"
        assert not (matrix[1][c + 1] and matrix[0][c]), f"blocked at column {c}"

    assert _plan_cost(gallery, solution) == solution.cost


# -- fixture cases ------------------------------------------------------------


@pytest.mark.parametrize("engine", _ENGINES, ids=lambda e: e.name)
@pytest.mark.parametrize("case", _CASES, ids=_ids)
def test_fixture_gallery(case: dict, engine) -> None:
    gallery = Gallery.from_rows([case["top"], case["bottom"]])
    direction = OptimizationDirection(case["direction"])
    rooms = case["rooms_to_close"]

    solution = engine.solve(gallery, rooms, direction)

    assert solution.algorithm == engine.name
    assert solution.duration_ms >= 0
    if case["cost"] is None:
        assert solution.cost == direction.sentinel
        assert solution.plan is None
        assert not solution.feasible
        return

    assert solution.cost == case["cost"]
    _assert_valid(gallery, rooms, solution)
    if case["plan"] is not None:
        expected = tuple(Side[name.upper()] for name in case["plan"])
        assert solution.plan.sides == expected


# -- concrete scenarios -------------------------------------------------------


@pytest.mark.parametrize("engine", _ENGINES, ids=lambda e: e.name)
def test_nines_cannot_both_close(engine) -> None:
    # The 9s sit on opposite sides of neighbouring columns.
    gallery = Gallery.from_rows([[1, 9, 1], [1, 1, 9]])
    solution = engine.solve(gallery, 2, MAX)
    assert solution.cost == 10
    _assert_valid(gallery, 2, solution)


@pytest.mark.parametrize("engine", _ENGINES, ids=lambda e: e.name)
def test_minimize_single_room_accepts_any_cheapest(engine) -> None:
    gallery = Gallery.from_rows([[1, 9, 1], [1, 1, 9]])
    solution = engine.solve(gallery, 1, MIN)
    assert solution.cost == 1
    [(side, column)] = solution.plan.closed_rooms()
    assert gallery.value(side, column) == 1


@pytest.mark.parametrize("engine", _ENGINES, ids=lambda e: e.name)
@pytest.mark.parametrize("direction", [MAX, MIN], ids=str)
def test_zero_rooms_is_free(engine, direction) -> None:
    gallery = Gallery.from_rows([[3, -1, 4, 1], [5, 9, -2, 6]])
    solution = engine.solve(gallery, 0, direction)
    assert solution.cost == 0
    assert solution.plan.as_matrix() == [[False] * 4, [False] * 4]


@pytest.mark.parametrize("engine", _ENGINES, ids=lambda e: e.name)
@pytest.mark.parametrize("direction", [MAX, MIN], ids=str)
def test_more_rooms_than_columns_is_infeasible(engine, direction) -> None:
    gallery = Gallery.from_rows([[2, 7], [1, 8]])
    for rooms in (3, 4, 7):
        solution = engine.solve(gallery, rooms, direction)
        assert solution.cost == direction.sentinel
        assert direction.is_infeasible(solution.cost)
        assert solution.plan is None


@pytest.mark.parametrize("engine", _ENGINES, ids=lambda e: e.name)
@pytest.mark.parametrize("direction", [MAX, MIN], ids=str)
@pytest.mark.timeout(5)
def test_huge_room_count_is_infeasible_without_tables(engine, direction) -> None:
    gallery = Gallery.from_rows([[1, 9, 1], [1, 1, 9]])
    solution = engine.solve(gallery, 2_000_000, direction)
    assert solution.cost == direction.sentinel
    assert solution.plan is None
    assert solution.algorithm == engine.name


@pytest.mark.parametrize("engine", _ENGINES, ids=lambda e: e.name)
def test_every_column_closed_stays_on_one_side(engine) -> None:
    gallery = Gallery.from_rows([[5, 1, 5, 1], [1, 5, 1, 5]])
    solution = engine.solve(gallery, 4, MAX)
    assert solution.cost == 12
    assert set(solution.plan.sides) == {Side.TOP} or set(solution.plan.sides) == {Side.BOTTOM}


@pytest.mark.parametrize("engine", _ENGINES, ids=lambda e: e.name)
def test_negative_rooms_is_a_contract_violation(engine) -> None:
    gallery = Gallery.from_rows([[1], [2]])
    with pytest.raises(ContractViolation):
        engine.solve(gallery, -1, MAX)


# -- engine specifics ---------------------------------------------------------


def test_backtracking_partial_column_leaves_rest_open() -> None:
    gallery = Gallery.from_rows([[1, 9, 1, 100], [1, 1, 9, 100]])
    solution = BacktrackingSolver.solve(gallery, 2, MAX, column=2)
    assert solution.cost == 10
    assert solution.plan.sides[3] is Side.NONE
    assert solution.plan.closed_count == 2


def test_backtracking_previous_side_constrains_last_column() -> None:
    gallery = Gallery.from_rows([[0, 0], [0, 9]])
    free = BacktrackingSolver.solve(gallery, 1, MAX, previous_side=Side.NONE)
    blocked = BacktrackingSolver.solve(gallery, 1, MAX, previous_side=Side.TOP)
    assert free.cost == 9
    assert blocked.cost == 0
    assert blocked.plan.sides[1] is not Side.BOTTOM


def test_backtracking_rejects_column_outside_gallery() -> None:
    gallery = Gallery.from_rows([[1, 2], [3, 4]])
    with pytest.raises(ContractViolation):
        BacktrackingSolver.solve(gallery, 1, MAX, column=2)


def test_backtracking_column_before_start_is_base_case() -> None:
    gallery = Gallery.from_rows([[1, 2], [3, 4]])
    assert BacktrackingSolver.solve(gallery, 0, MAX, column=-1).cost == 0
    assert BacktrackingSolver.solve(gallery, 1, MIN, column=-1).cost == math.inf


def test_dynamic_tables_base_column() -> None:
    gallery = Gallery.from_rows([[1, 2, 3], [4, 5, 6]])
    tables = DynamicProgrammingSolver.build_tables(gallery, 2, MAX)
    for side in Side:
        assert tables.cost[tables.at(0, 0, side)] == 0
        assert tables.advice[tables.at(0, 0, side)] is Side.NONE
        for r in (1, 2):
            assert tables.cost[tables.at(0, r, side)] == -math.inf
            assert tables.advice[tables.at(0, r, side)] is None
    assert len(tables.cost) == 4 * 3 * 3


def test_dynamic_tables_respect_neighbour_side() -> None:
    gallery = Gallery.from_rows([[0], [7]])
    tables = DynamicProgrammingSolver.build_tables(gallery, 1, MAX)
    assert tables.cost[tables.at(1, 1, Side.NONE)] == 7
    assert tables.advice[tables.at(1, 1, Side.NONE)] is Side.BOTTOM
    # A closed top room to the right rules out the bottom room here.
    assert tables.cost[tables.at(1, 1, Side.TOP)] == 0
    assert tables.advice[tables.at(1, 1, Side.TOP)] is Side.TOP


def test_ties_prefer_leaving_rooms_open_then_top() -> None:
    # Decisions run right to left, so the last column stays open.
    gallery = Gallery.from_rows([[4, 4], [4, 4]])
    for engine in _ENGINES:
        solution = engine.solve(gallery, 1, MAX)
        assert solution.plan.sides == (Side.TOP, Side.NONE), engine.name


def test_solve_dispatches_to_selected_engine() -> None:
    gallery = Gallery.from_rows([[1, 9, 1], [1, 1, 9]])
    assert solve(gallery, 2, MAX, Algorithm.backtracking).algorithm == "backtracking"
    assert solve(gallery, 2, MAX, Algorithm.dynamic).algorithm == "dynamic"
