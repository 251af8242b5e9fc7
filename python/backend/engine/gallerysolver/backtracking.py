"""Brute-force narrow art gallery solver (recursive backtracking)."""

from __future__ import annotations

import logging
import time

from backend.engine.optimization import CANDIDATE_ORDER, OptimizationDirection
from backend.models.errors import ContractViolation
from backend.models.gallery import Gallery, Side
from backend.models.solution import Plan, Solution

logger = logging.getLogger(__name__)

# (cost, side closed in each of columns 0..c) -- sides is None when infeasible
_Partial = tuple[float, tuple[Side, ...] | None]


class BacktrackingSolver:
    """Stateless solver; all methods are static.

    Explores every legal closing sequence from the last column down to
    the first.  Runs in ``O(3^N)``; meant as a reference for small
    galleries, not for production-size input.
    """

    name = "backtracking"

    @staticmethod
    def solve(
        gallery: Gallery,
        rooms_to_close: int,
        direction: OptimizationDirection = OptimizationDirection.MAXIMIZE,
        column: int | None = None,
        previous_side: Side = Side.NONE,
    ) -> Solution:
        """Close exactly *rooms_to_close* rooms in columns ``0..column``.

        *column* defaults to the last column of the gallery and
        *previous_side* is the room closed just right of *column*.
        Columns past *column* are left open in the returned plan.
        """
        if rooms_to_close < 0:
            raise ContractViolation(
                f"rooms_to_close must be non-negative, got {rooms_to_close}."
            )
        if column is None:
            column = gallery.columns - 1
        if not -1 <= column < gallery.columns:
            raise ContractViolation(
                f"Column {column} is outside a gallery of {gallery.columns} columns."
            )

        start = time.perf_counter()
        cost, sides = BacktrackingSolver.search(
            gallery, column, rooms_to_close, previous_side, direction
        )
        duration_ms = (time.perf_counter() - start) * 1000

        plan = None
        if sides is not None:
            padding = (Side.NONE,) * (gallery.columns - len(sides))
            plan = Plan(sides=sides + padding)

        logger.debug(
            "backtracking: %d columns, %d rooms, %s -> %s in %.2f ms",
            gallery.columns, rooms_to_close, direction.value, cost, duration_ms,
        )
        return Solution(
            cost=cost,
            plan=plan,
            duration_ms=duration_ms,
            algorithm=BacktrackingSolver.name,
        )

    @staticmethod
    def search(
        gallery: Gallery,
        column: int,
        rooms_to_close: int,
        previous_side: Side,
        direction: OptimizationDirection,
    ) -> _Partial:
        """Best ``(cost, sides)`` for columns ``0..column``."""
        if column == -1:
            if rooms_to_close == 0:
                return 0, ()
            return direction.sentinel, None

        candidates: list[tuple[float, tuple[Side, _Partial]]] = []
        for side in CANDIDATE_ORDER:
            if side is Side.NONE:
                sub = BacktrackingSolver.search(
                    gallery, column - 1, rooms_to_close, Side.NONE, direction
                )
            elif rooms_to_close == 0 or side.conflicts_with(previous_side):
                # pruned: no legal plan closes this room
                sub = (direction.sentinel, None)
            else:
                sub_cost, sub_sides = BacktrackingSolver.search(
                    gallery, column - 1, rooms_to_close - 1, side, direction
                )
                sub = (sub_cost + gallery.value(side, column), sub_sides)
            candidates.append((sub[0], (side, sub)))

        cost, (side, (_, sides)) = direction.best(candidates)
        if sides is None:
            return direction.sentinel, None
        return cost, sides + (side,)
