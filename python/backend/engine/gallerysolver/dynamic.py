"""Dynamic-programming narrow art gallery solver.

State ``(column, r, side)`` answers: what is the best value obtainable
from columns ``0..column-1`` while closing exactly ``r`` rooms, given
that ``side`` is what was closed in column ``column`` (the neighbour to
the right)?  Column 0 is the empty prefix.

Both tables live in one flat list each, indexed through :class:`_Tables`.
"""

from __future__ import annotations

import logging
import time

from backend.engine.optimization import CANDIDATE_ORDER, OptimizationDirection
from backend.models.errors import ContractViolation
from backend.models.gallery import Gallery, Side
from backend.models.solution import Plan, Solution

logger = logging.getLogger(__name__)


class _Tables:
    """Flat ``cost`` / ``advice`` arenas for ``(N+1) × (k+1) × 3`` states."""

    __slots__ = ("rooms", "cost", "advice")

    def __init__(self, columns: int, rooms: int) -> None:
        self.rooms = rooms
        size = (columns + 1) * (rooms + 1) * len(Side)
        self.cost: list[float] = [0] * size
        self.advice: list[Side | None] = [Side.NONE] * size

    def at(self, column: int, r: int, side: Side) -> int:
        return (column * (self.rooms + 1) + r) * len(Side) + side


class DynamicProgrammingSolver:
    """Stateless solver; all methods are static.  ``O(N × k)`` time and space."""

    name = "dynamic"

    @staticmethod
    def solve(
        gallery: Gallery,
        rooms_to_close: int,
        direction: OptimizationDirection = OptimizationDirection.MAXIMIZE,
    ) -> Solution:
        if rooms_to_close < 0:
            raise ContractViolation(
                f"rooms_to_close must be non-negative, got {rooms_to_close}."
            )

        start = time.perf_counter()
        if rooms_to_close > gallery.columns:
            # Each closure uses up a column, so the last table row would be
            # all sentinels anyway.
            logger.debug(
                "dynamic: %d rooms cannot fit in %d columns",
                rooms_to_close, gallery.columns,
            )
            return Solution(
                cost=direction.sentinel,
                plan=None,
                duration_ms=(time.perf_counter() - start) * 1000,
                algorithm=DynamicProgrammingSolver.name,
            )

        tables = DynamicProgrammingSolver.build_tables(
            gallery, rooms_to_close, direction
        )
        cost, plan = DynamicProgrammingSolver.reconstruct(
            tables, gallery.columns, rooms_to_close, direction
        )
        duration_ms = (time.perf_counter() - start) * 1000

        logger.debug(
            "dynamic: %d columns, %d rooms, %s, %d states -> %s in %.2f ms",
            gallery.columns, rooms_to_close, direction.value,
            len(tables.cost), cost, duration_ms,
        )
        return Solution(
            cost=cost,
            plan=plan,
            duration_ms=duration_ms,
            algorithm=DynamicProgrammingSolver.name,
        )

    @staticmethod
    def build_tables(
        gallery: Gallery, rooms_to_close: int, direction: OptimizationDirection
    ) -> _Tables:
        """Fill the cost and advice tables column by column."""
        n, k = gallery.columns, rooms_to_close
        t = _Tables(n, k)
        cost, advice, at = t.cost, t.advice, t.at
        sentinel = direction.sentinel

        # Closing r > 0 rooms in zero columns is impossible.  Every column
        # keeps cost 0 / advice NONE for r == 0 from the initial fill.
        for r in range(1, k + 1):
            for side in Side:
                cost[at(0, r, side)] = sentinel
                advice[at(0, r, side)] = None

        for column in range(1, n + 1):
            top = gallery.value(Side.TOP, column - 1)
            bottom = gallery.value(Side.BOTTOM, column - 1)
            for r in range(1, k + 1):
                # Leaving the column open never depends on the neighbour.
                keep_open = cost[at(column - 1, r, Side.NONE)]
                close_top = cost[at(column - 1, r - 1, Side.TOP)] + top
                close_bottom = cost[at(column - 1, r - 1, Side.BOTTOM)] + bottom
                for side in Side:
                    options = {
                        Side.NONE: keep_open,
                        Side.TOP: sentinel if side is Side.BOTTOM else close_top,
                        Side.BOTTOM: sentinel if side is Side.TOP else close_bottom,
                    }
                    best_cost, choice = direction.best(
                        (options[c], c) for c in CANDIDATE_ORDER
                    )
                    cost[at(column, r, side)] = best_cost
                    advice[at(column, r, side)] = choice
        return t

    @staticmethod
    def reconstruct(
        tables: _Tables,
        columns: int,
        rooms_to_close: int,
        direction: OptimizationDirection,
    ) -> tuple[float, Plan | None]:
        """Walk the advice table from the last column back to the first."""
        cost, advice, at = tables.cost, tables.advice, tables.at

        best_cost, last_side = direction.best(
            (cost[at(columns, rooms_to_close, side)], side)
            for side in CANDIDATE_ORDER
        )
        if direction.is_infeasible(best_cost):
            return best_cost, None

        sides = [Side.NONE] * columns
        r = rooms_to_close
        for column in range(columns, 0, -1):
            chosen = advice[at(column, r, last_side)]
            if chosen is None:
                raise ContractViolation(
                    f"No advice recorded for column {column} with {r} rooms left."
                )
            if chosen is not Side.NONE:
                sides[column - 1] = chosen
                r -= 1
            last_side = chosen
        return best_cost, Plan(sides=tuple(sides))
