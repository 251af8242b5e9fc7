"""Maximize / minimize policy shared by every gallery solver."""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import StrEnum
from typing import TypeVar

from backend.models.errors import ContractViolation
from backend.models.gallery import Side

T = TypeVar("T")

# Order in which every engine enumerates the choices for a column.  Ties
# keep the earliest entry, so NONE beats TOP beats BOTTOM.
CANDIDATE_ORDER: tuple[Side, ...] = (Side.NONE, Side.TOP, Side.BOTTOM)


class OptimizationDirection(StrEnum):
    MAXIMIZE = "maximize"
    MINIMIZE = "minimize"

    @classmethod
    def from_flag(cls, maximize: bool) -> OptimizationDirection:
        return cls.MAXIMIZE if maximize else cls.MINIMIZE

    @property
    def opposite(self) -> OptimizationDirection:
        if self is OptimizationDirection.MAXIMIZE:
            return OptimizationDirection.MINIMIZE
        return OptimizationDirection.MAXIMIZE

    @property
    def sentinel(self) -> float:
        """Cost of an infeasible (partial) solution."""
        return -math.inf if self is OptimizationDirection.MAXIMIZE else math.inf

    def is_infeasible(self, cost: float) -> bool:
        return cost == self.sentinel

    def is_better(self, a: float, b: float) -> bool:
        """True if *a* is strictly better than *b*."""
        if self is OptimizationDirection.MAXIMIZE:
            return a > b
        return a < b

    def best(self, candidates: Iterable[tuple[float, T]]) -> tuple[float, T]:
        """Return the best ``(cost, candidate)`` pair.

        Candidates are scanned in order and only a strictly better cost
        replaces the current best, so ties keep the earliest candidate.
        """
        it = iter(candidates)
        try:
            best = next(it)
        except StopIteration:
            raise ContractViolation(
                "best() needs at least one candidate."
            ) from None
        for pair in it:
            if self.is_better(pair[0], best[0]):
                best = pair
        return best
