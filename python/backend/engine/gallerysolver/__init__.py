from __future__ import annotations

from enum import StrEnum

from backend.engine.gallerysolver.backtracking import BacktrackingSolver
from backend.engine.gallerysolver.dynamic import DynamicProgrammingSolver
from backend.engine.optimization import OptimizationDirection
from backend.models.gallery import Gallery
from backend.models.solution import Solution


class Algorithm(StrEnum):
    dynamic = "dynamic"
    backtracking = "backtracking"

    @property
    def label(self) -> str:
        if self is Algorithm.dynamic:
            return "dynamic programming"
        return "brute force (recursive backtracking)"


def solve(
    gallery: Gallery,
    rooms_to_close: int,
    direction: OptimizationDirection = OptimizationDirection.MAXIMIZE,
    algorithm: Algorithm = Algorithm.dynamic,
) -> Solution:
    """Solve with the chosen engine using its default entry point."""
    if algorithm is Algorithm.backtracking:
        return BacktrackingSolver.solve(gallery, rooms_to_close, direction)
    return DynamicProgrammingSolver.solve(gallery, rooms_to_close, direction)


__all__ = [
    "Algorithm",
    "BacktrackingSolver",
    "DynamicProgrammingSolver",
    "solve",
]
