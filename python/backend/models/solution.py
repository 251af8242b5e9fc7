"""Closing plans and solver results."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from backend.models.gallery import Side


@dataclass(frozen=True)
class Plan:
    """Which room (if any) is closed in each column.

    One ``Side`` per column, so no column can ever close both rooms.
    """

    sides: tuple[Side, ...]

    # -- queries --------------------------------------------------------------

    @property
    def columns(self) -> int:
        return len(self.sides)

    @property
    def closed_count(self) -> int:
        return sum(1 for side in self.sides if side is not Side.NONE)

    def is_closed(self, side: Side, column: int) -> bool:
        return side is not Side.NONE and self.sides[column] is side

    def closed_rooms(self) -> list[tuple[Side, int]]:
        """``(side, column)`` for every closed room, left to right."""
        return [(s, c) for c, s in enumerate(self.sides) if s is not Side.NONE]

    def is_legal(self) -> bool:
        """True if no two neighbouring columns close opposite rooms."""
        return not any(
            a.conflicts_with(b) for a, b in zip(self.sides, self.sides[1:])
        )

    def as_matrix(self) -> list[list[bool]]:
        """The ``2 × N`` boolean view; ``True`` means the room is closed."""
        return [
            [side is Side.TOP for side in self.sides],
            [side is Side.BOTTOM for side in self.sides],
        ]


@dataclass(frozen=True)
class Solution:
    """Result of one solve.

    ``plan`` is ``None`` exactly when no feasible plan exists, in which
    case ``cost`` holds the direction's infinite sentinel.
    """

    cost: float
    plan: Plan | None
    duration_ms: float
    algorithm: str = ""

    @property
    def feasible(self) -> bool:
        return self.plan is not None

    def to_dict(self) -> dict[str, Any]:
        """Response message: ``{cost, plan, durationMs}``.

        An infeasible solve sends ``null`` for both cost and plan.
        """
        cost = None if math.isinf(self.cost) else int(self.cost)
        return {
            "cost": cost,
            "plan": self.plan.as_matrix() if self.plan is not None else None,
            "durationMs": self.duration_ms,
        }
