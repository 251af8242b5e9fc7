"""Gallery model for the narrow art gallery problem."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from backend.models.errors import ContractViolation


class Side(IntEnum):
    """Which room of a column is closed.  Doubles as a DP table index."""

    NONE = 0
    TOP = 1
    BOTTOM = 2

    @property
    def row(self) -> int:
        """Gallery row index of this side (``TOP`` → 0, ``BOTTOM`` → 1)."""
        if self is Side.NONE:
            raise ValueError("Side.NONE has no gallery row.")
        return self - 1

    def conflicts_with(self, neighbour: Side) -> bool:
        """True if closing *self* next to a column that closed *neighbour* blocks the corridor."""
        return {self, neighbour} == {Side.TOP, Side.BOTTOM}


@dataclass(frozen=True)
class Gallery:
    """A two-row corridor of rooms, each holding an integer value.

    Row 0 is the top row and row 1 the bottom row.  Instances are
    immutable; engines only ever read them.
    """

    top: tuple[int, ...]
    bottom: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.top) != len(self.bottom):
            raise ContractViolation(
                f"Gallery rows differ in length: top has {len(self.top)} "
                f"rooms, bottom has {len(self.bottom)}."
            )
        if not self.top:
            raise ContractViolation("A gallery needs at least one column.")
        for value in (*self.top, *self.bottom):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ContractViolation(
                    f"Room values must be integers, got {value!r}."
                )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Gallery:
        """Create a gallery from a ``[top, bottom]`` matrix.

        Example::

            Gallery.from_rows([[1, 9, 1], [1, 1, 9]])
        """
        if len(rows) != 2:
            raise ContractViolation(
                f"A gallery has exactly 2 rows, got {len(rows)}."
            )
        return cls(top=tuple(rows[0]), bottom=tuple(rows[1]))

    @classmethod
    def filled(cls, columns: int, value: int = 0) -> Gallery:
        return cls(top=(value,) * columns, bottom=(value,) * columns)

    # -- queries --------------------------------------------------------------

    @property
    def columns(self) -> int:
        return len(self.top)

    @property
    def rows(self) -> list[list[int]]:
        return [list(self.top), list(self.bottom)]

    def value(self, side: Side, column: int) -> int:
        """Value of the room on *side* of *column*."""
        return self.top[column] if side is Side.TOP else self.bottom[column]

    # -- derived galleries ----------------------------------------------------

    def resized(self, columns: int) -> Gallery:
        """Return a copy with *columns* columns.

        New columns hold rooms worth 0; extra columns are dropped.
        """
        if columns < 1:
            raise ContractViolation("A gallery needs at least one column.")
        pad = max(0, columns - self.columns)
        return Gallery(
            top=(self.top + (0,) * pad)[:columns],
            bottom=(self.bottom + (0,) * pad)[:columns],
        )

    def with_value(self, side: Side, column: int, value: int) -> Gallery:
        """Return a copy with one room's value replaced."""
        rows = self.rows
        rows[side.row][column] = value
        return Gallery.from_rows(rows)

    def negated(self) -> Gallery:
        return Gallery(
            top=tuple(-v for v in self.top),
            bottom=tuple(-v for v in self.bottom),
        )
