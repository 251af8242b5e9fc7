"""Editable gallery plus solver settings, driven by the terminal frontends."""

from __future__ import annotations

import random

from backend import config
from backend.engine.dispatcher import Comparison, SolveRequest, compare, dispatch, run_request
from backend.engine.gallerygenerator import GalleryGenerator
from backend.engine.gallerysolver import Algorithm
from backend.engine.galleryinput import validate_rooms_to_close
from backend.engine.optimization import OptimizationDirection
from backend.models.gallery import Gallery, Side
from backend.models.solution import Solution


class Workbench:
    """Holds the gallery being edited and the outcome of the last solve.

    Any edit to the gallery or settings discards the previous result.
    """

    def __init__(
        self,
        gallery: Gallery,
        rooms_to_close: int = config.DEFAULT_ROOMS_TO_CLOSE,
        direction: OptimizationDirection = OptimizationDirection.MAXIMIZE,
        algorithm: Algorithm = Algorithm.dynamic,
        timeout: float | None = config.DEFAULT_TIMEOUT,
        use_workers: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.gallery = gallery
        self.rooms_to_close = rooms_to_close
        self.direction = direction
        self.algorithm = algorithm
        self.timeout = timeout
        self.use_workers = use_workers
        self._rng = rng or random.Random()
        self.solution: Solution | None = None
        self.comparison: Comparison | None = None

    @classmethod
    def random(cls, columns: int = config.DEFAULT_COLUMNS, **kwargs) -> "Workbench":
        rng = kwargs.pop("rng", None) or random.Random()
        return cls(GalleryGenerator.randomize(columns, rng), rng=rng, **kwargs)

    # -- editing --------------------------------------------------------------

    def resize(self, columns: int) -> bool:
        """Grow or shrink the gallery.  Returns False if *columns* is out of range."""
        if not config.MIN_COLUMNS <= columns <= config.MAX_COLUMNS:
            return False
        if columns != self.gallery.columns:
            self.gallery = self.gallery.resized(columns)
            self._clear()
        return True

    def randomize(self) -> None:
        self.gallery = GalleryGenerator.rerandomize(self.gallery, self._rng)
        self._clear()

    def set_gallery(self, gallery: Gallery) -> None:
        self.gallery = gallery
        self._clear()

    def set_value(self, side: Side, column: int, value: int) -> None:
        self.gallery = self.gallery.with_value(side, column, value)
        self._clear()

    def set_rooms(self, rooms: int) -> None:
        """Set the room count, kept within ``1..columns``."""
        rooms = min(max(1, rooms), self.gallery.columns)
        if rooms != self.rooms_to_close:
            self.rooms_to_close = rooms
            self._clear()

    def adjust_rooms(self, delta: int) -> None:
        self.set_rooms(self.rooms_to_close + delta)

    def toggle_direction(self) -> None:
        self.direction = self.direction.opposite
        self._clear()

    def toggle_algorithm(self) -> None:
        self.algorithm = (
            Algorithm.backtracking
            if self.algorithm is Algorithm.dynamic
            else Algorithm.dynamic
        )
        self._clear()

    # -- solving --------------------------------------------------------------

    @property
    def backtracking_is_slow(self) -> bool:
        return self.gallery.columns > config.BACKTRACKING_COLUMN_LIMIT

    def request(self) -> SolveRequest:
        validate_rooms_to_close(self.gallery, self.rooms_to_close)
        return SolveRequest(
            gallery=self.gallery,
            rooms_to_close=self.rooms_to_close,
            direction=self.direction,
            algorithm=self.algorithm,
        )

    def solve(self) -> Solution:
        """Solve with the selected algorithm.

        Raises ``InvalidRequest`` for a bad room count and
        ``SolveTimeout`` if the worker misses its deadline.
        """
        request = self.request()
        self._clear()
        if self.use_workers:
            self.solution = dispatch(request, self.timeout)
        else:
            self.solution = run_request(request)
        return self.solution

    def compare(self) -> Comparison:
        """Solve with both algorithms side by side."""
        request = self.request()
        self._clear()
        self.comparison = compare(
            request.gallery, request.rooms_to_close, request.direction, self.timeout
        )
        return self.comparison

    # -- helpers --------------------------------------------------------------

    def _clear(self) -> None:
        self.solution = None
        self.comparison = None
