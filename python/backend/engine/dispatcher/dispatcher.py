"""Runs solves in worker processes so the caller stays responsive.

A request/response pair is the whole contract: the worker receives a
:class:`SolveRequest` and answers with one :class:`Solution`.  Workers
that outlive their deadline are terminated.
"""

from __future__ import annotations

import logging
import multiprocessing
import time
from dataclasses import dataclass
from typing import Any

from backend.engine.gallerysolver import Algorithm, solve
from backend.engine.galleryinput import gallery_from_data
from backend.engine.optimization import OptimizationDirection
from backend.models.errors import InvalidRequest, SolveTimeout
from backend.models.gallery import Gallery
from backend.models.solution import Solution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveRequest:
    gallery: Gallery
    rooms_to_close: int
    direction: OptimizationDirection = OptimizationDirection.MAXIMIZE
    algorithm: Algorithm = Algorithm.dynamic

    @classmethod
    def from_message(cls, message: dict[str, Any]) -> SolveRequest:
        """Build a request from ``{gallery, roomsToClose, direction, algorithm}``."""
        try:
            rooms = message["roomsToClose"]
            direction = OptimizationDirection(message.get("direction", "maximize"))
            algorithm = Algorithm(message.get("algorithm", "dynamic"))
        except KeyError as exc:
            raise InvalidRequest(f"Request is missing {exc.args[0]!r}.") from None
        except ValueError as exc:
            raise InvalidRequest(str(exc)) from None
        if isinstance(rooms, bool) or not isinstance(rooms, int):
            raise InvalidRequest(f"roomsToClose must be an integer, got {rooms!r}.")
        if rooms < 0:
            raise InvalidRequest(f"roomsToClose must be non-negative, got {rooms}.")
        return cls(
            gallery=gallery_from_data(message),
            rooms_to_close=rooms,
            direction=direction,
            algorithm=algorithm,
        )


@dataclass(frozen=True)
class Comparison:
    """Both engines' answers to the same request."""

    backtracking: Solution
    dynamic: Solution

    @property
    def agree(self) -> bool:
        return self.backtracking.cost == self.dynamic.cost


def run_request(request: SolveRequest) -> Solution:
    """Execute *request* in the current process."""
    return solve(
        request.gallery,
        request.rooms_to_close,
        request.direction,
        request.algorithm,
    )


def dispatch(request: SolveRequest, timeout: float | None = None) -> Solution:
    """Solve *request* in a worker process.

    Raises :class:`SolveTimeout` (and kills the worker) if no answer
    arrives within *timeout* seconds.
    """
    # Pool.__exit__ terminates the worker, finished or not.
    with multiprocessing.Pool(processes=1) as pool:
        pending = pool.apply_async(run_request, (request,))
        try:
            return pending.get(timeout)
        except multiprocessing.TimeoutError:
            logger.warning(
                "%s solve of %d columns exceeded %ss; terminating worker",
                request.algorithm.value, request.gallery.columns, timeout,
            )
            raise SolveTimeout(request.algorithm.value, timeout) from None


def compare(
    gallery: Gallery,
    rooms_to_close: int,
    direction: OptimizationDirection = OptimizationDirection.MAXIMIZE,
    timeout: float | None = None,
) -> Comparison:
    """Run both engines in parallel on the same input."""
    deadline = None if timeout is None else time.monotonic() + timeout
    results: dict[Algorithm, Solution] = {}

    with multiprocessing.Pool(processes=len(Algorithm)) as pool:
        pending = {
            algorithm: pool.apply_async(
                run_request,
                (SolveRequest(gallery, rooms_to_close, direction, algorithm),),
            )
            for algorithm in Algorithm
        }
        for algorithm, result in pending.items():
            remaining = None
            if deadline is not None:
                remaining = max(0.0, deadline - time.monotonic())
            try:
                results[algorithm] = result.get(remaining)
            except multiprocessing.TimeoutError:
                logger.warning(
                    "%s solve of %d columns exceeded %ss during compare",
                    algorithm.value, gallery.columns, timeout,
                )
                raise SolveTimeout(algorithm.value, timeout) from None

    comparison = Comparison(
        backtracking=results[Algorithm.backtracking],
        dynamic=results[Algorithm.dynamic],
    )
    if not comparison.agree:
        logger.error(
            "engines disagree: backtracking=%s dynamic=%s",
            comparison.backtracking.cost, comparison.dynamic.cost,
        )
    return comparison
