"""Exceptions raised by the gallery solver package."""

from __future__ import annotations


class GalleryError(Exception):
    """Base class for every error raised by this package."""


class ContractViolation(GalleryError):
    """A caller broke an engine precondition (programmer error)."""


class InvalidRequest(GalleryError):
    """User-supplied input was rejected before reaching an engine."""


class SolveTimeout(GalleryError):
    """A dispatched solve did not finish before its deadline."""

    def __init__(self, algorithm: str, timeout: float) -> None:
        super().__init__(
            f"{algorithm} solve did not finish within {timeout:g}s."
        )
        self.algorithm = algorithm
        self.timeout = timeout
