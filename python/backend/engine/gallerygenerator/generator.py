"""Generates galleries for the terminal frontends."""

from __future__ import annotations

import random

from backend import config
from backend.models.gallery import Gallery


class GalleryGenerator:
    """Creates randomly valued galleries."""

    @staticmethod
    def randomize(
        columns: int,
        rng: random.Random | None = None,
        low: int = config.ROOM_VALUE_MIN,
        high: int = config.ROOM_VALUE_MAX,
    ) -> Gallery:
        """Return a gallery with every room valued uniformly in ``low..high``."""
        rng = rng or random.Random()
        return Gallery.from_rows(
            [[rng.randint(low, high) for _ in range(columns)] for _ in range(2)]
        )

    @staticmethod
    def rerandomize(gallery: Gallery, rng: random.Random | None = None) -> Gallery:
        """Same shape as *gallery*, fresh random values."""
        return GalleryGenerator.randomize(gallery.columns, rng)
