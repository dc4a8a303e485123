"""Uniform random numbers with an integer range helper."""

from __future__ import annotations

import random


class RandomNumberGenerator:
    """Source of uniform floats in [0, 1) and of bounded integers."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def rand(self) -> float:
        """Return a uniform float in [0, 1)."""
        return self._random.random()

    def randrange(self, i: int) -> int:
        """Return an integer in [0, i) scaled from :meth:`rand`."""
        value = int(i * self.rand())
        return i - 1 if value == i else value