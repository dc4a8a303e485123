"""Metropolis acceptance test."""

from __future__ import annotations

import math
from typing import Protocol

from rnastruct.rng import RandomNumberGenerator


class _UniformSource(Protocol):
    def rand(self) -> float: ...


class MonteCarlo:
    """Accepts or rejects moves by the Metropolis criterion."""

    def __init__(
        self, temperature: float = 1.0, rng: _UniformSource | None = None
    ) -> None:
        self.temperature = temperature
        self.rng = rng if rng is not None else RandomNumberGenerator()

    def accept(self, current: float, next_score: float) -> bool:
        """Return True if a move from ``current`` to ``next_score`` is accepted."""
        if next_score < current:
            return True
        if self.temperature == 0:
            return False
        score = math.exp((current - next_score) / self.temperature)
        return self.rng.rand() < score

    def scale_temperature(self, scale: float) -> None:
        """Multiply the temperature by ``scale``."""
        self.temperature *= scale