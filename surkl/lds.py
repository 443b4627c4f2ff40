"""A three-dimensional low-discrepancy sequence based on the generalised golden ratio."""

from __future__ import annotations

import random


def compute_phi(d: float, precision: int = 30) -> float:
    """Return the generalised golden ratio for dimension d by fixed-point iteration."""
    x = 2.0
    for _ in range(precision):
        x = (1.0 + x) ** (1.0 / (d + 1.0))
    return x


def golden_steps() -> tuple[float, float, float]:
    """Return the per-axis increments 1/g, 1/g**2, 1/g**3 for the 3D sequence."""
    g = compute_phi(3, 40)
    return (1.0 / g, 1.0 / g**2, 1.0 / g**3)


_STEPS = golden_steps()


class GoldenLds:
    """Yields points of the additive recurrence (c + n*a) mod 1 in three dimensions."""

    def __init__(self, seed: float | None = None) -> None:
        if seed is None:
            seed = random.random()
        if not 0.0 <= seed < 1.0:
            raise ValueError(f"seed must lie in [0, 1), got {seed!r}")
        self._state = [seed, seed, seed]

    def next(self) -> tuple[float, float, float]:
        """Return the current point and advance the sequence."""
        result = tuple(self._state)
        advanced = []
        for value, step in zip(self._state, _STEPS):
            value += step
            if value >= 1.0:
                value -= 1.0
            advanced.append(value)
        self._state = advanced
        return result  # type: ignore[return-value]

    def __iter__(self):
        return self

    def __next__(self) -> tuple[float, float, float]:
        return self.next()