"""Seedable random helpers for gameplay."""

from __future__ import annotations

import math
from random import Random as _Engine
from typing import Optional, Sequence

from petrol_survivor.aabb import Vec3

_TWO_PI_APPROX = 2.0 * 3.14159265


class Random:
    """A random source with the draws gameplay code needs."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._engine = _Engine(seed)

    def rand_int(self, low: int, high: int) -> int:
        """Integer in ``[low, high]``."""
        return self._engine.randint(low, high)

    def rand_float(self, low: float = 0.0, high: float = 1.0) -> float:
        """Float between ``low`` and ``high``."""
        return self._engine.uniform(low, high)

    def rand_weighted(self, low: int, high: int, weights: Sequence[float]) -> int:
        """Integer in ``[low, high]`` where ``weights[i]`` weighs ``low + i``."""
        weights = list(weights)
        if len(weights) != high - low + 1:
            raise ValueError("weights must hold one entry per value in [low, high]")
        index = self._engine.choices(range(len(weights)), weights=weights)[0]
        return low + index

    def rand_chance(self, prob: float) -> bool:
        """True with probability ``prob``."""
        return self._engine.random() < prob

    def rand_vec3(self, low: float, high: float) -> Vec3:
        return Vec3(
            self.rand_float(low, high),
            self.rand_float(low, high),
            self.rand_float(low, high),
        )

    def rand_vec3_circle(self, radius: float) -> Vec3:
        """A point on the horizontal circle of ``radius`` around the origin."""
        angle = self.rand_float(0.0, _TWO_PI_APPROX)
        return Vec3(math.cos(angle) * radius, 0.0, math.sin(angle) * radius)

    def set_seed(self, seed: int) -> None:
        self._engine.seed(seed)