"""Three-component vectors and axis-aligned bounding boxes."""

from __future__ import annotations

import itertools
import math
import sys
from dataclasses import dataclass, field
from typing import Iterator, Sequence, Union

_FLOAT_MAX = sys.float_info.max


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vec3:
        """Return a vector with every component set to ``value``."""
        return cls(value, value, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Unit vector in the same direction."""
        norm = self.length()
        if norm == 0.0:
            raise ZeroDivisionError("cannot normalise a zero-length vector")
        return self / norm

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


def _vmin(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))


def _vmax(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass
class AABB:
    """An axis-aligned bounding box given by its minimum and maximum corners."""

    min: Vec3 = field(default_factory=Vec3)
    max: Vec3 = field(default_factory=Vec3)

    def center(self) -> Vec3:
        return (self.min + self.max) * 0.5

    def size(self) -> Vec3:
        return self.max - self.min

    def intersects(self, other: AABB) -> bool:
        """True when the boxes overlap or touch."""
        return all(a <= b for a, b in zip(self.min, other.max)) and all(
            a >= b for a, b in zip(self.max, other.min)
        )

    def contains(self, point: Vec3) -> bool:
        """True when ``point`` lies inside the box or on its surface."""
        return all(p >= lo for p, lo in zip(point, self.min)) and all(
            p <= hi for p, hi in zip(point, self.max)
        )

    def closest_point(self, point: Vec3) -> Vec3:
        """The point of the box nearest to ``point``."""
        return Vec3(
            *(_clamp(p, lo, hi) for p, lo, hi in zip(point, self.min, self.max))
        )

    def grow(self, other: Union[Vec3, AABB]) -> None:
        """Extend the box to enclose a point or another (non-empty) box."""
        if isinstance(other, AABB):
            if other.is_empty():
                return
            self.min = _vmin(self.min, other.min)
            self.max = _vmax(self.max, other.max)
        else:
            self.min = _vmin(self.min, other)
            self.max = _vmax(self.max, other)

    def translate(self, offset: Vec3) -> None:
        self.min = self.min + offset
        self.max = self.max + offset

    def transform(self, matrix: Sequence[Sequence[float]]) -> None:
        """Replace the box by the bounds of its corners under a 4x4 affine matrix.

        The matrix is given row by row and multiplies column vectors.
        """
        rows = [tuple(row) for row in matrix]
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("transform expects a 4x4 matrix")

        corners = [
            Vec3(x, y, z)
            for z, y, x in itertools.product(
                (self.min.z, self.max.z),
                (self.min.y, self.max.y),
                (self.min.x, self.max.x),
            )
        ]

        self.min = Vec3.splat(_FLOAT_MAX)
        self.max = Vec3.splat(-_FLOAT_MAX)
        for corner in corners:
            homogeneous = (corner.x, corner.y, corner.z, 1.0)
            moved = Vec3(
                *(sum(m * v for m, v in zip(rows[i], homogeneous)) for i in range(3))
            )
            self.grow(moved)

    @classmethod
    def empty(cls) -> AABB:
        """A box that encloses nothing; growing it by a point yields that point."""
        return cls(Vec3.splat(_FLOAT_MAX), Vec3.splat(-_FLOAT_MAX))

    def is_empty(self) -> bool:
        return any(lo > hi for lo, hi in zip(self.min, self.max))