"""Two-dimensional points with floating point and integer coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Point:
    """A point or vector in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def abs(self) -> Point:
        return Point(abs(self.x), abs(self.y))

    def rotated_right(self, angle: float) -> Point:
        """Rotate around the origin; a positive angle rotates to the right."""
        c, s = math.cos(angle), math.sin(angle)
        x, y = self.x, self.y
        return Point(x * c - y * s, y * c + x * s)

    def scaled(self, scaling: float) -> Point:
        return self * scaling

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def with_z(self, z: float) -> tuple[float, float, float]:
        """Return the 3D point (x, y, z)."""
        return (self.x, self.y, float(z))

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __add__(self, other: object) -> Point:
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> Point:
        if isinstance(other, Point):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, factor: float) -> Point:
        if isinstance(factor, (int, float)):
            return Point(self.x * factor, self.y * factor)
        return NotImplemented

    def __truediv__(self, divisor: float) -> Point:
        if isinstance(divisor, (int, float)):
            return Point(self.x / divisor, self.y / divisor)
        return NotImplemented


Vector = Point


@dataclass(frozen=True)
class PointI:
    """A point with integer coordinates."""

    x: int = 0
    y: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.sqrt(float(self.squared_length()))

    def abs(self) -> PointI:
        return PointI(abs(self.x), abs(self.y))

    def squared_length(self) -> int:
        return self.x * self.x + self.y * self.y

    def __neg__(self) -> PointI:
        return PointI(-self.x, -self.y)

    def __add__(self, other: object) -> PointI:
        if isinstance(other, PointI):
            return PointI(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> PointI:
        if isinstance(other, PointI):
            return PointI(self.x - other.x, self.y - other.y)
        return NotImplemented