"""Line segments between two points."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

from .point import Point


@dataclass(frozen=True)
class Line:
    """A line from `p1` to `p2`."""

    p1: Point = field(default_factory=Point)
    p2: Point = field(default_factory=Point)

    def __iter__(self) -> Iterator[Point]:
        yield self.p1
        yield self.p2

    def theta(self) -> float:
        """Angle of the line; x grows to the right, y grows downwards."""
        return math.atan2(self.p2.y - self.p1.y, self.p2.x - self.p1.x)

    def delta(self) -> Point:
        return self.p2 - self.p1

    def point_at_t(self, t: float) -> Point:
        return self.p1 + self.delta() * t

    def center(self) -> Point:
        return self.p2 + self.delta() / 2.0