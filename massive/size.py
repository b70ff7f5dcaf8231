"""Sizes with floating point and integer extents."""

from __future__ import annotations

from dataclasses import dataclass

from .point import Point, PointI


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: float = 0.0
    height: float = 0.0

    def __mul__(self, factor: float) -> Size:
        if isinstance(factor, (int, float)):
            return Size(self.width * factor, self.height * factor)
        return NotImplemented

    def __truediv__(self, divisor: float) -> Size:
        if isinstance(divisor, (int, float)):
            return Size(self.width / divisor, self.height / divisor)
        return NotImplemented

    def __radd__(self, point: object) -> Point:
        if isinstance(point, Point):
            return Point(point.x + self.width, point.y + self.height)
        return NotImplemented

    def __rsub__(self, point: object) -> Point:
        if isinstance(point, Point):
            return Point(point.x - self.width, point.y - self.height)
        return NotImplemented


@dataclass(frozen=True)
class SizeI:
    """A non-negative integer width and height."""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"size must not be negative: {self.width}x{self.height}")

    def __mul__(self, factor: int) -> SizeI:
        if isinstance(factor, int):
            return SizeI(self.width * factor, self.height * factor)
        return NotImplemented

    def __radd__(self, point: object) -> PointI:
        if isinstance(point, PointI):
            return PointI(point.x + self.width, point.y + self.height)
        return NotImplemented

    def __rsub__(self, point: object) -> PointI:
        if isinstance(point, PointI):
            return PointI(point.x - self.width, point.y - self.height)
        return NotImplemented


def offset_point(point: Point, size: Size) -> Point:
    """Move a point by a size."""
    return point + size


def offset_point_i(point: PointI, size: SizeI) -> PointI:
    """Move an integer point by an integer size."""
    return point + size