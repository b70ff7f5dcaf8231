"""Axis-aligned rectangles and bounds."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Union

from .point import Point
from .size import Size

PointLike = Union[Point, Sequence[float]]
SizeLike = Union[Size, Sequence[float]]


def _to_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


def _to_size(value: SizeLike) -> Size:
    if isinstance(value, Size):
        return value
    width, height = value
    return Size(float(width), float(height))


def _round_half_away(value: float) -> float:
    if math.isnan(value) or math.isinf(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class Rect:
    """A rectangle, meant to be sorted and finite."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def from_origin_size(cls, origin: PointLike, size: SizeLike) -> Rect:
        origin = _to_point(origin)
        return cls.from_points(origin, origin + _to_size(size))

    @classmethod
    def from_size(cls, size: SizeLike) -> Rect:
        return cls.from_origin_size(Point(), size)

    @classmethod
    def from_points(cls, origin: PointLike, end: PointLike) -> Rect:
        origin = _to_point(origin)
        end = _to_point(end)
        return cls(origin.x, origin.y, end.x, end.y)

    def is_empty(self) -> bool:
        # Written as the negation so that NaN values count as empty.
        return not (self.left < self.right and self.top < self.bottom)

    def is_sorted(self) -> bool:
        return self.left <= self.right and self.top <= self.bottom

    def is_finite(self) -> bool:
        accum = 0.0 * self.left * self.top * self.right * self.bottom
        return not math.isnan(accum)

    def size(self) -> Size:
        return Size(self.right - self.left, self.bottom - self.top)

    def origin(self) -> Point:
        return Point(self.left, self.top)

    def center(self) -> Point:
        return Point(
            self.left * 0.5 + self.right * 0.5,
            self.top * 0.5 + self.bottom * 0.5,
        )

    def end(self) -> Point:
        return Point(self.right, self.bottom)

    def to_quad(self) -> tuple[Point, Point, Point, Point]:
        """Return the corners clockwise, starting at left / top."""
        return (
            Point(self.left, self.top),
            Point(self.right, self.top),
            Point(self.right, self.bottom),
            Point(self.left, self.bottom),
        )

    def with_inset(self, d: PointLike) -> Rect:
        d = _to_point(d)
        return Rect(self.left + d.x, self.top + d.y, self.right - d.x, self.bottom - d.y)

    def with_outset(self, d: PointLike) -> Rect:
        d = _to_point(d)
        return Rect(self.left - d.x, self.top - d.y, self.right + d.x, self.bottom + d.y)

    def intersects(self, other: Union[Rect, Bounds, Sequence[float]]) -> bool:
        other = _to_rect(other)
        left = max(self.left, other.left)
        right = min(self.right, other.right)
        top = max(self.top, other.top)
        bottom = min(self.bottom, other.bottom)
        return left < right and top < bottom

    def joined(self, other: Union[Rect, Bounds, Sequence[float]]) -> Rect:
        other = _to_rect(other)
        if other.is_empty():
            return self
        if self.is_empty():
            return other
        return Rect(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def rounded(self) -> Rect:
        return Rect(*(_round_half_away(v) for v in self.to_scalars()))

    def rounded_in(self) -> Rect:
        return Rect(
            float(math.ceil(self.left)),
            float(math.ceil(self.top)),
            float(math.floor(self.right)),
            float(math.floor(self.bottom)),
        )

    def rounded_out(self) -> Rect:
        return Rect(
            float(math.floor(self.left)),
            float(math.floor(self.top)),
            float(math.ceil(self.right)),
            float(math.ceil(self.bottom)),
        )

    def sorted(self) -> Rect:
        return Rect(
            min(self.left, self.right),
            min(self.top, self.bottom),
            max(self.left, self.right),
            max(self.top, self.bottom),
        )

    def to_scalars(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)

    def centered(self) -> Rect:
        """Move the rectangle so that its center lies at the origin."""
        return self - self.center()

    def contains(self, other: Union[Rect, PointLike]) -> bool:
        """Test whether a point or a rectangle lies inside this rectangle."""
        if isinstance(other, Rect):
            return (
                not other.is_empty()
                and not self.is_empty()
                and self.left <= other.left
                and self.top <= other.top
                and self.right >= other.right
                and self.bottom >= other.bottom
            )
        p = _to_point(other)
        return self.left <= p.x < self.right and self.top <= p.y < self.bottom

    def __add__(self, d: object) -> Rect:
        if isinstance(d, Point):
            return Rect(self.left + d.x, self.top + d.y, self.right + d.x, self.bottom + d.y)
        return NotImplemented

    def __sub__(self, d: object) -> Rect:
        if isinstance(d, Point):
            return Rect(self.left - d.x, self.top - d.y, self.right - d.x, self.bottom - d.y)
        return NotImplemented


@dataclass(frozen=True)
class Bounds:
    """A minimum and maximum corner."""

    min: Point = field(default_factory=Point)
    max: Point = field(default_factory=Point)

    def to_rect(self) -> Rect:
        return Rect.from_points(self.min, self.max)


def _to_rect(value: Union[Rect, Bounds, Sequence[float]]) -> Rect:
    if isinstance(value, Rect):
        return value
    if isinstance(value, Bounds):
        return value.to_rect()
    left, top, right, bottom = value
    return Rect(float(left), float(top), float(right), float(bottom))


def bounds_of(rects: Iterable[Rect]) -> Optional[Rect]:
    """Join all rectangles; None if there are none."""
    result: Optional[Rect] = None
    for rect in rects:
        result = rect if result is None else result.joined(rect)
    return result